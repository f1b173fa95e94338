"""Application service: Compare Prices use case (query).

Loads a fresh snapshot from the three repositories, runs the comparison
engine over it and maps the result to display DTOs. Nothing is cached:
callers that change the store simply ask again.
"""

from __future__ import annotations

from pricetrack.application.dto import ComparisonRowDTO, PriceComparisonDTO, format_date
from pricetrack.domain.model.comparison import PriceComparison
from pricetrack.domain.model.snapshot import Snapshot
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository
from pricetrack.domain.service.price_comparison_service import (
    MISSING_VALUE,
    compute_price_comparisons,
    find_best_supplier,
    format_percentage,
)
from pricetrack.domain.service.price_insights_service import filter_comparisons


def load_snapshot(
    product_repo: ProductRepository,
    supplier_repo: SupplierRepository,
    price_entry_repo: PriceEntryRepository,
) -> Snapshot:
    return Snapshot(
        products=tuple(product_repo.list_all()),
        suppliers=tuple(supplier_repo.list_all()),
        price_entries=tuple(price_entry_repo.list_all()),
    )


def to_comparison_dto(comparison: PriceComparison) -> PriceComparisonDTO:
    best = find_best_supplier(comparison)
    return PriceComparisonDTO(
        product_id=comparison.product_id,
        product_name=comparison.product_name,
        rows=[
            ComparisonRowDTO(
                supplier_id=row.supplier_id,
                supplier_name=row.supplier_name,
                current_price=str(row.current_price) if row.has_price else MISSING_VALUE,
                previous_price=(
                    str(row.previous_price) if row.previous_price is not None
                    else MISSING_VALUE
                ),
                change=format_percentage(row.price_change),
                last_updated=format_date(row.last_updated),
                is_best=best is not None and best.supplier_id == row.supplier_id,
            )
            for row in comparison.suppliers
        ],
        best_supplier=best.supplier_name if best else None,
        best_price=str(best.price) if best else None,
    )


class ComparePricesHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
        price_entry_repo: PriceEntryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo
        self._price_entry_repo = price_entry_repo

    def handle(self, search: str = "", category: str = "") -> list[PriceComparisonDTO]:
        snapshot = load_snapshot(
            self._product_repo, self._supplier_repo, self._price_entry_repo
        )
        comparisons = compute_price_comparisons(
            snapshot.products, snapshot.suppliers, snapshot.price_entries
        )
        selected = filter_comparisons(comparisons, snapshot.products, search, category)
        return [to_comparison_dto(c) for c in selected]
