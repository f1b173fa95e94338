"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from pricetrack.application.compare_prices import load_snapshot, to_comparison_dto
from pricetrack.application.dto import DashboardDTO
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository
from pricetrack.domain.service.price_comparison_service import compute_price_comparisons
from pricetrack.domain.service.price_insights_service import (
    best_deals,
    recent_price_changes,
)

DEFAULT_LIMIT = 4


class ShowDashboardHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
        price_entry_repo: PriceEntryRepository,
        recent_limit: int = DEFAULT_LIMIT,
        deals_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo
        self._price_entry_repo = price_entry_repo
        self._recent_limit = recent_limit
        self._deals_limit = deals_limit

    def handle(self) -> DashboardDTO:
        snapshot = load_snapshot(
            self._product_repo, self._supplier_repo, self._price_entry_repo
        )
        comparisons = compute_price_comparisons(
            snapshot.products, snapshot.suppliers, snapshot.price_entries
        )
        return DashboardDTO(
            product_count=len(snapshot.products),
            supplier_count=len(snapshot.suppliers),
            price_entry_count=len(snapshot.price_entries),
            recent_changes=[
                to_comparison_dto(c)
                for c in recent_price_changes(comparisons, self._recent_limit)
            ],
            best_deals=[
                to_comparison_dto(c) for c in best_deals(comparisons, self._deals_limit)
            ],
        )
