"""Application service: Show Price History use case (query)."""

from __future__ import annotations

from pricetrack.application.dto import (
    HistoryPointDTO,
    PriceHistoryDTO,
    SupplierHistoryDTO,
    format_date,
)
from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository
from pricetrack.domain.service.price_insights_service import price_history


class ShowPriceHistoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
        price_entry_repo: PriceEntryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo
        self._price_entry_repo = price_entry_repo

    def handle(self, product_id: str) -> PriceHistoryDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        histories = price_history(
            product, self._supplier_repo.list_all(), self._price_entry_repo.list_all()
        )
        return PriceHistoryDTO(
            product_name=product.name,
            unit=product.unit,
            suppliers=[
                SupplierHistoryDTO(
                    supplier_name=h.supplier_name,
                    points=[
                        HistoryPointDTO(
                            entry_id=e.id,
                            date=format_date(e.date),
                            price=str(e.price),
                            notes=e.notes,
                        )
                        for e in h.entries
                    ],
                )
                for h in histories
            ],
        )
