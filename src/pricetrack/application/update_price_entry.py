"""Application service: Update Price Entry use case."""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class UpdatePriceEntryHandler:

    def __init__(
        self,
        price_entry_repo: PriceEntryRepository,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._price_entry_repo = price_entry_repo
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo

    def handle(
        self,
        entry_id: str,
        product_id: str | None = None,
        supplier_id: str | None = None,
        price: str | None = None,
        date: str | None = None,
        notes: str | None = None,
    ) -> PriceEntry:
        entry = self._price_entry_repo.get_by_id(entry_id)
        if entry is None:
            raise EntityNotFoundError(f"Price entry with ID '{entry_id}' not found")
        if product_id and self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if supplier_id and self._supplier_repo.get_by_id(supplier_id) is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")

        entry.update(
            product_id=product_id,
            supplier_id=supplier_id,
            price=price,
            date=date,
            notes=notes,
        )
        self._price_entry_repo.save(entry)
        logger.info("Updated price entry %s", entry_id)
        return entry
