"""Application service: Add Price Entry use case.

This is the boundary where a new price is validated: the product and
supplier must exist, the price must be positive and the date well formed.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class AddPriceEntryHandler:

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
        product_id: str,
        supplier_id: str,
        price: str,
        date: str | datetime,
        notes: str = "",
    ) -> PriceEntry:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if self._supplier_repo.get_by_id(supplier_id) is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")

        entry = PriceEntry.create(
            product_id=product_id,
            supplier_id=supplier_id,
            price=price,
            date=date,
            notes=notes,
        )
        self._price_entry_repo.save(entry)
        logger.info(
            "Recorded price %s for product %s at supplier %s",
            entry.price, product_id, supplier_id,
        )
        return entry
