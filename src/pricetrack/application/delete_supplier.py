"""Application service: Delete Supplier use case.

Price entries of the supplier are removed *before* the supplier itself,
so no stored entry ever points at a missing supplier.
"""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class DeleteSupplierHandler:

    def __init__(
        self,
        supplier_repo: SupplierRepository,
        price_entry_repo: PriceEntryRepository,
    ) -> None:
        self._supplier_repo = supplier_repo
        self._price_entry_repo = price_entry_repo

    def handle(self, supplier_id: str) -> int:
        """Delete a supplier and its prices. Returns the number of prices removed."""
        if self._supplier_repo.get_by_id(supplier_id) is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")

        removed = self._price_entry_repo.delete_for_supplier(supplier_id)
        self._supplier_repo.delete(supplier_id)
        logger.info("Deleted supplier %s and %d price entries", supplier_id, removed)
        return removed
