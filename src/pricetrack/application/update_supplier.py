"""Application service: Update Supplier use case."""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class UpdateSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: str, **changes: str | None) -> Supplier:
        """Change some fields of a supplier; omitted or None fields stay as they are."""
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier with ID '{supplier_id}' not found")

        supplier.update(changes)
        self._supplier_repo.save(supplier)
        logger.info("Updated supplier %s", supplier_id)
        return supplier
