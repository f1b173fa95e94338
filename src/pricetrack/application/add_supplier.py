"""Application service: Add Supplier use case."""

from __future__ import annotations

import logging

from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class AddSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        name: str,
        phone: str,
        contact: str = "",
        address: str = "",
        notes: str = "",
    ) -> Supplier:
        """Register a new supplier."""
        supplier = Supplier.create(
            name=name, phone=phone, contact=contact, address=address, notes=notes
        )
        self._supplier_repo.save(supplier)
        logger.info("Added supplier %s (%s)", supplier.id, supplier.name)
        return supplier
