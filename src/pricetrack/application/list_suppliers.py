"""Application service: List Suppliers use case (query)."""

from __future__ import annotations

from pricetrack.application.dto import SupplierDTO, format_date
from pricetrack.application.sorting import sort_records
from pricetrack.domain.repository.supplier_repository import SupplierRepository

SORT_KEYS = {
    "name": lambda s: s.name.casefold(),
    "createdAt": lambda s: s.created_at,
}


class ListSuppliersHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self, search: str = "", sort_key: str = "name", direction: str = "asc"
    ) -> list[SupplierDTO]:
        suppliers = [
            s for s in self._supplier_repo.list_all()
            if not search or s.matches(search)
        ]
        return [
            SupplierDTO(
                id=s.id,
                name=s.name,
                contact=s.contact,
                phone=s.phone,
                address=s.address,
                notes=s.notes,
                created_at=format_date(s.created_at),
            )
            for s in sort_records(suppliers, SORT_KEYS, sort_key, direction)
        ]
