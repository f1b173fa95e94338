"""JSON-file-backed implementation of SupplierRepository."""

from __future__ import annotations

from pricetrack.domain.exceptions import CorruptDataError, ValidationError
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.model.value_objects import parse_instant
from pricetrack.domain.repository.supplier_repository import SupplierRepository
from pricetrack.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
    text_field,
)

COLLECTION = "suppliers"


class JsonSupplierRepository(SupplierRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- SupplierRepository interface -----------------------------------------

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        for raw in self._store.load_records(COLLECTION):
            if raw.get("id") == supplier_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Supplier]:
        return [self._to_domain(raw) for raw in self._store.load_records(COLLECTION)]

    def save(self, supplier: Supplier) -> None:
        records = self._store.load_records(COLLECTION)
        for i, raw in enumerate(records):
            if raw.get("id") == supplier.id:
                records[i] = self._to_raw(supplier)
                break
        else:
            records.append(self._to_raw(supplier))
        self._store.save(COLLECTION, records)

    def delete(self, supplier_id: str) -> bool:
        records = self._store.load_records(COLLECTION)
        kept = [raw for raw in records if raw.get("id") != supplier_id]
        if len(kept) == len(records):
            return False
        self._store.save(COLLECTION, kept)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(supplier: Supplier) -> dict:
        return {
            "id": supplier.id,
            "name": supplier.name,
            "contact": supplier.contact,
            "phone": supplier.phone,
            "address": supplier.address,
            "notes": supplier.notes,
            "createdAt": supplier.created_at.isoformat(),
            "updatedAt": supplier.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Supplier:
        def text(key: str, default: str | None = None) -> str:
            return text_field(COLLECTION, raw, key, default)

        try:
            return Supplier(
                id=text("id"),
                name=text("name"),
                contact=text("contact", ""),
                phone=text("phone"),
                address=text("address", ""),
                notes=text("notes", ""),
                created_at=parse_instant(raw["createdAt"]),
                updated_at=parse_instant(raw.get("updatedAt", raw["createdAt"])),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise CorruptDataError(COLLECTION, f"{exc!s} in {raw!r}") from exc
