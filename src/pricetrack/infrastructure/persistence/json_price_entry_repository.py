"""JSON-file-backed implementation of PriceEntryRepository.

Prices are written as decimal strings; numeric prices (as produced by
older exports) are accepted on read.
"""

from __future__ import annotations

from pricetrack.domain.exceptions import CorruptDataError, ValidationError
from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.value_objects import Money, parse_instant
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
    text_field,
)

COLLECTION = "priceEntries"


class JsonPriceEntryRepository(PriceEntryRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- PriceEntryRepository interface ---------------------------------------

    def get_by_id(self, entry_id: str) -> PriceEntry | None:
        for raw in self._store.load_records(COLLECTION):
            if raw.get("id") == entry_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[PriceEntry]:
        return [self._to_domain(raw) for raw in self._store.load_records(COLLECTION)]

    def save(self, entry: PriceEntry) -> None:
        records = self._store.load_records(COLLECTION)
        for i, raw in enumerate(records):
            if raw.get("id") == entry.id:
                records[i] = self._to_raw(entry)
                break
        else:
            records.append(self._to_raw(entry))
        self._store.save(COLLECTION, records)

    def delete(self, entry_id: str) -> bool:
        return self._remove_where("id", entry_id) > 0

    def delete_for_supplier(self, supplier_id: str) -> int:
        return self._remove_where("supplierId", supplier_id)

    def delete_for_product(self, product_id: str) -> int:
        return self._remove_where("productId", product_id)

    # --- Helpers --------------------------------------------------------------

    def _remove_where(self, key: str, value: str) -> int:
        records = self._store.load_records(COLLECTION)
        kept = [raw for raw in records if raw.get(key) != value]
        removed = len(records) - len(kept)
        if removed:
            self._store.save(COLLECTION, kept)
        return removed

    @staticmethod
    def _to_raw(entry: PriceEntry) -> dict:
        return {
            "id": entry.id,
            "productId": entry.product_id,
            "supplierId": entry.supplier_id,
            "price": str(entry.price.amount),
            "date": entry.date.isoformat(),
            "notes": entry.notes,
        }

    @staticmethod
    def _to_domain(raw: dict) -> PriceEntry:
        def text(key: str, default: str | None = None) -> str:
            return text_field(COLLECTION, raw, key, default)

        try:
            return PriceEntry(
                id=text("id"),
                product_id=text("productId"),
                supplier_id=text("supplierId"),
                price=Money.of(raw["price"]),
                date=parse_instant(raw["date"]),
                notes=text("notes", ""),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise CorruptDataError(COLLECTION, f"{exc!s} in {raw!r}") from exc
