"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pricetrack.domain.exceptions import CorruptDataError, ValidationError
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.value_objects import parse_instant
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
    text_field,
)

COLLECTION = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load_records(COLLECTION):
            if raw.get("id") == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load_records(COLLECTION)]

    def save(self, product: Product) -> None:
        records = self._store.load_records(COLLECTION)
        for i, raw in enumerate(records):
            if raw.get("id") == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._store.save(COLLECTION, records)

    def delete(self, product_id: str) -> bool:
        records = self._store.load_records(COLLECTION)
        kept = [raw for raw in records if raw.get("id") != product_id]
        if len(kept) == len(records):
            return False
        self._store.save(COLLECTION, kept)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "unit": product.unit,
            "description": product.description,
            "createdAt": product.created_at.isoformat(),
            "updatedAt": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        def text(key: str, default: str | None = None) -> str:
            return text_field(COLLECTION, raw, key, default)

        try:
            return Product(
                id=text("id"),
                name=text("name"),
                category=text("category"),
                unit=text("unit"),
                description=text("description", ""),
                created_at=parse_instant(raw["createdAt"]),
                updated_at=parse_instant(raw.get("updatedAt", raw["createdAt"])),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise CorruptDataError(COLLECTION, f"{exc!s} in {raw!r}") from exc
