"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.repository.snapshot_repository import (
    COLLECTIONS,
    SnapshotRepository,
)
from pricetrack.domain.repository.supplier_repository import SupplierRepository


class FakeSupplierRepository(SupplierRepository):

    def __init__(self, suppliers: list[Supplier] | None = None) -> None:
        self._store: dict[str, Supplier] = {}
        for s in suppliers or []:
            self._store[s.id] = s

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        return self._store.get(supplier_id)

    def list_all(self) -> list[Supplier]:
        return list(self._store.values())

    def save(self, supplier: Supplier) -> None:
        self._store[supplier.id] = supplier

    def delete(self, supplier_id: str) -> bool:
        return self._store.pop(supplier_id, None) is not None


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakePriceEntryRepository(PriceEntryRepository):

    def __init__(self, entries: list[PriceEntry] | None = None) -> None:
        self._store: dict[str, PriceEntry] = {}
        for e in entries or []:
            self._store[e.id] = e

    def get_by_id(self, entry_id: str) -> PriceEntry | None:
        return self._store.get(entry_id)

    def list_all(self) -> list[PriceEntry]:
        return list(self._store.values())

    def save(self, entry: PriceEntry) -> None:
        self._store[entry.id] = entry

    def delete(self, entry_id: str) -> bool:
        return self._store.pop(entry_id, None) is not None

    def delete_for_supplier(self, supplier_id: str) -> int:
        return self._remove(lambda e: e.supplier_id == supplier_id)

    def delete_for_product(self, product_id: str) -> int:
        return self._remove(lambda e: e.product_id == product_id)

    def _remove(self, predicate) -> int:
        doomed = [k for k, e in self._store.items() if predicate(e)]
        for key in doomed:
            del self._store[key]
        return len(doomed)


class FakeSnapshotRepository(SnapshotRepository):

    def __init__(self, collections: dict[str, list[dict]] | None = None) -> None:
        self._collections: dict[str, list[dict]] = copy.deepcopy(collections or {})

    def export_collections(self) -> dict[str, list[dict]]:
        return {name: copy.deepcopy(self._collections.get(name, [])) for name in COLLECTIONS}

    def replace_collection(self, name: str, records: list[dict]) -> None:
        self._collections[name] = copy.deepcopy(records)

    def clear(self) -> None:
        self._collections.clear()
