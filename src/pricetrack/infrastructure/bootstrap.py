"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings are read at
call time so the data directory can be redirected (e.g. in tests).
"""

from __future__ import annotations

from pricetrack.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)
from pricetrack.infrastructure.persistence.json_price_entry_repository import (
    JsonPriceEntryRepository,
)
from pricetrack.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pricetrack.infrastructure.persistence.json_snapshot_repository import (
    JsonSnapshotRepository,
)
from pricetrack.infrastructure.persistence.json_supplier_repository import (
    JsonSupplierRepository,
)
from pricetrack.infrastructure.settings import Settings


def collection_store() -> JsonCollectionStore:
    return JsonCollectionStore(Settings.DATA_DIR)


def supplier_repository() -> JsonSupplierRepository:
    return JsonSupplierRepository(collection_store())


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(collection_store())


def price_entry_repository() -> JsonPriceEntryRepository:
    return JsonPriceEntryRepository(collection_store())


def snapshot_repository() -> JsonSnapshotRepository:
    return JsonSnapshotRepository(collection_store())
