"""JSON-file-backed implementation of SnapshotRepository."""

from __future__ import annotations

from pricetrack.domain.repository.snapshot_repository import (
    COLLECTIONS,
    SnapshotRepository,
)
from pricetrack.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)


class JsonSnapshotRepository(SnapshotRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    def export_collections(self) -> dict[str, list[dict]]:
        return {name: self._store.load(name) for name in COLLECTIONS}

    def replace_collection(self, name: str, records: list[dict]) -> None:
        self._store.save(name, records)

    def clear(self) -> None:
        for name in COLLECTIONS:
            self._store.clear(name)
