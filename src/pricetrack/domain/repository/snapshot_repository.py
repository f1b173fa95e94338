"""Abstract raw access to all three collections at once.

Used by export, import and reset. Records pass through verbatim as
JSON-compatible dicts; no shape validation happens here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

COLLECTIONS = ("suppliers", "products", "priceEntries")


class SnapshotRepository(ABC):

    @abstractmethod
    def export_collections(self) -> dict[str, list[dict]]:
        """Return every collection keyed by its name."""

    @abstractmethod
    def replace_collection(self, name: str, records: list[dict]) -> None:
        """Overwrite one collection with the given records."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every collection."""
