"""Abstract repository for PriceEntry records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricetrack.domain.model.price_entry import PriceEntry


class PriceEntryRepository(ABC):

    @abstractmethod
    def get_by_id(self, entry_id: str) -> PriceEntry | None:
        """Return a price entry by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[PriceEntry]:
        """Return every price entry in insertion order."""

    @abstractmethod
    def save(self, entry: PriceEntry) -> None:
        """Persist a new or updated price entry."""

    @abstractmethod
    def delete(self, entry_id: str) -> bool:
        """Remove one entry. Returns False if it did not exist."""

    @abstractmethod
    def delete_for_supplier(self, supplier_id: str) -> int:
        """Remove every entry of a supplier. Returns how many were removed."""

    @abstractmethod
    def delete_for_product(self, product_id: str) -> int:
        """Remove every entry of a product. Returns how many were removed."""
