"""Application service: Delete Price Entry use case."""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository

logger = logging.getLogger(__name__)


class DeletePriceEntryHandler:

    def __init__(self, price_entry_repo: PriceEntryRepository) -> None:
        self._price_entry_repo = price_entry_repo

    def handle(self, entry_id: str) -> None:
        if not self._price_entry_repo.delete(entry_id):
            raise EntityNotFoundError(f"Price entry with ID '{entry_id}' not found")
        logger.info("Deleted price entry %s", entry_id)
