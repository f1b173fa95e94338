"""Application service: Delete Product use case.

Cascades to the product's price entries, which are removed first.
"""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.repository.price_entry_repository import PriceEntryRepository
from pricetrack.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_entry_repo: PriceEntryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._price_entry_repo = price_entry_repo

    def handle(self, product_id: str) -> int:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        removed = self._price_entry_repo.delete_for_product(product_id)
        self._product_repo.delete(product_id)
        logger.info("Deleted product %s and %d price entries", product_id, removed)
        return removed
