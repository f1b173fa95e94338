"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pricetrack.domain.exceptions import EntityNotFoundError
from pricetrack.domain.model.product import Product
from pricetrack.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, **changes: str | None) -> Product:
        """Change some fields of a product.

        Existing price entries are untouched; comparisons pick up the new
        name the next time they are computed.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update(changes)
        self._product_repo.save(product)
        logger.info("Updated product %s", product_id)
        return product
