"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pricetrack.domain.model.product import Product
from pricetrack.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, category: str, unit: str, description: str = "") -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name, category=category, unit=unit, description=description
        )
        self._product_repo.save(product)
        logger.info("Added product %s (%s)", product.id, product.name)
        return product
