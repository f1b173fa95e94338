"""Application service: List Products and Categories use cases (queries)."""

from __future__ import annotations

from pricetrack.application.dto import ProductDTO, format_date
from pricetrack.application.sorting import sort_records
from pricetrack.domain.repository.product_repository import ProductRepository
from pricetrack.domain.service.price_insights_service import product_categories

SORT_KEYS = {
    "name": lambda p: p.name.casefold(),
    "category": lambda p: p.category.casefold(),
    "createdAt": lambda p: p.created_at,
}


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        search: str = "",
        category: str = "",
        sort_key: str = "name",
        direction: str = "asc",
    ) -> list[ProductDTO]:
        products = [
            p for p in self._product_repo.list_all()
            if (not search or p.matches(search))
            and (not category or p.category == category)
        ]
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                category=p.category,
                unit=p.unit,
                description=p.description,
                created_at=format_date(p.created_at),
            )
            for p in sort_records(products, SORT_KEYS, sort_key, direction)
        ]


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return product_categories(self._product_repo.list_all())
