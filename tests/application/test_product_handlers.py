"""Integration tests for the product use cases."""

import pytest

from pricetrack.application.add_product import AddProductHandler
from pricetrack.application.delete_product import DeleteProductHandler
from pricetrack.application.list_products import ListCategoriesHandler, ListProductsHandler
from pricetrack.application.update_product import UpdateProductHandler
from pricetrack.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_entry, make_product
from tests.fakes import FakePriceEntryRepository, FakeProductRepository


class TestAddProduct:

    def test_persists_product(self):
        repo = FakeProductRepository()
        product = AddProductHandler(repo).handle(name="Rice", category="Grains", unit="kg")
        assert repo.get_by_id(product.id).name == "Rice"

    def test_category_required(self):
        with pytest.raises(ValidationError, match="Category is required"):
            AddProductHandler(FakeProductRepository()).handle(name="Rice", category="", unit="kg")


class TestUpdateProduct:

    def test_partial_update(self):
        repo = FakeProductRepository([make_product("p1", "Rice", unit="kg")])
        UpdateProductHandler(repo).handle("p1", unit="bag")
        product = repo.get_by_id("p1")
        assert product.unit == "bag"
        assert product.name == "Rice"

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product with ID 'p9' not found"):
            UpdateProductHandler(FakeProductRepository()).handle("p9", name="X")


class TestDeleteProduct:

    def test_cascades_to_price_entries(self):
        products = FakeProductRepository([make_product("p1", "Rice"), make_product("p2", "Oil")])
        entries = FakePriceEntryRepository([
            make_entry("e1", "p1", "s1", 10, "2024-01-01"),
            make_entry("e2", "p2", "s1", 11, "2024-01-01"),
        ])
        assert DeleteProductHandler(products, entries).handle("p1") == 1
        assert [p.id for p in products.list_all()] == ["p2"]
        assert [e.id for e in entries.list_all()] == ["e2"]


class TestListProducts:

    def _repo(self):
        return FakeProductRepository([
            make_product("p1", "Rice", category="Grains", description="long grain"),
            make_product("p2", "Oil", category="Oils"),
            make_product("p3", "Barley", category="Grains"),
        ])

    def test_default_sort_by_name(self):
        assert [p.name for p in ListProductsHandler(self._repo()).handle()] == [
            "Barley", "Oil", "Rice",
        ]

    def test_sort_by_category_is_stable(self):
        result = ListProductsHandler(self._repo()).handle(sort_key="category")
        assert [p.id for p in result] == ["p1", "p3", "p2"]

    def test_category_filter_is_exact(self):
        result = ListProductsHandler(self._repo()).handle(category="Grain")
        assert result == []

    def test_search_description(self):
        result = ListProductsHandler(self._repo()).handle(search="LONG")
        assert [p.id for p in result] == ["p1"]


class TestListCategories:

    def test_distinct_sorted(self):
        assert ListCategoriesHandler(
            FakeProductRepository([
                make_product("p1", "Rice", category="Grains"),
                make_product("p2", "Oil", category="Oils"),
                make_product("p3", "Barley", category="Grains"),
            ])
        ).handle() == ["Grains", "Oils"]
