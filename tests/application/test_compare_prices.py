"""Integration tests for the comparison, dashboard and history queries."""

import pytest

from pricetrack.application.compare_prices import ComparePricesHandler
from pricetrack.application.show_dashboard import ShowDashboardHandler
from pricetrack.application.show_price_history import ShowPriceHistoryHandler
from pricetrack.domain.exceptions import EntityNotFoundError
from tests.builders import make_entry, make_product, make_supplier
from tests.fakes import (
    FakePriceEntryRepository,
    FakeProductRepository,
    FakeSupplierRepository,
)


def _repos(entries=None):
    products = FakeProductRepository([
        make_product("p1", "Rice", category="Grains"),
        make_product("p2", "Grains Mix", category="Breakfast"),
    ])
    suppliers = FakeSupplierRepository([make_supplier("s1", "A"), make_supplier("s2", "B")])
    prices = FakePriceEntryRepository(entries if entries is not None else [
        make_entry("e1", "p1", "s1", 10, "2024-01-01"),
        make_entry("e2", "p1", "s1", 12, "2024-02-01"),
        make_entry("e3", "p2", "s2", "3.5", "2024-01-15"),
    ])
    return products, suppliers, prices


class TestComparePrices:

    def test_formats_rows(self):
        [rice, _] = ComparePricesHandler(*_repos()).handle()

        a, b = rice.rows
        assert (a.current_price, a.previous_price, a.change) == ("$12.00", "$10.00", "+20.00%")
        assert a.last_updated == "Feb 1, 2024"
        assert a.is_best
        assert (b.current_price, b.previous_price, b.change, b.last_updated) == (
            "—", "—", "—", "",
        )
        assert not b.is_best
        assert (rice.best_supplier, rice.best_price) == ("A", "$12.00")

    def test_no_prices_means_no_best(self):
        comparisons = ComparePricesHandler(*_repos(entries=[])).handle()
        assert all(c.best_supplier is None for c in comparisons)
        assert all(not row.is_best for c in comparisons for row in c.rows)

    def test_category_filter_uses_product_category(self):
        result = ComparePricesHandler(*_repos()).handle(category="Grains")
        assert [c.product_name for c in result] == ["Rice"]

    def test_reflects_store_changes_on_next_call(self):
        products, suppliers, prices = _repos()
        handler = ComparePricesHandler(products, suppliers, prices)
        assert handler.handle()[0].rows[0].current_price == "$12.00"

        prices.save(make_entry("e9", "p1", "s1", 15, "2024-03-01"))
        assert handler.handle()[0].rows[0].current_price == "$15.00"

    def test_empty_store(self):
        handler = ComparePricesHandler(
            FakeProductRepository(), FakeSupplierRepository(), FakePriceEntryRepository()
        )
        assert handler.handle() == []


class TestShowDashboard:

    def test_counts_and_rankings(self):
        dto = ShowDashboardHandler(*_repos()).handle()
        assert (dto.product_count, dto.supplier_count, dto.price_entry_count) == (2, 2, 3)
        assert [c.product_name for c in dto.recent_changes] == ["Rice"]
        assert [c.product_name for c in dto.best_deals] == ["Grains Mix", "Rice"]

    def test_limits_are_applied(self):
        dto = ShowDashboardHandler(*_repos(), recent_limit=0, deals_limit=1).handle()
        assert dto.recent_changes == []
        assert len(dto.best_deals) == 1


class TestShowPriceHistory:

    def test_history_for_product(self):
        dto = ShowPriceHistoryHandler(*_repos()).handle("p1")
        assert dto.product_name == "Rice"
        assert dto.unit == "kg"
        [supplier] = dto.suppliers
        assert supplier.supplier_name == "A"
        assert [p.price for p in supplier.points] == ["$10.00", "$12.00"]
        assert [p.date for p in supplier.points] == ["Jan 1, 2024", "Feb 1, 2024"]

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            ShowPriceHistoryHandler(*_repos()).handle("p9")
