"""Domain service: Price Insights.

Views derived from the catalog and from computed comparisons: category
list, search/category filtering, dashboard rankings and per-supplier
price history. Like the comparison engine, everything here is pure.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from pricetrack.domain.model.comparison import PriceComparison
from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.service.price_comparison_service import find_best_supplier


@dataclass(frozen=True)
class SupplierHistory:
    """Price entries of one product at one supplier, oldest first."""

    supplier_id: str
    supplier_name: str
    entries: tuple[PriceEntry, ...]


def product_categories(products: Iterable[Product]) -> list[str]:
    """Distinct non-empty categories currently in use, sorted."""
    return sorted({p.category for p in products if p.category.strip()})


def filter_comparisons(
    comparisons: Sequence[PriceComparison],
    products: Sequence[Product],
    search: str = "",
    category: str = "",
) -> list[PriceComparison]:
    """Narrow comparisons by a search term and an exact product category.

    The search term matches the product name or any supplier name,
    case-insensitively. The category is checked against the product's
    own ``category`` field.
    """
    category_of = {p.id: p.category for p in products}
    needle = search.strip().lower()

    def _matches_search(comparison: PriceComparison) -> bool:
        if not needle:
            return True
        if needle in comparison.product_name.lower():
            return True
        return any(needle in row.supplier_name.lower() for row in comparison.suppliers)

    def _matches_category(comparison: PriceComparison) -> bool:
        return not category or category_of.get(comparison.product_id) == category

    return [c for c in comparisons if _matches_search(c) and _matches_category(c)]


def recent_price_changes(
    comparisons: Sequence[PriceComparison], limit: int
) -> list[PriceComparison]:
    """Comparisons with a known change, biggest absolute move first."""

    def _largest_move(comparison: PriceComparison) -> Decimal:
        return max(abs(row.price_change) for row in comparison.suppliers
                   if row.price_change is not None)

    changed = [
        c for c in comparisons
        if any(row.price_change is not None for row in c.suppliers)
    ]
    return sorted(changed, key=_largest_move, reverse=True)[:limit]


def best_deals(comparisons: Sequence[PriceComparison], limit: int) -> list[PriceComparison]:
    """Comparisons with at least one recorded price, cheapest best offer first."""
    priced = []
    for comparison in comparisons:
        best = find_best_supplier(comparison)
        if best is not None:
            priced.append((best.price.amount, comparison))
    priced.sort(key=lambda pair: pair[0])
    return [comparison for _, comparison in priced[:limit]]


def price_history(
    product: Product,
    suppliers: Sequence[Supplier],
    price_entries: Iterable[PriceEntry],
) -> list[SupplierHistory]:
    """Per-supplier price history for one product.

    Suppliers appear in supplier order; those without entries for the
    product are left out.
    """
    by_supplier: dict[str, list[PriceEntry]] = {}
    for entry in price_entries:
        if entry.product_id == product.id:
            by_supplier.setdefault(entry.supplier_id, []).append(entry)

    return [
        SupplierHistory(
            supplier_id=supplier.id,
            supplier_name=supplier.name,
            entries=tuple(sorted(by_supplier[supplier.id], key=lambda e: e.date)),
        )
        for supplier in suppliers
        if supplier.id in by_supplier
    ]
