"""Domain service: Price Comparison.

Turns a snapshot of products, suppliers and price entries into one
``PriceComparison`` per product. Every function here is pure: the same
input always produces an equal, freshly built output, and nothing is
cached between calls.

Ordering of entries that share the same effective date: the sort by
date is stable, so among equal dates the entry that appears earlier in
the input collection is treated as the more recent one. Re-running on
the same snapshot therefore always picks the same latest/previous pair.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from pricetrack.domain.model.comparison import (
    BestSupplier,
    PriceComparison,
    SupplierPriceRow,
)
from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.model.value_objects import Money

_PairKey = tuple[str, str]

MISSING_VALUE = "—"


# --- Latest / previous resolution ---------------------------------------------


def _newest_first(entries: Iterable[PriceEntry]) -> list[PriceEntry]:
    # sorted() stays stable with reverse=True: equal dates keep input order
    return sorted(entries, key=lambda e: e.date, reverse=True)


def _index_by_pair(price_entries: Iterable[PriceEntry]) -> dict[_PairKey, list[PriceEntry]]:
    """Group entries by (product_id, supplier_id), newest first."""
    grouped: dict[_PairKey, list[PriceEntry]] = {}
    for entry in price_entries:
        grouped.setdefault((entry.product_id, entry.supplier_id), []).append(entry)
    return {key: _newest_first(entries) for key, entries in grouped.items()}


def latest_and_previous(
    price_entries: Iterable[PriceEntry],
    product_id: str,
    supplier_id: str,
) -> tuple[PriceEntry | None, PriceEntry | None]:
    """Return the latest and second-latest entry for a product/supplier pair.

    Entries for any other pair are ignored. Either side is ``None`` when
    there are not enough entries.
    """
    matching = _newest_first(
        e for e in price_entries
        if e.product_id == product_id and e.supplier_id == supplier_id
    )
    return _first_two(matching)


def _first_two(entries: Sequence[PriceEntry]) -> tuple[PriceEntry | None, PriceEntry | None]:
    latest = entries[0] if entries else None
    previous = entries[1] if len(entries) > 1 else None
    return latest, previous


# --- Percentage change ---------------------------------------------------------


def price_change_percentage(current: Money, previous: Money | None) -> Decimal | None:
    """Signed change from ``previous`` to ``current`` in percent.

    ``None`` when there is no previous price or it is zero. A zero change
    is a real value (``Decimal(0)``), not ``None``.
    """
    if previous is None or previous.is_zero:
        return None
    return (current.amount - previous.amount) / previous.amount * 100


def format_percentage(change: Decimal | None) -> str:
    """Format a change for display: ``+20.00%``, ``-5.00%``, ``0.00%``."""
    if change is None:
        return MISSING_VALUE
    sign = "+" if change > 0 else ""
    return f"{sign}{change:.2f}%"


# --- Comparison assembly -------------------------------------------------------


def _build_row(supplier: Supplier, history: Sequence[PriceEntry]) -> SupplierPriceRow:
    latest, previous = _first_two(history)
    current_price = latest.price if latest is not None else Money.zero()
    previous_price = previous.price if previous is not None else None
    return SupplierPriceRow(
        supplier_id=supplier.id,
        supplier_name=supplier.name,
        current_price=current_price,
        previous_price=previous_price,
        price_change=price_change_percentage(current_price, previous_price),
        last_updated=latest.date if latest is not None else None,
    )


def compute_price_comparisons(
    products: Sequence[Product],
    suppliers: Sequence[Supplier],
    price_entries: Iterable[PriceEntry],
) -> list[PriceComparison]:
    """Build one comparison per product with one row per supplier.

    Product order follows ``products`` and row order follows
    ``suppliers``. Pairs without any price still get a row (current
    price zero). Entries are indexed once up front, so the cost is
    O(products x suppliers + entries log entries).
    """
    index = _index_by_pair(price_entries)
    return [
        PriceComparison(
            product_id=product.id,
            product_name=product.name,
            suppliers=tuple(
                _build_row(supplier, index.get((product.id, supplier.id), ()))
                for supplier in suppliers
            ),
        )
        for product in products
    ]


# --- Best supplier ---------------------------------------------------------------


def find_best_supplier(comparison: PriceComparison) -> BestSupplier | None:
    """Return the cheapest supplier with a recorded price.

    Rows with a zero price mean "no data" and are skipped. On a tie the
    leftmost row wins.
    """
    best: SupplierPriceRow | None = None
    for row in comparison.suppliers:
        if not row.has_price:
            continue
        if best is None or row.current_price < best.current_price:
            best = row
    if best is None:
        return None
    return BestSupplier(
        supplier_id=best.supplier_id,
        supplier_name=best.supplier_name,
        price=best.current_price,
    )
