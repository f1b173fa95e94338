"""Derived price-comparison view.

These objects are never persisted and never mutated: the comparison
engine rebuilds them from a snapshot every time they are needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pricetrack.domain.model.value_objects import Money


@dataclass(frozen=True)
class SupplierPriceRow:
    """One supplier's price data for one product.

    ``current_price`` is zero when the supplier has no recorded price;
    ``last_updated`` is then ``None``.
    """

    supplier_id: str
    supplier_name: str
    current_price: Money
    previous_price: Money | None
    price_change: Decimal | None
    last_updated: datetime | None

    @property
    def has_price(self) -> bool:
        return not self.current_price.is_zero


@dataclass(frozen=True)
class PriceComparison:
    """All suppliers' rows for one product, in supplier order."""

    product_id: str
    product_name: str
    suppliers: tuple[SupplierPriceRow, ...]


@dataclass(frozen=True)
class BestSupplier:
    supplier_id: str
    supplier_name: str
    price: Money
