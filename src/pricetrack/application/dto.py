"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted data from the application layer to the
CLI so display rules (currency, percentage, dates) live in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def format_date(value: datetime | None) -> str:
    """``Jan 5, 2024``; empty string when there is no date."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


@dataclass(frozen=True)
class SupplierDTO:
    id: str
    name: str
    contact: str
    phone: str
    address: str
    notes: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    unit: str
    description: str
    created_at: str


@dataclass(frozen=True)
class ComparisonRowDTO:
    """Output: one supplier's prices for one product, as displayed."""

    supplier_id: str
    supplier_name: str
    current_price: str  # formatted, e.g. "$12.00"; "—" when no price
    previous_price: str
    change: str  # e.g. "+20.00%"
    last_updated: str
    is_best: bool


@dataclass(frozen=True)
class PriceComparisonDTO:
    product_id: str
    product_name: str
    rows: list[ComparisonRowDTO]
    best_supplier: str | None
    best_price: str | None


@dataclass(frozen=True)
class DashboardDTO:
    product_count: int
    supplier_count: int
    price_entry_count: int
    recent_changes: list[PriceComparisonDTO]
    best_deals: list[PriceComparisonDTO]


@dataclass(frozen=True)
class HistoryPointDTO:
    entry_id: str
    date: str
    price: str
    notes: str


@dataclass(frozen=True)
class SupplierHistoryDTO:
    supplier_name: str
    points: list[HistoryPointDTO]


@dataclass(frozen=True)
class PriceHistoryDTO:
    product_name: str
    unit: str
    suppliers: list[SupplierHistoryDTO]
