"""Snapshot — the three entity collections at one instant."""

from __future__ import annotations

from dataclasses import dataclass, field

from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.supplier import Supplier


@dataclass(frozen=True)
class Snapshot:

    products: tuple[Product, ...] = field(default_factory=tuple)
    suppliers: tuple[Supplier, ...] = field(default_factory=tuple)
    price_entries: tuple[PriceEntry, ...] = field(default_factory=tuple)
