"""Small factories for domain objects with fixed ids and timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

from pricetrack.domain.model.price_entry import PriceEntry
from pricetrack.domain.model.product import Product
from pricetrack.domain.model.supplier import Supplier
from pricetrack.domain.model.value_objects import Money, parse_instant

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_supplier(id: str, name: str, **fields: str) -> Supplier:
    return Supplier(
        id=id,
        name=name,
        contact=fields.get("contact", ""),
        phone=fields.get("phone", "555-0100"),
        address=fields.get("address", ""),
        notes=fields.get("notes", ""),
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def make_product(id: str, name: str, category: str = "Grains", **fields: str) -> Product:
    return Product(
        id=id,
        name=name,
        category=category,
        unit=fields.get("unit", "kg"),
        description=fields.get("description", ""),
        created_at=EPOCH,
        updated_at=EPOCH,
    )


def make_entry(
    id: str, product_id: str, supplier_id: str, price: str | int, date: str, notes: str = ""
) -> PriceEntry:
    return PriceEntry(
        id=id,
        product_id=product_id,
        supplier_id=supplier_id,
        price=Money.of(price),
        date=parse_instant(date),
        notes=notes,
    )
