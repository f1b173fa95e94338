"""PriceEntry — one observed price of a product at one supplier.

A price entry is a point-in-time fact, so it carries no modification
timestamp. It is the leaf of the model: nothing references it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pricetrack.domain.exceptions import ValidationError
from pricetrack.domain.model.identity import new_id
from pricetrack.domain.model.value_objects import Money, parse_instant


@dataclass
class PriceEntry:

    id: str
    product_id: str
    supplier_id: str
    price: Money
    date: datetime
    notes: str = ""

    @classmethod
    def create(
        cls,
        product_id: str,
        supplier_id: str,
        price: str | Money,
        date: str | datetime,
        notes: str = "",
    ) -> PriceEntry:
        """Record a new price. The price must be strictly positive."""
        if not product_id:
            raise ValidationError("Product is required")
        if not supplier_id:
            raise ValidationError("Supplier is required")
        return cls(
            id=new_id(),
            product_id=product_id,
            supplier_id=supplier_id,
            price=_positive_price(price),
            date=parse_instant(date),
            notes=(notes or "").strip(),
        )

    def update(
        self,
        product_id: str | None = None,
        supplier_id: str | None = None,
        price: str | Money | None = None,
        date: str | datetime | None = None,
        notes: str | None = None,
    ) -> None:
        """Edit the entry in place. Every supplied value is validated first."""
        new_price = _positive_price(price) if price is not None else self.price
        new_date = parse_instant(date) if date is not None else self.date
        if product_id is not None and not product_id:
            raise ValidationError("Product is required")
        if supplier_id is not None and not supplier_id:
            raise ValidationError("Supplier is required")

        self.product_id = product_id or self.product_id
        self.supplier_id = supplier_id or self.supplier_id
        self.price = new_price
        self.date = new_date
        if notes is not None:
            self.notes = notes.strip()


def _positive_price(price: str | Money) -> Money:
    money = price if isinstance(price, Money) else Money.of(price)
    if money.amount <= 0:
        raise ValidationError("Price must be greater than zero")
    return money
