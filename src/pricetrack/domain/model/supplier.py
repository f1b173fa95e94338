"""Supplier aggregate.

Suppliers are the shops and wholesalers a shopkeeper buys from. Deleting
a supplier removes its price entries as well (see DeleteSupplierHandler).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pricetrack.domain.exceptions import ValidationError
from pricetrack.domain.model.identity import new_id, utc_now

EDITABLE_FIELDS = ("name", "contact", "phone", "address", "notes")


@dataclass
class Supplier:
    """Aggregate root for suppliers.

    Use ``Supplier.create()`` for new suppliers — it validates input and
    assigns identity. ``__init__`` stays plain so repositories can
    reconstitute persisted records without re-validating.
    """

    id: str
    name: str
    contact: str
    phone: str
    address: str
    notes: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        name: str,
        phone: str,
        contact: str = "",
        address: str = "",
        notes: str = "",
        now: datetime | None = None,
    ) -> Supplier:
        instant = now or utc_now()
        supplier = cls(
            id=new_id(instant),
            name=(name or "").strip(),
            contact=(contact or "").strip(),
            phone=(phone or "").strip(),
            address=(address or "").strip(),
            notes=(notes or "").strip(),
            created_at=instant,
            updated_at=instant,
        )
        supplier._validate()
        return supplier

    def update(self, changes: dict[str, str | None], now: datetime | None = None) -> None:
        """Apply a partial update. ``None`` values leave a field unchanged.

        Only ``updated_at`` moves; ``id`` and ``created_at`` never change.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown supplier field(s): {', '.join(sorted(unknown))}")

        candidate = {f: getattr(self, f) for f in EDITABLE_FIELDS}
        for field_name, value in changes.items():
            if value is not None:
                candidate[field_name] = value.strip()
        _require(candidate["name"], "Supplier name is required")
        _require(candidate["phone"], "Phone number is required")

        for field_name, value in candidate.items():
            setattr(self, field_name, value)
        self.updated_at = now or utc_now()

    def matches(self, term: str) -> bool:
        needle = term.lower()
        return any(
            needle in getattr(self, f).lower()
            for f in ("name", "contact", "phone", "address", "notes")
        )

    def _validate(self) -> None:
        _require(self.name, "Supplier name is required")
        _require(self.phone, "Phone number is required")


def _require(value: str, message: str) -> None:
    if not value or not value.strip():
        raise ValidationError(message)
