"""Product aggregate.

Products live independently of suppliers. Category is free text; the
set of categories in use is derived from the products themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pricetrack.domain.exceptions import ValidationError
from pricetrack.domain.model.identity import new_id, utc_now

EDITABLE_FIELDS = ("name", "category", "unit", "description")

_REQUIRED = {
    "name": "Product name is required",
    "category": "Category is required",
    "unit": "Unit is required",
}


@dataclass
class Product:
    """A product in the shopkeeper's catalog."""

    id: str
    name: str
    category: str
    unit: str
    description: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        name: str,
        category: str,
        unit: str,
        description: str = "",
        now: datetime | None = None,
    ) -> Product:
        instant = now or utc_now()
        fields = {
            "name": (name or "").strip(),
            "category": (category or "").strip(),
            "unit": (unit or "").strip(),
            "description": (description or "").strip(),
        }
        _validate(fields)
        return cls(id=new_id(instant), created_at=instant, updated_at=instant, **fields)

    def update(self, changes: dict[str, str | None], now: datetime | None = None) -> None:
        """Apply a partial update. ``None`` values leave a field unchanged."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown product field(s): {', '.join(sorted(unknown))}")

        candidate = {f: getattr(self, f) for f in EDITABLE_FIELDS}
        for field_name, value in changes.items():
            if value is not None:
                candidate[field_name] = value.strip()
        _validate(candidate)

        for field_name, value in candidate.items():
            setattr(self, field_name, value)
        self.updated_at = now or utc_now()

    def matches(self, term: str) -> bool:
        needle = term.lower()
        return needle in self.name.lower() or needle in self.description.lower()


def _validate(fields: dict[str, str]) -> None:
    for field_name, message in _REQUIRED.items():
        if not fields[field_name]:
            raise ValidationError(message)
