"""Shared sort helper for the list queries."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pricetrack.domain.exceptions import ValidationError

T = TypeVar("T")

DIRECTIONS = ("asc", "desc")


def sort_records(
    records: Sequence[T],
    keys: dict[str, Callable[[T], Any]],
    sort_key: str,
    direction: str,
) -> list[T]:
    """Stable sort by a named key, ascending or descending."""
    if sort_key not in keys:
        raise ValidationError(
            f"Cannot sort by '{sort_key}'; choose one of {', '.join(keys)}"
        )
    if direction not in DIRECTIONS:
        raise ValidationError(f"Sort direction must be 'asc' or 'desc', got '{direction}'")
    return sorted(records, key=keys[sort_key], reverse=direction == "desc")
