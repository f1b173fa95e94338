"""Identifier and timestamp generation for new records.

Identifiers combine the wall clock (milliseconds, base 36), a
process-wide counter and random bits, so two records created within the
same millisecond still get distinct ids.
"""

from __future__ import annotations

import itertools
import secrets
from datetime import datetime, timezone

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_counter = itertools.count()


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id(now: datetime | None = None) -> str:
    """Return a fresh opaque identifier."""
    instant = now or utc_now()
    millis = int(instant.timestamp() * 1000)
    sequence = next(_counter) % (36 ** 4)
    return f"{_base36(millis)}{_base36(sequence).rjust(4, '0')}{secrets.token_hex(4)}"
