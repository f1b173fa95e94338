"""Key-value store of named JSON collections, one file per collection.

``load`` returns the last written list, or an empty list when the
collection was never written. ``save`` overwrites the whole file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pricetrack.domain.exceptions import CorruptDataError

logger = logging.getLogger("pricetrack.persistence")


class JsonCollectionStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def load(self, name: str) -> list[dict]:
        path = self._path(name)
        if not path.exists():
            return []
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CorruptDataError(name, f"invalid JSON in {path.name}: {exc}") from exc
        if not isinstance(records, list):
            raise CorruptDataError(name, f"{path.name} does not hold a list")
        return records

    def load_records(self, name: str) -> list[dict]:
        """Like ``load``, but every record must be a JSON object."""
        records = self.load(name)
        for raw in records:
            if not isinstance(raw, dict):
                raise CorruptDataError(name, f"expected an object, got {raw!r}")
        return records

    def save(self, name: str, records: list[dict]) -> None:
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        logger.debug("Wrote %d record(s) to %s", len(records), path)

    def clear(self, name: str) -> None:
        path = self._path(name)
        if path.exists():
            path.unlink()
            logger.debug("Removed %s", path)

    def _path(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"


def text_field(collection: str, raw: dict, key: str, default: str | None = None) -> str:
    """Read a string field from a stored record.

    A missing key falls back to ``default``; anything that is not a string
    after that is a corrupt record.
    """
    value = raw.get(key, default)
    if not isinstance(value, str):
        raise CorruptDataError(collection, f"field '{key}' must be a string in {raw!r}")
    return value
