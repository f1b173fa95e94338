"""Application services: Export, Import and Reset data.

The export document has one top-level key per collection (``suppliers``,
``products``, ``priceEntries``). Import restores records verbatim; it
only checks the document's outer shape. Records that later fail to load
surface as CorruptDataError from the repositories.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pricetrack.domain.exceptions import ValidationError
from pricetrack.domain.repository.snapshot_repository import (
    COLLECTIONS,
    SnapshotRepository,
)

logger = logging.getLogger(__name__)


class ExportDataHandler:

    def __init__(self, snapshot_repo: SnapshotRepository) -> None:
        self._snapshot_repo = snapshot_repo

    def handle(self, path: Path) -> dict[str, int]:
        """Write all collections to ``path``. Returns record counts per collection."""
        document = self._snapshot_repo.export_collections()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise ValidationError(f"Cannot write export file '{path}': {exc}") from exc
        counts = {name: len(document.get(name, [])) for name in COLLECTIONS}
        logger.info("Exported %s to %s", counts, path)
        return counts


class ImportDataHandler:

    def __init__(self, snapshot_repo: SnapshotRepository) -> None:
        self._snapshot_repo = snapshot_repo

    def handle(self, path: Path) -> dict[str, int]:
        """Replace the collections present in the file. Returns counts imported."""
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ValidationError(f"Cannot read import file '{path}': {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Import file '{path}' is not valid JSON: {exc}") from exc

        if not isinstance(document, dict):
            raise ValidationError("Import file must contain a JSON object")

        present = {name: document[name] for name in COLLECTIONS if name in document}
        if not present:
            raise ValidationError(
                f"Import file has none of the collections: {', '.join(COLLECTIONS)}"
            )
        for name, records in present.items():
            if not isinstance(records, list):
                raise ValidationError(f"'{name}' in import file must be a list")

        for name, records in present.items():
            self._snapshot_repo.replace_collection(name, records)

        counts = {name: len(records) for name, records in present.items()}
        logger.info("Imported %s from %s", counts, path)
        return counts


class ResetDataHandler:

    def __init__(self, snapshot_repo: SnapshotRepository) -> None:
        self._snapshot_repo = snapshot_repo

    def handle(self) -> None:
        self._snapshot_repo.clear()
        logger.info("All suppliers, products and price entries were removed")
