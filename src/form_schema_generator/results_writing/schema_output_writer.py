"""Category output writer service."""

from __future__ import annotations

import json
from collections.abc import Collection, Mapping
from pathlib import Path
from typing import Any
from urllib.parse import quote

from .report_models import INDEX_FILENAME, CategoryIndex


class OutputNameError(ValueError):
    """Raised when a type key cannot be stored as its own schema file."""


def schema_filename(type_key: str) -> str:
    """Map a type key to a file name directly inside the category directory.

    Path separators and other reserved characters are percent-encoded, so
    ``a/Route`` becomes ``a%2FRoute.json``. A key whose file name would
    collide with the category index is rejected.
    """
    filename = f"{quote(type_key, safe='')}.json"
    if filename == INDEX_FILENAME:
        raise OutputNameError(f"Type {type_key} would overwrite the category {INDEX_FILENAME}")
    return filename


def write_type_schema(
    category_dir: Path | str, type_key: str, document: Mapping[str, Any]
) -> str:
    """Write one standalone schema and return its file name within the category."""
    filename = schema_filename(type_key)
    _write_json(Path(category_dir) / filename, document)
    return filename


def write_category_index(category_dir: Path | str, index: CategoryIndex) -> Path:
    """Write the category index and return its path."""
    path = Path(category_dir) / INDEX_FILENAME
    _write_json(path, index.to_json())
    return path


def remove_stale_outputs(category_dir: Path | str, keep: Collection[str]) -> list[Path]:
    """Delete JSON outputs left from earlier runs that are not in ``keep``.

    Args:
      category_dir: Category output directory.
      keep: File names written by the current run, index included.

    Returns:
      The removed paths, sorted by name.
    """
    directory = Path(category_dir)
    if not directory.is_dir():
        return []
    removed: list[Path] = []
    for path in sorted(directory.glob("*.json")):
        if path.name in keep or not path.is_file():
            continue
        path.unlink()
        removed.append(path)
    return removed


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
