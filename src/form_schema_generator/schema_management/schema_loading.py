"""Base schema loading service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .schema_models import DEFAULT_DIALECT, SchemaDocument


class SchemaError(Exception):
    """Raised when the base schema cannot be read or is structurally unusable."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read the base schema file into a structured document."""
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Failed to read base schema {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"Base schema {path} is not valid UTF-8: {exc}") from exc
    return parse_schema_document(text, source=str(path))


def parse_schema_document(text: str, *, source: str = "<schema>") -> SchemaDocument:
    """Parse base schema text into a structured document."""
    try:
        root: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema in {source}: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError(f"Base schema root in {source} must be an object.")
    if "$defs" in root and not isinstance(root["$defs"], Mapping):
        raise SchemaError(f"Base schema $defs in {source} must be an object.")

    dialect = root.get("$schema")
    return SchemaDocument(
        root=root,
        dialect=dialect if isinstance(dialect, str) and dialect else DEFAULT_DIALECT,
    )
