"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

INDEX_FILENAME = "index.json"


@dataclass(frozen=True)
class IndexEntry:
    """One generated type as listed in its category index."""

    key: str
    display_name: str
    description: str
    schema_file: str

    def to_json(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "displayName": self.display_name,
            "description": self.description,
            "schemaFile": self.schema_file,
        }


@dataclass(frozen=True)
class CategoryIndex:
    """Index document written next to a category's schemas."""

    name: str
    description: str
    types: tuple[IndexEntry, ...]

    def to_json(self) -> dict[str, Any]:
        return {
            "category": self.name,
            "description": self.description,
            "types": [entry.to_json() for entry in self.types],
        }
