"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_DIALECT = "https://json-schema.org/draft/2020-12/schema"


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed base schema: the named-type universe plus its dialect."""

    root: Mapping[str, Any]
    dialect: str = DEFAULT_DIALECT

    @property
    def definitions(self) -> Mapping[str, Any]:
        """The `$defs` table, empty when the document has none."""
        definitions = self.root.get("$defs")
        return definitions if isinstance(definitions, Mapping) else {}


@dataclass(frozen=True)
class DiscoveredType:
    """One definition selected for a category, with its display metadata."""

    key: str
    display_name: str
    description: str
