"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class CategoryMapping:
    """How one UI category selects its types from the definitions table."""

    key: str
    name: str
    description: str
    item_type: str | None = None
    type_patterns: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratorConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    schema_path: Path
    output_dir: Path
    categories: tuple[CategoryMapping, ...]
    type_overrides: Mapping[str, Any] = field(default_factory=dict)
    field_descriptions: Mapping[str, str] = field(default_factory=dict)
