"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from form_schema_generator.configuration.runtime_settings import CategoryMapping
from form_schema_generator.schema_management.schema_models import DiscoveredType


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    config_path: str
    schema_path: str | None = None
    output_dir: str | None = None


@dataclass(frozen=True)
class CategoryOutcome:
    """What one category produced."""

    key: str
    name: str
    output_dir: Path
    written: tuple[str, ...]
    skipped: tuple[str, ...]
    removed: tuple[Path, ...]


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    output_dir: Path
    categories: tuple[CategoryOutcome, ...]


@dataclass(frozen=True)
class CategoryListing:
    """Discovered types of one category, without any output written."""

    category: CategoryMapping
    types: tuple[DiscoveredType, ...]
