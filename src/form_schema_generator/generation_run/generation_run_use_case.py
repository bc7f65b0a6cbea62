"""Generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from form_schema_generator.configuration import (
    CategoryMapping,
    ConfigurationError,
    GeneratorConfiguration,
    load_configuration,
)
from form_schema_generator.results_writing import (
    INDEX_FILENAME,
    CategoryIndex,
    IndexEntry,
    OutputNameError,
    remove_stale_outputs,
    write_category_index,
    write_type_schema,
)
from form_schema_generator.schema_extraction import discover_types, extract_schema
from form_schema_generator.schema_management import (
    SchemaDocument,
    SchemaError,
    load_schema_document,
)

from .run_contracts import CategoryListing, CategoryOutcome, GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Generate every category's schemas and indexes, then drop stale outputs."""
    configuration, document = _load_run_inputs(request)
    output_dir = _resolve_output_dir(configuration, request)

    outcomes = []
    for category in configuration.categories:
        try:
            outcomes.append(
                _generate_category(
                    category,
                    document,
                    category_dir=output_dir / category.key,
                    overrides=configuration.type_overrides,
                    field_descriptions=configuration.field_descriptions,
                )
            )
        except OSError as exc:
            raise GenerationError(
                f"Failed to write outputs for category {category.key}: {exc}"
            ) from exc
    return GenerationOutcome(output_dir=output_dir, categories=tuple(outcomes))


def list_category_types(request: GenerationRequest) -> list[CategoryListing]:
    """Run type discovery for every category without writing anything."""
    configuration, document = _load_run_inputs(request)
    return [
        CategoryListing(
            category=category,
            types=tuple(discover_types(category, document.definitions)),
        )
        for category in configuration.categories
    ]


def _generate_category(
    category: CategoryMapping,
    document: SchemaDocument,
    *,
    category_dir: Path,
    overrides: Mapping[str, Any],
    field_descriptions: Mapping[str, str],
) -> CategoryOutcome:
    logger.info("Processing %s...", category.name)
    discovered = discover_types(category, document.definitions)
    logger.info("Found %d types for %s", len(discovered), category.name)
    category_dir.mkdir(parents=True, exist_ok=True)

    entries: list[IndexEntry] = []
    skipped: list[str] = []
    for discovered_type in discovered:
        schema = extract_schema(discovered_type.key, document, overrides, field_descriptions)
        if schema is None:
            skipped.append(discovered_type.key)
            continue

        schema["title"] = discovered_type.display_name
        if discovered_type.description:
            schema["description"] = discovered_type.description

        try:
            filename = write_type_schema(category_dir, discovered_type.key, schema)
        except OutputNameError as exc:
            logger.warning("Skipping %s: %s", discovered_type.key, exc)
            skipped.append(discovered_type.key)
            continue
        entries.append(
            IndexEntry(
                key=discovered_type.key,
                display_name=discovered_type.display_name,
                description=discovered_type.description,
                schema_file=filename,
            )
        )

    write_category_index(
        category_dir,
        CategoryIndex(name=category.name, description=category.description, types=tuple(entries)),
    )
    keep = {entry.schema_file for entry in entries} | {INDEX_FILENAME}
    removed = remove_stale_outputs(category_dir, keep)
    for path in removed:
        logger.info("Removed stale output %s", path)

    return CategoryOutcome(
        key=category.key,
        name=category.name,
        output_dir=category_dir,
        written=tuple(entry.key for entry in entries),
        skipped=tuple(skipped),
        removed=tuple(removed),
    )


def _load_run_inputs(request: GenerationRequest) -> tuple[GeneratorConfiguration, SchemaDocument]:
    try:
        configuration = load_configuration(request.config_path)
        schema_path = (
            Path(request.schema_path) if request.schema_path else configuration.schema_path
        )
        document = load_schema_document(schema_path)
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise GenerationError(str(exc)) from exc
    return configuration, document


def _resolve_output_dir(configuration: GeneratorConfiguration, request: GenerationRequest) -> Path:
    return Path(request.output_dir) if request.output_dir else configuration.output_dir
