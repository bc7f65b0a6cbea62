"""Standalone per-type schema extraction service."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from form_schema_generator.schema_management.schema_models import SchemaDocument
from form_schema_generator.schema_transforms import (
    collect_referenced_definitions,
    enhance_schema,
    normalize_enums,
    sanitize_keywords,
)

logger = logging.getLogger(__name__)


def extract_schema(
    type_key: str,
    document: SchemaDocument,
    overrides: Mapping[str, Any] | None = None,
    field_descriptions: Mapping[str, str] | None = None,
) -> dict[str, Any] | None:
    """Build a self-contained schema for one definition.

    The result carries the dialect, the type's own keywords at top level and a
    `$defs` holding only the definitions the type reaches through `$ref`.
    Overridden fragments are used verbatim and are not re-titled.

    Returns:
      The standalone document, or None when the type is not defined.
    """
    definitions = document.definitions
    if type_key not in definitions:
        logger.warning("Type %s not found in schema definitions", type_key)
        return None

    overrides = overrides or {}
    root = copy.deepcopy(definitions[type_key])
    referenced = collect_referenced_definitions(root, definitions)

    if type_key in overrides:
        root = copy.deepcopy(overrides[type_key])
    else:
        root = enhance_schema(root, type_key, definitions, field_descriptions)

    embedded: dict[str, Any] = {}
    for name in referenced:
        if name in overrides:
            embedded[name] = copy.deepcopy(overrides[name])
        else:
            embedded[name] = enhance_schema(
                copy.deepcopy(definitions[name]), name, definitions, field_descriptions
            )

    standalone: dict[str, Any] = {"$schema": document.dialect}
    if isinstance(root, Mapping):
        standalone.update(root)
    if embedded:
        existing = standalone.get("$defs")
        if isinstance(existing, Mapping):
            embedded = {**existing, **embedded}
        standalone["$defs"] = embedded

    return sanitize_keywords(normalize_enums(standalone))
