"""Category type discovery service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from form_schema_generator.configuration.runtime_settings import CategoryMapping
from form_schema_generator.schema_management.schema_models import DiscoveredType
from form_schema_generator.schema_transforms import format_title, synthesize_description


def discover_types(
    category: CategoryMapping, definitions: Mapping[str, Any]
) -> list[DiscoveredType]:
    """Return the category's item type followed by every pattern-matched definition.

    Pattern matches keep the definitions table's order. Exclusions only apply to
    pattern matches; an explicit item type is always listed when it exists.
    """
    discovered: list[DiscoveredType] = []
    seen: set[str] = set()

    if category.item_type and category.item_type in definitions:
        discovered.append(_describe(category.item_type, definitions[category.item_type]))
        seen.add(category.item_type)

    for name, fragment in definitions.items():
        if name in seen or name in category.exclude:
            continue
        if any(pattern in name for pattern in category.type_patterns):
            discovered.append(_describe(name, fragment))
            seen.add(name)

    return discovered


def _describe(name: str, fragment: Any) -> DiscoveredType:
    return DiscoveredType(
        key=name,
        display_name=format_title(name),
        description=synthesize_description(name, fragment),
    )
