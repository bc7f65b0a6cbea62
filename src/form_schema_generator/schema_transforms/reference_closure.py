"""Transitive `$ref` closure over a definitions table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFINITIONS_POINTER_PREFIX = "#/$defs/"


def definition_name(reference: Any) -> str | None:
    """Return the `$defs` entry name addressed by a local pointer, if any."""
    if not isinstance(reference, str) or not reference.startswith(DEFINITIONS_POINTER_PREFIX):
        return None
    # "#/$defs/Name/properties/x" still depends on the whole "Name" entry
    segment = reference[len(DEFINITIONS_POINTER_PREFIX) :].split("/", 1)[0]
    if not segment:
        return None
    return segment.replace("~1", "/").replace("~0", "~")


def collect_referenced_definitions(
    fragment: Any, definitions: Mapping[str, Any]
) -> tuple[str, ...]:
    """Return every definition name reachable from the fragment, in discovery order.

    The starting fragment's own name is not seeded; it only appears when the
    fragment (or something it references) points back at it.
    """
    visited: dict[str, None] = {}
    _walk(fragment, definitions, visited)
    return tuple(visited)


def _walk(node: Any, definitions: Mapping[str, Any], visited: dict[str, None]) -> None:
    if isinstance(node, list):
        for item in node:
            _walk(item, definitions, visited)
        return
    if not isinstance(node, Mapping):
        return

    name = definition_name(node.get("$ref"))
    if name is not None and name in definitions and name not in visited:
        visited[name] = None
        _walk(definitions[name], definitions, visited)

    for value in node.values():
        if isinstance(value, (Mapping, list)):
            _walk(value, definitions, visited)
