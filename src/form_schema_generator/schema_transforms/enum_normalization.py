"""Promote plain string enums into labeled `oneOf` choices."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .naming import format_title

NULL_CHOICE_TITLE = "(none)"


def normalize_enums(fragment: Any) -> Any:
    """Return a copy of the fragment with every all-string `enum` rewritten as `oneOf`.

    Enums mixing strings with other literal types, and enums holding only
    `null`, are left as they are. A `oneOf` already present next to a rewritten
    enum moves into `allOf` as one more conjunct.
    """
    if not isinstance(fragment, Mapping):
        return fragment

    normalized = dict(fragment)
    _normalize_children(normalized)

    choices = _enum_choices(normalized.get("enum"))
    if choices is not None:
        del normalized["enum"]
        existing = normalized.get("oneOf")
        if existing is not None:
            normalized["allOf"] = [*normalized.get("allOf", []), {"oneOf": existing}]
        normalized["oneOf"] = choices
    return normalized


def _enum_choices(members: Any) -> list[dict[str, Any]] | None:
    if not isinstance(members, list):
        return None
    if not all(member is None or isinstance(member, str) for member in members):
        return None

    values = [member for member in members if member is not None]
    if not values:
        return None

    choices: list[dict[str, Any]] = [
        {"const": value, "title": format_title(value)} for value in values
    ]
    if len(values) != len(members):
        choices.append({"type": "null", "title": NULL_CHOICE_TITLE})
    return choices


def _normalize_children(fragment: dict[str, Any]) -> None:
    for keyword in ("properties", "$defs"):
        children = fragment.get(keyword)
        if isinstance(children, Mapping):
            fragment[keyword] = {name: normalize_enums(child) for name, child in children.items()}

    for keyword in ("oneOf", "anyOf", "allOf", "prefixItems"):
        members = fragment.get(keyword)
        if isinstance(members, list):
            fragment[keyword] = [normalize_enums(member) for member in members]

    items = fragment.get("items")
    if isinstance(items, list):
        fragment["items"] = [normalize_enums(item) for item in items]
    elif isinstance(items, Mapping):
        fragment["items"] = normalize_enums(items)
