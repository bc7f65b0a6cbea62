"""Fill in missing titles and descriptions so every field and choice has a label."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .naming import format_title
from .reference_closure import definition_name

NULL_BRANCH_TITLE = "(none)"


def enhance_schema(
    fragment: Any,
    key: str | None,
    definitions: Mapping[str, Any],
    field_descriptions: Mapping[str, str] | None = None,
) -> Any:
    """Return a copy of the fragment with missing titles and descriptions filled in.

    Existing titles and descriptions are never overwritten, so applying this twice
    is the same as applying it once. `$ref` targets are not followed; referenced
    definitions are enhanced on their own.
    """
    if not isinstance(fragment, Mapping):
        return fragment

    descriptions = field_descriptions or {}
    enhanced = dict(fragment)

    if not enhanced.get("title") and key:
        enhanced["title"] = format_title(key)

    one_of = enhanced.get("oneOf")
    if isinstance(one_of, list):
        enhanced["oneOf"] = [
            _title_one_of_branch(branch, position, definitions)
            for position, branch in enumerate(one_of, start=1)
        ]

    any_of = enhanced.get("anyOf")
    if isinstance(any_of, list):
        enhanced["anyOf"] = [_title_any_of_branch(branch, definitions) for branch in any_of]

    properties = enhanced.get("properties")
    if isinstance(properties, Mapping):
        enhanced["properties"] = {
            name: _enhance_property(name, child, definitions, descriptions)
            for name, child in properties.items()
        }

    return enhanced


def _enhance_property(
    name: str,
    fragment: Any,
    definitions: Mapping[str, Any],
    descriptions: Mapping[str, str],
) -> Any:
    enhanced = enhance_schema(fragment, name, definitions, descriptions)
    if not isinstance(enhanced, dict):
        return enhanced
    if not enhanced.get("title"):
        enhanced["title"] = format_title(name)
    if not enhanced.get("description") and name in descriptions:
        enhanced["description"] = descriptions[name]
    return enhanced


def _title_one_of_branch(branch: Any, position: int, definitions: Mapping[str, Any]) -> Any:
    if not isinstance(branch, Mapping) or branch.get("title"):
        return branch

    titled = dict(branch)
    properties = branch.get("properties")
    const = branch.get("const", "")
    if const is None:
        titled["title"] = NULL_BRANCH_TITLE
    elif const != "":
        titled["title"] = format_title(const if isinstance(const, str) else json.dumps(const))
    elif isinstance(properties, Mapping) and len(properties) == 1:
        titled["title"] = format_title(next(iter(properties)))
    elif isinstance(properties, Mapping) and len(properties) > 1:
        titled["title"] = f"Option {position}"
    elif _reference_title(branch, definitions):
        titled["title"] = _reference_title(branch, definitions)
    elif branch.get("type") == "null":
        titled["title"] = NULL_BRANCH_TITLE
    else:
        titled["title"] = f"Option {position}"
    return titled


def _title_any_of_branch(branch: Any, definitions: Mapping[str, Any]) -> Any:
    if not isinstance(branch, Mapping) or branch.get("title") or branch.get("type") == "null":
        return branch

    title: str | None = None
    properties = branch.get("properties")
    if isinstance(properties, Mapping):
        if properties:
            title = format_title(next(iter(properties)))
    else:
        title = _reference_title(branch, definitions)

    if title is None:
        return branch
    titled = dict(branch)
    titled["title"] = title
    return titled


def _reference_title(branch: Mapping[str, Any], definitions: Mapping[str, Any]) -> str | None:
    reference = branch.get("$ref")
    if not isinstance(reference, str):
        return None
    name = definition_name(reference)
    if name is None or name not in definitions:
        # fall back to the last pointer segment for refs outside the table
        name = reference.rsplit("/", 1)[-1]
    return format_title(name) or None
