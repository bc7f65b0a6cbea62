"""Strip keywords that form renderers mis-handle when evaluating every branch at once.

Renderers validate each `oneOf`/`anyOf` branch against the full form state, so a
branch-local `additionalProperties: false` rejects data that belongs to a sibling
branch, and `unevaluatedProperties` cannot be honored at all. Generated schemas
also tag integer widths with non-standard `format` values (`uint16`, `int64`, ...);
only the numeric bounds next to them carry meaning for the renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

STANDARD_FORMATS: frozenset[str] = frozenset(
    {
        "date",
        "time",
        "date-time",
        "duration",
        "email",
        "idn-email",
        "hostname",
        "idn-hostname",
        "ipv4",
        "ipv6",
        "uri",
        "uri-reference",
        "uri-template",
        "iri",
        "iri-reference",
        "uuid",
        "json-pointer",
        "relative-json-pointer",
        "regex",
    }
)

SENTINEL_VALUE = "invalid"

_CHOICE_KEYWORDS = ("oneOf", "anyOf")
_SUBSCHEMA_KEYWORDS = ("contains", "if", "then", "else", "not")
_SUBSCHEMA_LIST_KEYWORDS = ("allOf", "prefixItems")
_SUBSCHEMA_MAP_KEYWORDS = ("properties", "$defs")


def sanitize_keywords(
    fragment: Any,
    in_choice: bool = False,
    allowed_formats: frozenset[str] = STANDARD_FORMATS,
) -> Any:
    """Return a sanitized copy of the fragment.

    Args:
      fragment: Schema fragment to clean.
      in_choice: True when the fragment is an immediate `oneOf`/`anyOf` member.
        Only then is `additionalProperties: false` removed.
      allowed_formats: `format` values kept as-is; any other value is dropped.

    Returns:
      A new fragment; non-object fragments are returned unchanged.
    """
    if not isinstance(fragment, Mapping):
        return fragment

    sanitized = dict(fragment)
    sanitized.pop("unevaluatedProperties", None)

    if "format" in sanitized:
        value = sanitized["format"]
        if not isinstance(value, str) or value not in allowed_formats:
            del sanitized["format"]

    if in_choice and sanitized.get("additionalProperties") is False:
        del sanitized["additionalProperties"]

    for keyword in _SUBSCHEMA_MAP_KEYWORDS:
        children = sanitized.get(keyword)
        if isinstance(children, Mapping):
            sanitized[keyword] = {
                name: sanitize_keywords(child, False, allowed_formats)
                for name, child in children.items()
            }

    for keyword in _SUBSCHEMA_KEYWORDS:
        if keyword in sanitized:
            sanitized[keyword] = sanitize_keywords(sanitized[keyword], False, allowed_formats)

    for keyword in _SUBSCHEMA_LIST_KEYWORDS:
        members = sanitized.get(keyword)
        if isinstance(members, list):
            sanitized[keyword] = [
                sanitize_keywords(member, False, allowed_formats) for member in members
            ]

    items = sanitized.get("items")
    if isinstance(items, list):
        sanitized["items"] = [sanitize_keywords(item, False, allowed_formats) for item in items]
    elif items is not None:
        sanitized["items"] = sanitize_keywords(items, False, allowed_formats)

    for keyword in _CHOICE_KEYWORDS:
        members = sanitized.get(keyword)
        if not isinstance(members, list):
            continue
        kept = [
            member
            for member in (sanitize_keywords(member, True, allowed_formats) for member in members)
            if not is_sentinel_branch(member)
        ]
        if kept:
            sanitized[keyword] = kept
        else:
            del sanitized[keyword]

    return sanitized


def is_sentinel_branch(fragment: Any) -> bool:
    """Return True for a string branch whose only possible value is ``"invalid"``.

    Both the raw ``enum: ["invalid"]`` shape and the normalized single-choice
    ``oneOf: [{"const": "invalid", ...}]`` shape are recognized.
    """
    if not isinstance(fragment, Mapping) or fragment.get("type") != "string":
        return False
    if fragment.get("enum") == [SENTINEL_VALUE]:
        return True
    choices = fragment.get("oneOf")
    return (
        isinstance(choices, list)
        and len(choices) == 1
        and isinstance(choices[0], Mapping)
        and choices[0].get("const") == SENTINEL_VALUE
    )
