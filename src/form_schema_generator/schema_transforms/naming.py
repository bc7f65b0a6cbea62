"""Human-readable titles and fallback descriptions for schema names."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_LOWER_UPPER_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")

DESCRIPTION_SUFFIX_RULES: tuple[tuple[str, str], ...] = (
    ("Policy", " configuration"),
    ("Backend", " connection"),
    ("Route", " with matching conditions"),
    ("Listener", " for incoming connections"),
)


def format_title(name: str) -> str:
    """Convert an identifier such as ``TCPRoute`` or ``httpsProxy`` into a label.

    Consecutive capitals are kept together as an acronym, so ``LocalLLMPolicy``
    becomes ``Local LLM Policy``. The first character is upper-cased.
    """
    label = _LOWER_UPPER_BOUNDARY.sub(r"\1 \2", name)
    label = _ACRONYM_WORD_BOUNDARY.sub(r"\1 \2", label).strip()
    if not label:
        return label
    return label[0].upper() + label[1:]


def synthesize_description(
    type_name: str,
    fragment: Any,
    rules: Sequence[tuple[str, str]] = DESCRIPTION_SUFFIX_RULES,
) -> str:
    """Return the fragment's own description, or one derived from the type name.

    Every rule whose token occurs in the name contributes its suffix, in rule order.
    """
    if isinstance(fragment, Mapping):
        existing = fragment.get("description")
        if isinstance(existing, str) and existing:
            return existing

    description = format_title(type_name)
    for token, suffix in rules:
        if token in type_name:
            description += suffix
    return description
