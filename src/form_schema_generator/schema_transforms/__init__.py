"""Schema transformation exports."""

from .enum_normalization import normalize_enums
from .keyword_sanitization import STANDARD_FORMATS, is_sentinel_branch, sanitize_keywords
from .naming import DESCRIPTION_SUFFIX_RULES, format_title, synthesize_description
from .reference_closure import collect_referenced_definitions, definition_name
from .title_enhancement import enhance_schema

__all__ = [
    "DESCRIPTION_SUFFIX_RULES",
    "STANDARD_FORMATS",
    "collect_referenced_definitions",
    "definition_name",
    "enhance_schema",
    "format_title",
    "is_sentinel_branch",
    "normalize_enums",
    "sanitize_keywords",
    "synthesize_description",
]
