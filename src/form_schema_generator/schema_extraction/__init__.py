"""Schema extraction exports."""

from .schema_extractor import extract_schema
from .type_discovery import discover_types

__all__ = ["discover_types", "extract_schema"]
