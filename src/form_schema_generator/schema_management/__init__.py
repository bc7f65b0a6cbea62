"""Schema management exports."""

from .schema_loading import SchemaError, load_schema_document, parse_schema_document
from .schema_models import DEFAULT_DIALECT, DiscoveredType, SchemaDocument

__all__ = [
    "DEFAULT_DIALECT",
    "DiscoveredType",
    "SchemaDocument",
    "SchemaError",
    "load_schema_document",
    "parse_schema_document",
]
