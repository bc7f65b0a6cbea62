"""Results writing domain exports."""

from .report_models import INDEX_FILENAME, CategoryIndex, IndexEntry
from .schema_output_writer import (
    OutputNameError,
    remove_stale_outputs,
    schema_filename,
    write_category_index,
    write_type_schema,
)

__all__ = [
    "INDEX_FILENAME",
    "CategoryIndex",
    "IndexEntry",
    "OutputNameError",
    "remove_stale_outputs",
    "schema_filename",
    "write_category_index",
    "write_type_schema",
]
