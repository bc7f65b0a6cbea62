"""Generation run domain exports."""

from .generation_run_use_case import GenerationError, execute_generation_run, list_category_types
from .run_contracts import CategoryListing, CategoryOutcome, GenerationOutcome, GenerationRequest

__all__ = [
    "CategoryListing",
    "CategoryOutcome",
    "GenerationError",
    "GenerationOutcome",
    "GenerationRequest",
    "execute_generation_run",
    "list_category_types",
]
