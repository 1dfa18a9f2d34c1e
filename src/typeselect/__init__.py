"""typeselect - convention-based type selection with composable filters."""

__version__ = "0.1.0"

from typeselect.domain.exceptions import (
    AttributePredicateError,
    FilterConflictError,
    InvalidArgumentError,
    TypeSelectError,
)
from typeselect.domain.model import (
    CompositeFilter,
    PredicateErrorPolicy,
    SelectionConfig,
    SelectionResult,
    TypeDescriptor,
)
from typeselect.infrastructure.adapters.class_introspector import attribute, describe
from typeselect.presentation.api.dsl import FilterBuilder, TypeSelector

__all__ = [
    "AttributePredicateError",
    "CompositeFilter",
    "FilterBuilder",
    "FilterConflictError",
    "InvalidArgumentError",
    "PredicateErrorPolicy",
    "SelectionConfig",
    "SelectionResult",
    "TypeDescriptor",
    "TypeSelectError",
    "TypeSelector",
    "__version__",
    "attribute",
    "describe",
]
