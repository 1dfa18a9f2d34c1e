"""typeselect domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, logging, collections.abc
"""

from typeselect.domain.exceptions import (
    AttributePredicateError,
    FilterConflictError,
    InvalidArgumentError,
    TypeSelectError,
)
from typeselect.domain.model import (
    CompositeFilter,
    Conjunct,
    ConjunctKind,
    PredicateErrorPolicy,
    SelectionConfig,
    SelectionResult,
    TypeDescriptor,
)
from typeselect.domain.ports import AttributeSource

__all__ = [
    # Exceptions
    "TypeSelectError",
    "InvalidArgumentError",
    "FilterConflictError",
    "AttributePredicateError",
    # Enums
    "ConjunctKind",
    "PredicateErrorPolicy",
    # Entities
    "TypeDescriptor",
    "Conjunct",
    "CompositeFilter",
    "SelectionResult",
    "SelectionConfig",
    # Ports
    "AttributeSource",
]
