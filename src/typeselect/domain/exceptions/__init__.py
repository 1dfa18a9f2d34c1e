"""Domain exceptions."""

from typeselect.domain.exceptions.base import TypeSelectError
from typeselect.domain.exceptions.evaluation import AttributePredicateError
from typeselect.domain.exceptions.validation import FilterConflictError, InvalidArgumentError

__all__ = [
    "TypeSelectError",
    "InvalidArgumentError",
    "FilterConflictError",
    "AttributePredicateError",
]
