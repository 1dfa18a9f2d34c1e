"""Genericity predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeselect.domain.predicates.composite import negate

if TYPE_CHECKING:
    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.predicates.base import TypePredicate


def is_generic() -> TypePredicate:
    """Create predicate: type is a generic type definition.

    Returns:
        Predicate function
    """

    def predicate(descriptor: TypeDescriptor) -> bool:
        return descriptor.is_generic_type_definition

    return predicate


def is_not_generic() -> TypePredicate:
    """Create predicate: type is not a generic type definition.

    Returns:
        Predicate function
    """
    return negate(is_generic())
