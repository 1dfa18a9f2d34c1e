"""Inheritance predicates.

Ancestry is strict: a type is never its own ancestor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeselect.domain.predicates.composite import negate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.predicates.base import TypePredicate


def inherited_from_any(types: Iterable[type]) -> TypePredicate:
    """Create predicate: type inherits from at least one of types.

    Args:
        types: Candidate ancestors. Empty = matches nothing.

    Returns:
        Predicate function
    """
    bases = frozenset(types)

    def predicate(descriptor: TypeDescriptor) -> bool:
        return not bases.isdisjoint(descriptor.ancestors)

    return predicate


def inherited_from(base: type) -> TypePredicate:
    """Create predicate: type inherits from base (directly or transitively).

    Args:
        base: Required ancestor

    Returns:
        Predicate function
    """

    def predicate(descriptor: TypeDescriptor) -> bool:
        return descriptor.has_ancestor(base)

    return predicate


def not_inherited_from_any(types: Iterable[type]) -> TypePredicate:
    """Create predicate: type inherits from none of types.

    Args:
        types: Rejected ancestors

    Returns:
        Predicate function
    """
    return negate(inherited_from_any(types))
