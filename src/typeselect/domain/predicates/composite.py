"""Composite predicates: NOT composition.

AND is CompositeFilter; no OR: conjuncts of one chain are always AND-ed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.predicates.base import TypePredicate


def negate(inner: TypePredicate) -> TypePredicate:
    """Create predicate that negates another predicate (NOT).

    Every negated primitive is built here, so f and negate(f) are
    exact complements.

    Args:
        inner: Predicate to negate.

    Returns:
        Predicate that returns opposite of input predicate.
    """

    def predicate(descriptor: TypeDescriptor) -> bool:
        return not inner(descriptor)

    return predicate
