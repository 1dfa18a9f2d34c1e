"""Namespace predicates.

Matching is exact: "App" does not match a type in "App.Services".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeselect.domain.predicates.composite import negate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.predicates.base import TypePredicate


def namespaces_of(types: Iterable[type]) -> frozenset[str]:
    """Derive namespaces from reference types.

    Args:
        types: Classes whose defining module is the namespace

    Returns:
        Set of namespaces (duplicates collapse)
    """
    return frozenset(t.__module__ for t in types)


def namespace_in(namespaces: Iterable[str]) -> TypePredicate:
    """Create predicate: type is declared in one of namespaces.

    Args:
        namespaces: Namespaces to accept. Empty = matches nothing.

    Returns:
        Predicate function
    """
    accepted = frozenset(namespaces)

    def predicate(descriptor: TypeDescriptor) -> bool:
        return descriptor.namespace in accepted

    return predicate


def not_namespace_in(namespaces: Iterable[str]) -> TypePredicate:
    """Create predicate: type is declared outside all of namespaces.

    Args:
        namespaces: Namespaces to reject. Empty = matches everything.

    Returns:
        Predicate function
    """
    return negate(namespace_in(namespaces))
