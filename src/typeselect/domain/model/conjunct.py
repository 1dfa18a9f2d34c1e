"""Conjunct value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeselect.domain.predicates.base import TypePredicate


class ConjunctKind(Enum):
    """Filter family a conjunct belongs to."""

    NAMESPACE = "in_namespaces"
    NOT_NAMESPACE = "not_in_namespaces"
    INHERITANCE = "inherited_from"
    ATTRIBUTE = "with_attribute"
    NOT_ATTRIBUTE = "without_attribute"
    GENERIC = "which_are_generic"
    NOT_GENERIC = "which_are_not_generic"
    CUSTOM = "where"


# Kinds that can never hold together for the same candidate
EXCLUSIVE_KINDS: frozenset[frozenset[ConjunctKind]] = frozenset(
    {frozenset({ConjunctKind.GENERIC, ConjunctKind.NOT_GENERIC})}
)


@dataclass(frozen=True, slots=True)
class Conjunct:
    """One predicate contributed by a single fluent call.

    Attributes:
        kind: Filter family
        label: Human-readable description (e.g., "in_namespaces(App.Services)")
        predicate: Matcher primitive
    """

    kind: ConjunctKind
    label: str
    predicate: TypePredicate

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.label:
            raise ValueError("conjunct label must not be empty")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")

    def conflicts_with(self, other: Conjunct) -> bool:
        """Check if both conjuncts can never be true together."""
        return frozenset({self.kind, other.kind}) in EXCLUSIVE_KINDS
