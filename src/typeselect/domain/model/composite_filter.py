"""CompositeFilter: finished AND-combination of conjuncts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typeselect.domain.exceptions.validation import InvalidArgumentError
from typeselect.domain.model.selection_result import SelectionResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeselect.domain.model.conjunct import Conjunct
    from typeselect.domain.model.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class CompositeFilter:
    """Immutable, reusable type predicate.

    Conjuncts are evaluated left to right and evaluation stops at the
    first failure. Order is the caller's: nothing is reordered.
    Safe to evaluate concurrently (no mutable state).

    Attributes:
        conjuncts: Predicates AND-ed together, in chain order
    """

    conjuncts: tuple[Conjunct, ...] = ()

    def __post_init__(self) -> None:
        """Freeze conjuncts into a tuple."""
        object.__setattr__(self, "conjuncts", tuple(self.conjuncts))

    @classmethod
    def identity(cls) -> CompositeFilter:
        """Create filter with no conjuncts (selects everything)."""
        return cls()

    @property
    def is_identity(self) -> bool:
        """Check if filter selects every candidate."""
        return not self.conjuncts

    @property
    def conjunct_count(self) -> int:
        """Number of conjuncts."""
        return len(self.conjuncts)

    def with_conjunct(self, conjunct: Conjunct) -> CompositeFilter:
        """Return new filter with conjunct appended (self unchanged).

        Args:
            conjunct: Conjunct to AND with existing ones

        Returns:
            New CompositeFilter
        """
        return CompositeFilter(conjuncts=(*self.conjuncts, conjunct))

    def matches(self, candidate: TypeDescriptor) -> bool:
        """Evaluate filter against one candidate.

        Args:
            candidate: Type to test

        Returns:
            True if every conjunct holds
        """
        for conjunct in self.conjuncts:
            if not conjunct.predicate(candidate):
                return False
        return True

    def __call__(self, candidate: TypeDescriptor) -> bool:
        return self.matches(candidate)

    def apply(self, candidates: Iterable[TypeDescriptor]) -> tuple[TypeDescriptor, ...]:
        """Select matching candidates.

        Args:
            candidates: Types to filter (not mutated)

        Returns:
            Matching candidates, input order preserved.
            Identity filter returns every candidate.

        Raises:
            InvalidArgumentError: If candidates is None

        Complexity: O(N * C) where N=candidates, C=conjuncts
        """
        if candidates is None:
            raise InvalidArgumentError("candidates")
        if self.is_identity:
            return tuple(candidates)
        return tuple(c for c in candidates if self.matches(c))

    def evaluate(self, candidates: Iterable[TypeDescriptor]) -> SelectionResult:
        """Select matching candidates and keep the totals.

        Args:
            candidates: Types to filter

        Returns:
            SelectionResult with this filter, candidate count and selection
        """
        if candidates is None:
            raise InvalidArgumentError("candidates")
        universe = tuple(candidates)
        return SelectionResult(
            composite_filter=self,
            candidate_count=len(universe),
            selected=self.apply(universe),
        )

    def describe(self) -> tuple[str, ...]:
        """Conjunct labels in chain order."""
        return tuple(c.label for c in self.conjuncts)
