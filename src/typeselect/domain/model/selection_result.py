"""Selection result value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeselect.domain.model.composite_filter import CompositeFilter
    from typeselect.domain.model.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of applying a CompositeFilter to a universe.

    Attributes:
        composite_filter: Filter that produced the selection
        candidate_count: Number of candidates evaluated
        selected: Selected types, input order preserved
    """

    composite_filter: CompositeFilter
    candidate_count: int
    selected: tuple[TypeDescriptor, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.candidate_count < 0:
            raise ValueError(f"candidate_count must be >= 0, got {self.candidate_count}")
        if len(self.selected) > self.candidate_count:
            raise ValueError(
                f"selected ({len(self.selected)}) must not exceed "
                f"candidate_count ({self.candidate_count})"
            )

    @property
    def selected_count(self) -> int:
        """Number of selected types."""
        return len(self.selected)

    @property
    def rejected_count(self) -> int:
        """Number of candidates the filter rejected."""
        return self.candidate_count - len(self.selected)

    @property
    def qualified_names(self) -> tuple[str, ...]:
        """Qualified names of selected types, in order."""
        return tuple(d.qualified_name for d in self.selected)
