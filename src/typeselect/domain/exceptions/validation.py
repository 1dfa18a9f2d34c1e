"""Build-time validation exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeselect.domain.exceptions.base import TypeSelectError

if TYPE_CHECKING:
    from typeselect.domain.model.conjunct import ConjunctKind


class InvalidArgumentError(TypeSelectError, TypeError):
    """Argument rejected while building a filter.

    Raised for None where a value is required, or for a non-class
    where a type reference is expected. FAIL-FIRST: raised at call time,
    never deferred to evaluation.

    Attributes:
        parameter: Name of the offending parameter (must not be empty)
        reason: Why the value was rejected
    """

    def __init__(self, parameter: str, reason: str = "must not be None") -> None:
        if not parameter:
            raise ValueError("parameter must not be empty")

        self.parameter = parameter
        self.reason = reason
        super().__init__(f"{parameter} {reason}")


class FilterConflictError(TypeSelectError):
    """Two conjuncts in one chain can never both hold.

    Attributes:
        existing: Kind already present in the chain
        added: Kind whose addition caused the conflict
    """

    def __init__(self, existing: ConjunctKind, added: ConjunctKind) -> None:
        self.existing = existing
        self.added = added
        super().__init__(
            f"{added.value} conflicts with {existing.value} already in the chain"
        )
