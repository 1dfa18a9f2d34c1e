"""Selection configuration.

User-provided settings that change how filters are built and evaluated.
Every field has a default; an empty SelectionConfig() is the usual case.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeselect.domain.ports.attribute_source import AttributeSource


class PredicateErrorPolicy(Enum):
    """What to do when an attribute value predicate raises.

    SKIP: the offending instance does not match, evaluation continues.
    PROPAGATE: raise AttributePredicateError on the first failure.
    """

    SKIP = "skip"
    PROPAGATE = "propagate"


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    """Configuration DTO for filter building.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        on_predicate_error: Policy for exceptions raised by attribute predicates.
        reject_conflicts: Raise FilterConflictError on mutually exclusive
            conjuncts. False = allow them (the chain then selects nothing).
        attribute_source: Attribute introspection capability.
            None = read TypeDescriptor.attributes.
    """

    on_predicate_error: PredicateErrorPolicy = PredicateErrorPolicy.SKIP
    reject_conflicts: bool = True
    attribute_source: AttributeSource | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.on_predicate_error, PredicateErrorPolicy):
            raise TypeError(
                f"on_predicate_error must be PredicateErrorPolicy, "
                f"got {type(self.on_predicate_error).__name__}"
            )

        if self.attribute_source is not None and not callable(
            getattr(self.attribute_source, "attributes_of", None)
        ):
            raise TypeError("attribute_source must provide attributes_of()")

    @property
    def propagates_errors(self) -> bool:
        """Check if predicate errors abort evaluation."""
        return self.on_predicate_error is PredicateErrorPolicy.PROPAGATE
