"""Domain model entities."""

from typeselect.domain.model.composite_filter import CompositeFilter
from typeselect.domain.model.configuration import PredicateErrorPolicy, SelectionConfig
from typeselect.domain.model.conjunct import Conjunct, ConjunctKind
from typeselect.domain.model.selection_result import SelectionResult
from typeselect.domain.model.type_descriptor import TypeDescriptor

__all__ = [
    # Enums
    "ConjunctKind",
    "PredicateErrorPolicy",
    # Entities
    "TypeDescriptor",
    "Conjunct",
    "CompositeFilter",
    "SelectionResult",
    # Configuration
    "SelectionConfig",
]
