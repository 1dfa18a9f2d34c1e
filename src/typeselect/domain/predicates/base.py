"""Predicate type aliases.

Python 3.12+ PEP 695 type alias syntax.
TypePredicate: takes TypeDescriptor, returns True to select.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeselect.domain.model.type_descriptor import TypeDescriptor

type TypePredicate = Callable[[TypeDescriptor], bool]

# Predicate over a single attribute instance (user supplied)
type ValuePredicate = Callable[[object], bool]
