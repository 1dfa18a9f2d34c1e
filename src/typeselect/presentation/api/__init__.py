"""Fluent API for type selection.

Public exports:
    TypeSelector: Entry point for fluent DSL
    FilterBuilder: Immutable filter builder
    BuilderState: Builder phase (SEEDING / NARROWING)
"""

from typeselect.presentation.api.dsl import BuilderState, FilterBuilder, TypeSelector

__all__ = [
    "BuilderState",
    "FilterBuilder",
    "TypeSelector",
]
