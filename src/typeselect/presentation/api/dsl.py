"""Fluent API (DSL) for type selection.

Entry point for building composite type filters by chaining conventions.

Example:
    selector = TypeSelector(descriptors)
    services = (
        selector.select()
        .in_namespaces("app.services")
        .inherited_from_any(Repository)
        .which_are_not_generic()
        .execute()
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from typeselect.domain.exceptions.validation import FilterConflictError, InvalidArgumentError
from typeselect.domain.model.composite_filter import CompositeFilter
from typeselect.domain.model.configuration import SelectionConfig
from typeselect.domain.model.conjunct import Conjunct, ConjunctKind
from typeselect.domain.predicates.attribute_predicates import with_attribute, without_attribute
from typeselect.domain.predicates.generic_predicates import is_generic, is_not_generic
from typeselect.domain.predicates.inheritance_predicates import (
    inherited_from,
    inherited_from_any,
)
from typeselect.domain.predicates.namespace_predicates import (
    namespace_in,
    namespaces_of,
    not_namespace_in,
)
from typeselect.infrastructure.adapters.class_introspector import describe_all, describe_module
from typeselect.presentation.api._helpers import (
    collect_namespaces,
    collect_types,
    make_label,
    require_attribute_type,
    require_callable,
    require_type,
    type_names,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

    from typeselect.domain.model.selection_result import SelectionResult
    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.predicates.base import TypePredicate, ValuePredicate

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    """Builder phase.

    SEEDING: no conjunct added yet
    NARROWING: at least one conjunct added
    """

    SEEDING = "seeding"
    NARROWING = "narrowing"


class TypeSelector:
    """Entry point for type selection.

    Holds the candidate universe and configuration.

    Attributes:
        _candidates: Discovered types, discovery order
        _config: Selection configuration
    """

    def __init__(
        self,
        candidates: Iterable[TypeDescriptor],
        config: SelectionConfig | None = None,
    ) -> None:
        """Initialize selector.

        Args:
            candidates: Fully populated type descriptors
            config: Selection configuration. Uses defaults if None.

        Raises:
            InvalidArgumentError: If candidates is None
        """
        if candidates is None:
            raise InvalidArgumentError("candidates")
        self._candidates = tuple(candidates)
        self._config = config or SelectionConfig()

    @classmethod
    def from_classes(
        cls,
        classes: Iterable[type],
        config: SelectionConfig | None = None,
    ) -> TypeSelector:
        """Create selector over live classes.

        Args:
            classes: Classes to describe
            config: Selection configuration

        Returns:
            TypeSelector seeded with their descriptors
        """
        return cls(describe_all(classes), config)

    @classmethod
    def from_modules(
        cls,
        *modules: ModuleType,
        config: SelectionConfig | None = None,
    ) -> TypeSelector:
        """Create selector over classes defined in loaded modules.

        Args:
            *modules: Modules to scan (module order, then definition order)
            config: Selection configuration

        Returns:
            TypeSelector seeded with their descriptors
        """
        descriptors: list[TypeDescriptor] = []
        for module in modules:
            descriptors.extend(describe_module(module))
        return cls(descriptors, config)

    def select(self) -> FilterBuilder:
        """Start filter chain.

        Returns:
            FilterBuilder with no conjuncts
        """
        return FilterBuilder.create(self._candidates, self._config)

    @property
    def candidates(self) -> tuple[TypeDescriptor, ...]:
        """Candidate universe."""
        return self._candidates

    @property
    def config(self) -> SelectionConfig:
        """Selection configuration."""
        return self._config


@dataclass(frozen=True, slots=True)
class FilterBuilder:
    """Immutable filter builder.

    Every call returns a new builder holding the previous conjuncts plus
    one. Earlier builders and filters already built never change.
    Conjuncts are AND-ed in call order.
    """

    _candidates: tuple[TypeDescriptor, ...]
    _config: SelectionConfig = field(default_factory=SelectionConfig)
    _filter: CompositeFilter = field(default_factory=CompositeFilter.identity)

    @classmethod
    def create(
        cls,
        candidates: Iterable[TypeDescriptor],
        config: SelectionConfig | None = None,
    ) -> FilterBuilder:
        """Create new builder for candidates.

        Args:
            candidates: Candidate universe
            config: Selection configuration. Uses defaults if None.

        Returns:
            Fresh FilterBuilder with no conjuncts

        Raises:
            InvalidArgumentError: If candidates is None
        """
        if candidates is None:
            raise InvalidArgumentError("candidates")
        return cls(_candidates=tuple(candidates), _config=config or SelectionConfig())

    def _with_conjunct(
        self,
        kind: ConjunctKind,
        label: str,
        predicate: TypePredicate,
    ) -> FilterBuilder:
        """Return new builder with additional conjunct.

        Args:
            kind: Filter family
            label: Conjunct description
            predicate: Matcher primitive

        Returns:
            New FilterBuilder with added conjunct (immutable)

        Raises:
            FilterConflictError: If conjunct contradicts an existing one
                and the config rejects conflicts
        """
        conjunct = Conjunct(kind=kind, label=label, predicate=predicate)
        if self._config.reject_conflicts:
            for existing in self._filter.conjuncts:
                if existing.conflicts_with(conjunct):
                    raise FilterConflictError(existing.kind, kind)
        return FilterBuilder(
            _candidates=self._candidates,
            _config=self._config,
            _filter=self._filter.with_conjunct(conjunct),
        )

    def in_namespaces(self, *namespaces: str | Iterable[str]) -> FilterBuilder:
        """Select types declared in one of namespaces.

        Exact match: "app" does not select types in "app.services".
        Accepts in_namespaces("a", "b") and in_namespaces(["a", "b"]).

        Args:
            *namespaces: Namespaces. None of them = selects nothing.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If namespaces is None or contains None
        """
        accepted = collect_namespaces("namespaces", namespaces)
        return self._with_conjunct(
            ConjunctKind.NAMESPACE,
            make_label("in_namespaces", accepted),
            namespace_in(accepted),
        )

    def in_namespace_of(self, *types: type | Iterable[type]) -> FilterBuilder:
        """Select types declared in the same namespace as one of types.

        Args:
            *types: Reference classes. None of them = selects nothing.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If types is None or contains a non-class
        """
        references = collect_types("types", types)
        return self._with_conjunct(
            ConjunctKind.NAMESPACE,
            make_label("in_namespace_of", type_names(references)),
            namespace_in(namespaces_of(references)),
        )

    def not_in_namespaces(self, *namespaces: str | Iterable[str]) -> FilterBuilder:
        """Select types declared outside all of namespaces.

        Args:
            *namespaces: Namespaces to exclude. None of them = excludes nothing.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If namespaces is None or contains None
        """
        rejected = collect_namespaces("namespaces", namespaces)
        return self._with_conjunct(
            ConjunctKind.NOT_NAMESPACE,
            make_label("not_in_namespaces", rejected),
            not_namespace_in(rejected),
        )

    def not_in_namespace_of(self, *types: type | Iterable[type]) -> FilterBuilder:
        """Select types declared outside the namespaces of types.

        Args:
            *types: Reference classes

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If types is None or contains a non-class
        """
        references = collect_types("types", types)
        return self._with_conjunct(
            ConjunctKind.NOT_NAMESPACE,
            make_label("not_in_namespace_of", type_names(references)),
            not_namespace_in(namespaces_of(references)),
        )

    def inherited_from_any(self, *types: type | Iterable[type]) -> FilterBuilder:
        """Select types inheriting from at least one of types.

        Strict: a type listed here is not selected because of itself.

        Args:
            *types: Ancestor classes. None of them = selects nothing.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If types is None or contains a non-class
        """
        bases = collect_types("types", types)
        return self._with_conjunct(
            ConjunctKind.INHERITANCE,
            make_label("inherited_from_any", type_names(bases)),
            inherited_from_any(bases),
        )

    def inherited_from(self, base: type) -> FilterBuilder:
        """Select types inheriting from base, directly or transitively.

        Args:
            base: Ancestor class

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If base is None or not a class
        """
        require_type("base", base)
        return self._with_conjunct(
            ConjunctKind.INHERITANCE,
            make_label("inherited_from", type_names((base,))),
            inherited_from(base),
        )

    def with_attribute(
        self,
        attribute_type: type,
        predicate: ValuePredicate | None = None,
    ) -> FilterBuilder:
        """Select types carrying an attribute of attribute_type.

        Args:
            attribute_type: Attribute class (subclasses match)
            predicate: Test on the attribute instance. None = any instance.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If attribute_type is not usable with
                isinstance (None, non-class, plain Protocol), or predicate
                is not callable
        """
        require_attribute_type("attribute_type", attribute_type)
        require_callable("predicate", predicate, optional=True)
        return self._with_conjunct(
            ConjunctKind.ATTRIBUTE,
            self._attribute_label("with_attribute", attribute_type, predicate),
            with_attribute(
                attribute_type,
                predicate,
                source=self._config.attribute_source,
                on_error=self._config.on_predicate_error,
            ),
        )

    def without_attribute(
        self,
        attribute_type: type,
        predicate: ValuePredicate | None = None,
    ) -> FilterBuilder:
        """Select types not carrying a (matching) attribute of attribute_type.

        Args:
            attribute_type: Attribute class (subclasses match)
            predicate: Test on the attribute instance. None = any instance.

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If attribute_type is not usable with
                isinstance (None, non-class, plain Protocol), or predicate
                is not callable
        """
        require_attribute_type("attribute_type", attribute_type)
        require_callable("predicate", predicate, optional=True)
        return self._with_conjunct(
            ConjunctKind.NOT_ATTRIBUTE,
            self._attribute_label("without_attribute", attribute_type, predicate),
            without_attribute(
                attribute_type,
                predicate,
                source=self._config.attribute_source,
                on_error=self._config.on_predicate_error,
            ),
        )

    def which_are_generic(self) -> FilterBuilder:
        """Select generic type definitions.

        Raises:
            FilterConflictError: If which_are_not_generic() is already in
                the chain and the config rejects conflicts
        """
        return self._with_conjunct(
            ConjunctKind.GENERIC,
            make_label("which_are_generic"),
            is_generic(),
        )

    def which_are_not_generic(self) -> FilterBuilder:
        """Select types that are not generic type definitions.

        Raises:
            FilterConflictError: If which_are_generic() is already in
                the chain and the config rejects conflicts
        """
        return self._with_conjunct(
            ConjunctKind.NOT_GENERIC,
            make_label("which_are_not_generic"),
            is_not_generic(),
        )

    def where(self, predicate: TypePredicate) -> FilterBuilder:
        """Select types matching a custom predicate.

        Args:
            predicate: Function returning True for selected descriptors

        Returns:
            Narrowed FilterBuilder

        Raises:
            InvalidArgumentError: If predicate is None or not callable
        """
        require_callable("predicate", predicate)
        name = getattr(predicate, "__name__", type(predicate).__name__)
        return self._with_conjunct(ConjunctKind.CUSTOM, make_label("where", (name,)), predicate)

    def build(self) -> CompositeFilter:
        """Finalize chain into an immutable filter.

        Calls made on this builder afterwards return new builders and
        never alter the returned filter.

        Returns:
            CompositeFilter with all conjuncts in call order
        """
        logger.debug("built type filter with %d conjunct(s)", self._filter.conjunct_count)
        return self._filter

    def execute(self) -> tuple[TypeDescriptor, ...]:
        """Apply filter to the seeded universe.

        Returns:
            Selected descriptors, universe order preserved
        """
        return self.build().apply(self._candidates)

    def evaluate(self) -> SelectionResult:
        """Apply filter to the seeded universe and keep the totals.

        Returns:
            SelectionResult for reporting
        """
        return self.build().evaluate(self._candidates)

    @property
    def state(self) -> BuilderState:
        """Current builder phase."""
        return BuilderState.SEEDING if self._filter.is_identity else BuilderState.NARROWING

    @property
    def conjunct_count(self) -> int:
        """Number of conjuncts added so far."""
        return self._filter.conjunct_count

    @property
    def candidates(self) -> tuple[TypeDescriptor, ...]:
        """Seeded candidate universe."""
        return self._candidates

    @staticmethod
    def _attribute_label(
        operation: str,
        attribute_type: type,
        predicate: ValuePredicate | None,
    ) -> str:
        items = type_names((attribute_type,))
        if predicate is not None:
            items = (*items, getattr(predicate, "__name__", "predicate"))
        return make_label(operation, items)
