"""Design compliance tests.

Tests verifying cross-cutting properties:
- FAIL-FIRST validation at build time
- Immutability of every value handed to callers
- Purity: building never evaluates, evaluation never mutates
"""

from __future__ import annotations

import threading

import pytest

from tests.factories import Base, IFoo, Role, make_descriptor, make_mixed_universe
from typeselect.application.reporters.console import ConsoleConfig
from typeselect.domain.exceptions.validation import InvalidArgumentError
from typeselect.domain.model.composite_filter import CompositeFilter
from typeselect.domain.model.configuration import SelectionConfig
from typeselect.domain.model.conjunct import Conjunct, ConjunctKind
from typeselect.domain.model.selection_result import SelectionResult
from typeselect.domain.model.type_descriptor import TypeDescriptor
from typeselect.presentation.api.dsl import TypeSelector

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """None where a value is required fails immediately, naming the parameter."""

    @pytest.mark.parametrize(
        ("operation", "parameter"),
        [
            ("in_namespaces", "namespaces"),
            ("not_in_namespaces", "namespaces"),
            ("in_namespace_of", "types"),
            ("not_in_namespace_of", "types"),
            ("inherited_from_any", "types"),
            ("inherited_from", "base"),
            ("with_attribute", "attribute_type"),
            ("without_attribute", "attribute_type"),
            ("where", "predicate"),
        ],
    )
    def test_none_argument_raises(self, operation: str, parameter: str) -> None:
        builder = TypeSelector(make_mixed_universe()).select()
        with pytest.raises(InvalidArgumentError) as exc_info:
            getattr(builder, operation)(None)
        assert exc_info.value.parameter == parameter
        assert parameter in str(exc_info.value)

    def test_empty_sequence_is_not_an_error(self) -> None:
        builder = TypeSelector(make_mixed_universe()).select()
        assert builder.in_namespaces().inherited_from_any().execute() == ()


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Every value object is a frozen dataclass."""

    def test_type_descriptor_frozen(self) -> None:
        with pytest.raises(AttributeError):
            make_descriptor().ancestors = ()  # type: ignore[misc]

    def test_conjunct_frozen(self) -> None:
        conjunct = Conjunct(kind=ConjunctKind.CUSTOM, label="where(x)", predicate=bool)
        with pytest.raises(AttributeError):
            conjunct.label = "other"  # type: ignore[misc]

    def test_composite_filter_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CompositeFilter().conjuncts = ()  # type: ignore[misc]

    def test_selection_result_frozen(self) -> None:
        result = SelectionResult(composite_filter=CompositeFilter(), candidate_count=0, selected=())
        with pytest.raises(AttributeError):
            result.candidate_count = 1  # type: ignore[misc]

    def test_configs_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SelectionConfig().reject_conflicts = False  # type: ignore[misc]
        with pytest.raises(AttributeError):
            ConsoleConfig().max_types = 1  # type: ignore[misc]


# =============================================================================
# Purity
# =============================================================================


class TestPurity:
    """Building is lazy, evaluation is side-effect free."""

    def test_building_never_evaluates(self) -> None:
        calls: list[TypeDescriptor] = []
        TypeSelector(make_mixed_universe()).select().where(lambda d: calls.append(d) or True)
        assert calls == []

    def test_evaluation_returns_same_instances(self) -> None:
        universe = make_mixed_universe()
        selected = TypeSelector(universe).select().inherited_from_any(IFoo, Base).execute()
        assert all(any(s is u for u in universe) for s in selected)

    def test_repeated_evaluation_is_stable(self) -> None:
        built = TypeSelector(()).select().with_attribute(Role).build()
        universe = make_mixed_universe()
        assert built.apply(universe) == built.apply(universe)

    def test_concurrent_evaluation(self) -> None:
        built = TypeSelector(()).select().with_attribute(Role, lambda r: r.name == "admin").build()
        universe = make_mixed_universe() * 50
        expected = built.apply(universe)
        results: list[tuple[TypeDescriptor, ...]] = []
        lock = threading.Lock()

        def worker() -> None:
            selected = built.apply(universe)
            with lock:
                results.append(selected)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(r == expected for r in results)
