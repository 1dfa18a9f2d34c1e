"""Tests for domain/predicates/attribute_predicates.py."""

import logging
from collections.abc import Sequence

import pytest

from tests.factories import AdminRole, Role, Singleton, make_descriptor, make_mixed_universe
from typeselect.domain.exceptions.evaluation import AttributePredicateError
from typeselect.domain.model.configuration import PredicateErrorPolicy
from typeselect.domain.model.type_descriptor import TypeDescriptor
from typeselect.domain.predicates.attribute_predicates import (
    DescriptorAttributeSource,
    with_attribute,
    without_attribute,
)


class Broken:
    """Attribute whose field access fails."""

    @property
    def name(self) -> str:
        raise RuntimeError("inaccessible attribute value")


class TestDescriptorAttributeSource:
    """Tests for the default attribute source."""

    def test_filters_by_type(self) -> None:
        descriptor = make_descriptor(attributes=(Role("a"), Singleton(), Role("b")))
        found = DescriptorAttributeSource().attributes_of(descriptor, Role)
        assert found == (Role("a"), Role("b"))

    def test_includes_subtypes(self) -> None:
        descriptor = make_descriptor(attributes=(AdminRole("root"),))
        assert DescriptorAttributeSource().attributes_of(descriptor, Role) == (AdminRole("root"),)

    def test_supertype_instance_not_returned_for_subtype(self) -> None:
        descriptor = make_descriptor(attributes=(Role("a"),))
        assert DescriptorAttributeSource().attributes_of(descriptor, AdminRole) == ()


class TestWithAttribute:
    """Tests for with_attribute predicate."""

    def test_present(self) -> None:
        pred = with_attribute(Singleton)
        assert pred(make_descriptor(attributes=(Singleton(),))) is True

    def test_absent(self) -> None:
        pred = with_attribute(Singleton)
        assert pred(make_descriptor(attributes=(Role("x"),))) is False

    def test_subtype_matches(self) -> None:
        pred = with_attribute(Role)
        assert pred(make_descriptor(attributes=(AdminRole("root"),))) is True

    def test_value_predicate_scopes_instances(self) -> None:
        pred = with_attribute(Role, lambda r: r.name == "x")
        assert pred(make_descriptor("X", attributes=(Role("x"),))) is True
        assert pred(make_descriptor("Y", attributes=(Role("y"),))) is False

    def test_any_instance_may_satisfy(self) -> None:
        pred = with_attribute(Role, lambda r: r.name == "y")
        assert pred(make_descriptor(attributes=(Role("x"), Role("y")))) is True

    def test_value_predicate_without_instances(self) -> None:
        pred = with_attribute(Role, lambda r: True)
        assert pred(make_descriptor(attributes=())) is False

    def test_truthy_result_coerced(self) -> None:
        pred = with_attribute(Role, lambda r: r.name)
        assert pred(make_descriptor(attributes=(Role("x"),))) is True


class TestWithAttributeErrorPolicy:
    """Tests for exceptions raised by value predicates."""

    def test_skip_treats_instance_as_non_matching(self) -> None:
        pred = with_attribute(Broken, lambda b: b.name == "x")
        assert pred(make_descriptor(attributes=(Broken(),))) is False

    def test_skip_continues_with_remaining_instances(self) -> None:
        def by_name(role: object) -> bool:
            if isinstance(role, Role) and role.name == "bad":
                raise ValueError("bad role")
            return isinstance(role, Role) and role.name == "good"

        pred = with_attribute(Role, by_name)
        assert pred(make_descriptor(attributes=(Role("bad"), Role("good")))) is True

    def test_skip_continues_with_remaining_candidates(self) -> None:
        pred = with_attribute(Role, lambda r: 1 / len(r.name) > 0)
        universe = (
            make_descriptor("Empty", attributes=(Role(""),)),
            make_descriptor("Named", attributes=(Role("n"),)),
        )
        assert [d.name for d in universe if pred(d)] == ["Named"]

    def test_skip_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        pred = with_attribute(Broken, lambda b: b.name == "x")
        with caplog.at_level(logging.DEBUG, logger="typeselect"):
            pred(make_descriptor("Faulty", attributes=(Broken(),)))
        assert "App.Services.Faulty" in caplog.text

    def test_propagate_raises(self) -> None:
        pred = with_attribute(
            Broken,
            lambda b: b.name == "x",
            on_error=PredicateErrorPolicy.PROPAGATE,
        )
        with pytest.raises(AttributePredicateError, match="App.Services.Faulty") as exc_info:
            pred(make_descriptor("Faulty", attributes=(Broken(),)))
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.attribute_type is Broken

    def test_propagate_does_not_affect_healthy_predicates(self) -> None:
        pred = with_attribute(
            Role,
            lambda r: r.name == "x",
            on_error=PredicateErrorPolicy.PROPAGATE,
        )
        assert pred(make_descriptor(attributes=(Role("x"),))) is True


class TestWithAttributeSource:
    """Tests for a custom AttributeSource."""

    def test_uses_source(self) -> None:
        class RegistrySource:
            def __init__(self) -> None:
                self.calls: list[str] = []

            def attributes_of(
                self, descriptor: TypeDescriptor, attribute_type: type
            ) -> Sequence[object]:
                self.calls.append(descriptor.qualified_name)
                if descriptor.name == "Registered":
                    return (Role("from-registry"),)
                return ()

        source = RegistrySource()
        pred = with_attribute(Role, lambda r: r.name == "from-registry", source=source)
        assert pred(make_descriptor("Registered")) is True
        assert pred(make_descriptor("Other", attributes=(Role("from-registry"),))) is False
        assert source.calls == ["App.Services.Registered", "App.Services.Other"]


class TestWithoutAttribute:
    """Tests for without_attribute predicate."""

    def test_absent(self) -> None:
        pred = without_attribute(Singleton)
        assert pred(make_descriptor(attributes=())) is True

    def test_present(self) -> None:
        pred = without_attribute(Singleton)
        assert pred(make_descriptor(attributes=(Singleton(),))) is False

    def test_with_value_predicate(self) -> None:
        pred = without_attribute(Role, lambda r: r.name == "admin")
        assert pred(make_descriptor(attributes=(Role("user"),))) is True
        assert pred(make_descriptor(attributes=(Role("admin"),))) is False

    def test_complement(self) -> None:
        for value_predicate in (None, lambda r: r.name == "admin"):
            for descriptor in make_mixed_universe():
                assert with_attribute(Role, value_predicate)(descriptor) != without_attribute(
                    Role, value_predicate
                )(descriptor)

    def test_complement_with_failing_predicate(self) -> None:
        descriptor = make_descriptor(attributes=(Broken(),))
        assert with_attribute(Broken, lambda b: b.name)(descriptor) is False
        assert without_attribute(Broken, lambda b: b.name)(descriptor) is True
