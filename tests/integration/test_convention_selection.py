"""Integration tests: conventions over live classes.

Discovery (describe_module) → fluent filter → selection → report.
"""

import pytest

from tests.integration.sample_app import contracts, models, services
from tests.integration.sample_app.contracts import IHandler, IRepository, Lifetime, Obsolete
from tests.integration.sample_app.services import CreateOrderHandler
from typeselect import (
    AttributePredicateError,
    PredicateErrorPolicy,
    SelectionConfig,
    TypeSelector,
)
from typeselect.application.reporters.console import ConsoleReporter


@pytest.fixture
def selector() -> TypeSelector:
    """Selector over every module of the sample application."""
    return TypeSelector.from_modules(contracts, services, models)


def names(descriptors) -> list[str]:
    """Simple names of descriptors, in order."""
    return [d.name for d in descriptors]


class TestConventions:
    """Typical registration conventions."""

    def test_interface_namespace_holds_no_implementations(self, selector: TypeSelector) -> None:
        selected = (
            selector.select()
            .in_namespace_of(IRepository)
            .inherited_from(IRepository)
            .which_are_not_generic()
            .execute()
        )
        assert selected == ()

    def test_repositories_in_services(self, selector: TypeSelector) -> None:
        selected = (
            selector.select()
            .in_namespaces(services.__name__)
            .inherited_from(IRepository)
            .which_are_not_generic()
            .execute()
        )
        assert names(selected) == ["UserRepository", "OrderRepository"]

    def test_generic_repositories(self, selector: TypeSelector) -> None:
        selected = selector.select().inherited_from(IRepository).which_are_generic().execute()
        assert names(selected) == ["Repository"]

    def test_handlers_transitive(self, selector: TypeSelector) -> None:
        selected = selector.select().inherited_from_any(IHandler).execute()
        assert names(selected) == [
            "LegacyHandler",
            "CreateOrderHandler",
            "AuditedCreateOrderHandler",
            "OrderHandler",
        ]

    def test_handlers_without_obsolete(self, selector: TypeSelector) -> None:
        selected = (
            selector.select()
            .inherited_from(IHandler)
            .without_attribute(Obsolete)
            .not_in_namespace_of(models.Order)
            .execute()
        )
        assert names(selected) == ["CreateOrderHandler", "AuditedCreateOrderHandler"]

    def test_handler_is_not_its_own_ancestor(self, selector: TypeSelector) -> None:
        selected = selector.select().inherited_from(CreateOrderHandler).execute()
        assert names(selected) == ["AuditedCreateOrderHandler"]

    def test_singletons(self, selector: TypeSelector) -> None:
        selected = (
            selector.select()
            .with_attribute(Lifetime, lambda lifetime: lifetime.scope == "singleton")
            .execute()
        )
        assert names(selected) == ["UserRepository"]


class TestErrorPolicies:
    """Predicate failures against live attributes."""

    def test_skip(self, selector: TypeSelector) -> None:
        selected = (
            selector.select()
            .with_attribute(Lifetime, lambda lifetime: lifetime.scope.upper() == lifetime.bogus)
            .execute()
        )
        assert selected == ()

    def test_propagate(self) -> None:
        config = SelectionConfig(on_predicate_error=PredicateErrorPolicy.PROPAGATE)
        selector = TypeSelector.from_modules(services, config=config)
        builder = selector.select().with_attribute(Lifetime, lambda lifetime: lifetime.bogus)
        with pytest.raises(AttributePredicateError, match="UserRepository"):
            builder.execute()


class TestReport:
    """Selection rendered by the console reporter."""

    def test_report_contains_selection(self, selector: TypeSelector) -> None:
        result = selector.select().in_namespaces(models.__name__).evaluate()
        output = ConsoleReporter().report(result)
        assert "OrderHandler" in output
        assert "sample_app.models" in output
