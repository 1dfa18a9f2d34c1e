"""pytest fixtures for type selection.

User overrides type_selector_config in their conftest.py.
"""

from __future__ import annotations

from types import ModuleType
from typing import TYPE_CHECKING

import pytest

from typeselect.domain.model.configuration import SelectionConfig
from typeselect.infrastructure.adapters.class_introspector import module_classes
from typeselect.presentation.api.dsl import TypeSelector

if TYPE_CHECKING:
    from collections.abc import Callable


def make_type_selector(
    sources: tuple[type | ModuleType, ...],
    config: SelectionConfig,
) -> TypeSelector:
    """Build TypeSelector over a mix of modules and classes.

    Modules contribute the classes they define. Candidates keep argument
    order, a class listed twice is described once.

    Args:
        sources: Modules and/or classes
        config: Selection configuration

    Returns:
        TypeSelector seeded with their descriptors
    """
    classes: list[type] = []
    for source in sources:
        if isinstance(source, ModuleType):
            classes.extend(module_classes(source))
        else:
            classes.append(source)
    return TypeSelector.from_classes(dict.fromkeys(classes), config=config)


@pytest.fixture(scope="session")
def type_selector_config() -> SelectionConfig:
    """Default selection configuration.

    User overrides this fixture in their conftest.py to provide
    custom configuration.

    Returns:
        Empty SelectionConfig (defaults only)
    """
    return SelectionConfig()


@pytest.fixture
def type_selector_factory(
    type_selector_config: SelectionConfig,
) -> Callable[..., TypeSelector]:
    """Factory for TypeSelector over classes or modules.

    Example:
        def test_services(type_selector_factory):
            selector = type_selector_factory(myapp.services)
            ...

    Returns:
        Callable accepting classes and/or modules
    """

    def factory(*sources: type | ModuleType) -> TypeSelector:
        return make_type_selector(sources, type_selector_config)

    return factory
