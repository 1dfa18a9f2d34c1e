"""pytest plugin for typeselect.

Provides fixtures for convention tests:
    type_selector_config: Selection configuration (override in conftest.py)
    type_selector_factory: Builds TypeSelector from classes or modules
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from typeselect.presentation.pytest_plugin.fixtures import (
    type_selector_config,
    type_selector_factory,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "type_selector_config",
    "type_selector_factory",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "conventions: mark test as type convention test",
    )
