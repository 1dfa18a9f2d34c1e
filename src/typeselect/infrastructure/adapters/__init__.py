"""Infrastructure adapters for external interfaces."""

from typeselect.infrastructure.adapters.class_introspector import (
    attribute,
    attributes_of,
    describe,
    describe_all,
    describe_module,
    module_classes,
)

__all__ = [
    "attribute",
    "attributes_of",
    "describe",
    "describe_all",
    "describe_module",
    "module_classes",
]
