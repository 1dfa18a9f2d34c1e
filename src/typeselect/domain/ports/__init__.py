"""Domain ports (interfaces/protocols)."""

from typeselect.domain.ports.attribute_source import AttributeSource

__all__ = [
    "AttributeSource",
]
