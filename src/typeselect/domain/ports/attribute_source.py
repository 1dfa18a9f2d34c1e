"""Attribute source port (capability protocol).

Reading attribute instances off a type is a metadata concern of the
discovery collaborator. Filters only ask this protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typeselect.domain.model.type_descriptor import TypeDescriptor


class AttributeSource(Protocol):
    """Contract for attribute introspection.

    Example:
        class RegistryAttributeSource:
            def __init__(self, registry: Mapping[str, tuple[object, ...]]) -> None:
                self._registry = registry

            def attributes_of(
                self, descriptor: TypeDescriptor, attribute_type: type
            ) -> Sequence[object]:
                found = self._registry.get(descriptor.qualified_name, ())
                return tuple(a for a in found if isinstance(a, attribute_type))
    """

    def attributes_of(
        self,
        descriptor: TypeDescriptor,
        attribute_type: type,
    ) -> Sequence[object]:
        """Return attribute instances of attribute_type carried by descriptor.

        Subtypes of attribute_type count as instances of it.

        Args:
            descriptor: Candidate type
            attribute_type: Attribute class to look for

        Returns:
            Matching instances in declaration order (empty if none)
        """
        ...
