"""TypeDescriptor entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Read-only view of one candidate type.

    Produced by a discovery collaborator, fully populated before
    filtering. Never mutated by typeselect.

    Attributes:
        qualified_name: Full path (namespace.Name)
        namespace: Namespace the type is declared in ("" for top level)
        ancestors: Transitive supertypes, excluding the type itself
        is_generic_type_definition: Open generic definition (has type parameters)
        attributes: Attribute instances attached to the type
        type_: Live class, None when described without one
    """

    qualified_name: str
    namespace: str
    ancestors: tuple[type, ...] = ()
    is_generic_type_definition: bool = False
    attributes: tuple[object, ...] = ()
    type_: type | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "ancestors", tuple(self.ancestors))
        object.__setattr__(self, "attributes", tuple(self.attributes))

        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")

        if self.namespace and not self.qualified_name.startswith(self.namespace + "."):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must start with namespace '{self.namespace}'"
            )

        if self.type_ is not None and self.type_ in self.ancestors:
            raise ValueError(f"'{self.qualified_name}' must not be its own ancestor")

    @property
    def name(self) -> str:
        """Simple name (qualified name without namespace)."""
        if not self.namespace:
            return self.qualified_name
        return self.qualified_name[len(self.namespace) + 1 :]

    @property
    def ancestor_set(self) -> frozenset[type]:
        """Ancestors as a set for membership tests."""
        return frozenset(self.ancestors)

    def has_ancestor(self, base: type) -> bool:
        """Check if base is a strict ancestor. O(A)."""
        return base in self.ancestors
