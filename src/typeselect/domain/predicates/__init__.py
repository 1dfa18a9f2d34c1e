"""Domain predicates (matcher primitives)."""

from typeselect.domain.predicates.attribute_predicates import (
    DescriptorAttributeSource,
    with_attribute,
    without_attribute,
)
from typeselect.domain.predicates.base import TypePredicate, ValuePredicate
from typeselect.domain.predicates.composite import negate
from typeselect.domain.predicates.generic_predicates import is_generic, is_not_generic
from typeselect.domain.predicates.inheritance_predicates import (
    inherited_from,
    inherited_from_any,
    not_inherited_from_any,
)
from typeselect.domain.predicates.namespace_predicates import (
    namespace_in,
    namespaces_of,
    not_namespace_in,
)

__all__ = [
    # Type aliases
    "TypePredicate",
    "ValuePredicate",
    # Combinator
    "negate",
    # Namespace predicates
    "namespace_in",
    "namespaces_of",
    "not_namespace_in",
    # Inheritance predicates
    "inherited_from",
    "inherited_from_any",
    "not_inherited_from_any",
    # Attribute predicates
    "DescriptorAttributeSource",
    "with_attribute",
    "without_attribute",
    # Genericity predicates
    "is_generic",
    "is_not_generic",
]
