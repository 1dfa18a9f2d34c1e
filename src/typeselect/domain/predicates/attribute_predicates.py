"""Attribute predicates.

Attribute instances come from an AttributeSource. An optional value
predicate narrows which instances count. Exceptions raised by the value
predicate are handled per instance according to PredicateErrorPolicy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from typeselect.domain.exceptions.evaluation import AttributePredicateError
from typeselect.domain.model.configuration import PredicateErrorPolicy
from typeselect.domain.predicates.composite import negate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typeselect.domain.model.type_descriptor import TypeDescriptor
    from typeselect.domain.ports.attribute_source import AttributeSource
    from typeselect.domain.predicates.base import TypePredicate, ValuePredicate

logger = logging.getLogger(__name__)


class DescriptorAttributeSource:
    """Default AttributeSource: reads TypeDescriptor.attributes.

    Subtypes match (isinstance), declaration order preserved.
    Stateless, one shared instance is enough.
    """

    __slots__ = ()

    def attributes_of(
        self,
        descriptor: TypeDescriptor,
        attribute_type: type,
    ) -> Sequence[object]:
        return tuple(a for a in descriptor.attributes if isinstance(a, attribute_type))


DEFAULT_ATTRIBUTE_SOURCE = DescriptorAttributeSource()


def _instance_matches(
    descriptor: TypeDescriptor,
    attribute_type: type,
    instance: object,
    value_predicate: ValuePredicate,
    on_error: PredicateErrorPolicy,
) -> bool:
    try:
        return bool(value_predicate(instance))
    except Exception as exc:
        if on_error is PredicateErrorPolicy.PROPAGATE:
            raise AttributePredicateError(descriptor.qualified_name, attribute_type) from exc
        logger.debug(
            "attribute predicate for %s raised on %s, instance treated as non-matching",
            attribute_type.__name__,
            descriptor.qualified_name,
            exc_info=True,
        )
        return False


def with_attribute(
    attribute_type: type,
    value_predicate: ValuePredicate | None = None,
    *,
    source: AttributeSource | None = None,
    on_error: PredicateErrorPolicy = PredicateErrorPolicy.SKIP,
) -> TypePredicate:
    """Create predicate: type carries an attribute of attribute_type.

    Args:
        attribute_type: Attribute class (subclasses match too)
        value_predicate: Test applied to each instance. None = any instance matches.
        source: Attribute introspection capability. None = descriptor attributes.
        on_error: What to do when value_predicate raises

    Returns:
        Predicate function

    Raises:
        AttributePredicateError: At evaluation time, only with PROPAGATE policy
    """
    attributes = source if source is not None else DEFAULT_ATTRIBUTE_SOURCE

    def predicate(descriptor: TypeDescriptor) -> bool:
        instances = attributes.attributes_of(descriptor, attribute_type)
        if value_predicate is None:
            return len(instances) > 0
        return any(
            _instance_matches(descriptor, attribute_type, instance, value_predicate, on_error)
            for instance in instances
        )

    return predicate


def without_attribute(
    attribute_type: type,
    value_predicate: ValuePredicate | None = None,
    *,
    source: AttributeSource | None = None,
    on_error: PredicateErrorPolicy = PredicateErrorPolicy.SKIP,
) -> TypePredicate:
    """Create predicate: type carries no matching attribute of attribute_type.

    Exact complement of with_attribute() with the same arguments.

    Returns:
        Predicate function
    """
    return negate(with_attribute(attribute_type, value_predicate, source=source, on_error=on_error))
