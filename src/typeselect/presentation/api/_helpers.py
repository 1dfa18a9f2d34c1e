"""Argument normalization for the fluent API.

Internal module - not part of public API.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from typeselect.domain.exceptions.validation import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable


def flatten_args(parameter: str, values: tuple[object, ...]) -> tuple[object, ...]:
    """Accept both f("a", "b") and f(["a", "b"]).

    A single non-string, non-class iterable argument is unpacked.
    Classes are never unpacked (Enum classes are iterable).

    Args:
        parameter: Parameter name for error messages
        values: Raw *args

    Returns:
        Flat tuple of values (may be empty)

    Raises:
        InvalidArgumentError: If the sequence or any item is None
    """
    if len(values) == 1:
        only = values[0]
        if only is None:
            raise InvalidArgumentError(parameter)
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes, type)):
            values = tuple(only)

    for value in values:
        if value is None:
            raise InvalidArgumentError(parameter, "must not contain None")
    return values


def collect_namespaces(parameter: str, values: tuple[object, ...]) -> tuple[str, ...]:
    """Normalize namespace arguments.

    Raises:
        InvalidArgumentError: If a value is None or not a string
    """
    namespaces = flatten_args(parameter, values)
    for namespace in namespaces:
        if not isinstance(namespace, str):
            raise InvalidArgumentError(
                parameter, f"must contain strings, got {type(namespace).__name__}"
            )
    return namespaces  # type: ignore[return-value]


def collect_types(parameter: str, values: tuple[object, ...]) -> tuple[type, ...]:
    """Normalize type reference arguments.

    Raises:
        InvalidArgumentError: If a value is None or not a class
    """
    types = flatten_args(parameter, values)
    for value in types:
        require_type(parameter, value)
    return types  # type: ignore[return-value]


def require_type(parameter: str, value: object) -> type:
    """Validate a single type reference.

    Raises:
        InvalidArgumentError: If value is None or not a class
    """
    if value is None:
        raise InvalidArgumentError(parameter)
    if not isinstance(value, type):
        raise InvalidArgumentError(parameter, f"must be a class, got {type(value).__name__}")
    return value


def require_attribute_type(parameter: str, value: object) -> type:
    """Validate an attribute type usable with isinstance.

    Raises:
        InvalidArgumentError: If value fails require_type or is a
            Protocol without @runtime_checkable
    """
    attribute_type = require_type(parameter, value)
    if getattr(attribute_type, "_is_protocol", False) and not getattr(
        attribute_type, "_is_runtime_protocol", False
    ):
        raise InvalidArgumentError(
            parameter,
            f"must be a runtime_checkable protocol, got {attribute_type.__qualname__}",
        )
    return attribute_type


def require_callable(
    parameter: str,
    value: Callable[..., object] | None,
    *,
    optional: bool = False,
) -> None:
    """Validate a predicate argument.

    Raises:
        InvalidArgumentError: If value is None (unless optional) or not callable
    """
    if value is None:
        if optional:
            return
        raise InvalidArgumentError(parameter)
    if not callable(value):
        raise InvalidArgumentError(parameter, f"must be callable, got {type(value).__name__}")


def make_label(operation: str, items: Iterable[str] = ()) -> str:
    """Render conjunct label: operation(item, item)."""
    return f"{operation}({', '.join(items)})"


def type_names(types: Iterable[type]) -> tuple[str, ...]:
    """Display names for type references."""
    return tuple(t.__qualname__ for t in types)
