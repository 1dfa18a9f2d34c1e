"""Class introspector: live Python classes → TypeDescriptor.

Mapping:
    qualified_name: "{__module__}.{__qualname__}"
    namespace: __module__
    ancestors: __mro__ without the class itself
    is_generic_type_definition: non-empty __parameters__ (Generic[T], class C[T])
    attributes: instances attached with @attribute(...)

Attributes are inherited by default: own instances first, then each
ancestor's in MRO order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeselect.domain.exceptions.validation import InvalidArgumentError
from typeselect.domain.model.type_descriptor import TypeDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import ModuleType

# Class __dict__ key holding attribute instances attached to that class
ATTRIBUTES_KEY = "__typeselect_attributes__"


def attribute[C: type](*instances: object) -> Callable[[C], C]:
    """Class decorator: attach attribute instances to a class.

    Stacked decorators keep reading order (top decorator first).

    Example:
        @attribute(Role("admin"), Singleton())
        class AdminService: ...

    Args:
        *instances: Attribute instances (not classes)

    Returns:
        Decorator returning the same class

    Raises:
        InvalidArgumentError: If an instance is None or a class
    """
    for instance in instances:
        if instance is None:
            raise InvalidArgumentError("instances")
        if isinstance(instance, type):
            raise InvalidArgumentError(
                "instances", f"must be attribute instances, got class {instance.__name__}"
            )

    def decorator(cls: C) -> C:
        own = cls.__dict__.get(ATTRIBUTES_KEY, ())
        setattr(cls, ATTRIBUTES_KEY, (*instances, *own))
        return cls

    return decorator


def attributes_of(cls: type, *, inherit: bool = True) -> tuple[object, ...]:
    """Collect attribute instances attached to cls.

    Args:
        cls: Class to inspect
        inherit: Include instances attached to ancestors

    Returns:
        Own instances first, then ancestors' in MRO order
    """
    owners = cls.__mro__ if inherit else (cls,)
    collected: list[object] = []
    for owner in owners:
        collected.extend(owner.__dict__.get(ATTRIBUTES_KEY, ()))
    return tuple(collected)


def is_generic_type_definition(cls: type) -> bool:
    """Check if cls still has unbound type parameters.

    Generic[T] subclasses and PEP 695 classes are definitions;
    a subclass of Box[int] is not.
    """
    return bool(getattr(cls, "__parameters__", ()))


def describe(cls: type, *, inherit_attributes: bool = True) -> TypeDescriptor:
    """Build TypeDescriptor for a live class.

    Args:
        cls: Class to describe
        inherit_attributes: Include attributes attached to ancestors

    Returns:
        Fully populated TypeDescriptor

    Raises:
        InvalidArgumentError: If cls is None or not a class
    """
    if cls is None:
        raise InvalidArgumentError("cls")
    if not isinstance(cls, type):
        raise InvalidArgumentError("cls", f"must be a class, got {type(cls).__name__}")

    return TypeDescriptor(
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        namespace=cls.__module__,
        ancestors=cls.__mro__[1:],
        is_generic_type_definition=is_generic_type_definition(cls),
        attributes=attributes_of(cls, inherit=inherit_attributes),
        type_=cls,
    )


def describe_all(
    classes: Iterable[type],
    *,
    inherit_attributes: bool = True,
) -> tuple[TypeDescriptor, ...]:
    """Describe classes, order preserved.

    Raises:
        InvalidArgumentError: If classes is None or contains a non-class
    """
    if classes is None:
        raise InvalidArgumentError("classes")
    return tuple(describe(c, inherit_attributes=inherit_attributes) for c in classes)


def module_classes(module: ModuleType) -> tuple[type, ...]:
    """Classes defined in module (imported names skipped).

    Args:
        module: Loaded module

    Returns:
        Classes in module namespace order, aliases collapsed

    Raises:
        InvalidArgumentError: If module is None
    """
    if module is None:
        raise InvalidArgumentError("module")

    seen: set[type] = set()
    classes: list[type] = []
    for value in vars(module).values():
        if not isinstance(value, type) or value.__module__ != module.__name__:
            continue
        if value in seen:
            continue
        seen.add(value)
        classes.append(value)
    return tuple(classes)


def describe_module(
    module: ModuleType,
    *,
    inherit_attributes: bool = True,
) -> tuple[TypeDescriptor, ...]:
    """Describe classes defined in module (imported names skipped).

    Args:
        module: Loaded module
        inherit_attributes: Include attributes attached to ancestors

    Returns:
        Descriptors in module namespace order, aliases collapsed

    Raises:
        InvalidArgumentError: If module is None
    """
    return describe_all(module_classes(module), inherit_attributes=inherit_attributes)
