from __future__ import annotations

import collections.abc
import inspect
import types
import typing
from typing import Annotated, Any, Literal, TypeGuard, TypeVar, Union, get_args, get_origin

_UNION_ORIGINS: tuple[object, ...] = (Union, types.UnionType)
_NUMERIC_PROMOTIONS: dict[type[Any], tuple[type[Any], ...]] = {
    float: (int,),
    complex: (int, float),
}


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def abstraction_origin(abstraction: object) -> type[Any] | None:
    """Return the class behind an abstraction key, or ``None`` for unsupported keys.

    Plain classes are returned unchanged. Parameterized generics such as
    ``Repository[User]`` map to their origin class.
    """
    if is_runtime_class(abstraction):
        return abstraction
    origin = get_origin(abstraction)
    if is_runtime_class(origin) and get_args(abstraction):
        return origin
    return None


def is_protocol(cls: type[Any]) -> bool:
    return bool(getattr(cls, "_is_protocol", False)) and cls is not typing.Protocol


def is_protocol_init_placeholder(func: object) -> bool:
    """Return true for the ``__init__`` that ``typing`` installs on protocol classes.

    Concrete classes that subclass a protocol explicitly inherit it when they
    define no ``__init__`` of their own. Its ``(*args, **kwargs)`` signature
    hides the constructor that actually runs.
    """
    module = getattr(func, "__module__", None)
    name = getattr(func, "__name__", "")
    return module in {"typing", "typing_extensions"} and name.startswith("_no_init")


def is_unconstructible(cls: type[Any]) -> bool:
    """Return true for abstract base classes and protocol classes."""
    return inspect.isabstract(cls) or is_protocol(cls)


def is_instance_of(value: object, cls: type[Any]) -> bool:
    """Check ``isinstance`` where the runtime supports it.

    Protocols without ``@runtime_checkable`` cannot be checked at runtime and
    accept any value.
    """
    if is_protocol(cls) and not getattr(cls, "_is_runtime_protocol", False):
        return True
    try:
        return isinstance(value, cls)
    except TypeError:
        return True


def is_subclass_of(candidate: type[Any], cls: type[Any]) -> bool:
    """Check ``issubclass`` where the runtime supports it."""
    if is_protocol(cls) and not getattr(cls, "_is_runtime_protocol", False):
        return True
    try:
        return issubclass(candidate, cls)
    except TypeError:
        # runtime protocols with data members reject issubclass()
        return True


def is_assignable(value: object, annotation: Any) -> bool:  # noqa: C901, PLR0911, PLR0912
    """Return whether ``value`` may be passed to a parameter annotated with ``annotation``.

    Annotations that cannot be verified at runtime accept every value: missing,
    ``Any``, string (unresolved forward reference) and non-runtime protocol
    annotations.

    Args:
        value: Runtime argument supplied by the caller.
        annotation: Resolved parameter annotation.

    """
    if annotation is inspect.Parameter.empty or annotation is Any or annotation is object:
        return True
    if isinstance(annotation, str | typing.ForwardRef):
        return True
    if annotation is None or annotation is type(None):
        return value is None
    if isinstance(annotation, TypeVar):
        if annotation.__bound__ is not None:
            return is_assignable(value, annotation.__bound__)
        if annotation.__constraints__:
            return any(is_assignable(value, item) for item in annotation.__constraints__)
        return True

    origin = get_origin(annotation)
    if origin in _UNION_ORIGINS:
        return any(is_assignable(value, item) for item in get_args(annotation))
    if origin is Annotated:
        return is_assignable(value, get_args(annotation)[0])
    if origin is Literal:
        return any(value == item and type(value) is type(item) for item in get_args(annotation))
    if origin is collections.abc.Callable or annotation is collections.abc.Callable:
        return callable(value)
    if origin is type:
        args = get_args(annotation)
        if not is_runtime_class(value):
            return False
        return not args or not is_runtime_class(args[0]) or is_subclass_of(value, args[0])
    if origin is not None:
        return is_runtime_class(origin) and is_instance_of(value, origin)

    if not is_runtime_class(annotation):
        return True
    if annotation in _NUMERIC_PROMOTIONS and not isinstance(value, bool):
        if isinstance(value, _NUMERIC_PROMOTIONS[annotation]):
            return True
    return is_instance_of(value, annotation)


__all__ = [
    "abstraction_origin",
    "is_assignable",
    "is_instance_of",
    "is_protocol",
    "is_protocol_init_placeholder",
    "is_runtime_class",
    "is_subclass_of",
    "is_unconstructible",
]
