"""Leaf predicates: single-branch type tests with no combinator behavior."""

from __future__ import annotations

from collections.abc import Callable, Coroutine, Mapping
from inspect import iscoroutinefunction
from typing import Any, TypeGuard

from shapeguard.types import Primitive, UndefinedType

_PRIMITIVE_TYPES = (str, int, float, bool, bytes, UndefinedType)


def is_any(_x: object) -> TypeGuard[Any]:
    """Always ``True``."""
    return True


def is_unknown(_x: object) -> TypeGuard[object]:
    """Always ``True``."""
    return True


def is_string(x: object) -> TypeGuard[str]:
    return isinstance(x, str)


def is_number(x: object) -> TypeGuard[int | float]:
    """``int`` or ``float``; ``bool`` is rejected even though it subclasses ``int``."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_int(x: object) -> TypeGuard[int]:
    """Arbitrary-precision integer; ``bool`` is rejected."""
    return isinstance(x, int) and not isinstance(x, bool)


def is_boolean(x: object) -> TypeGuard[bool]:
    return isinstance(x, bool)


def is_array(x: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    """Ordered sequence: ``list`` or ``tuple``. Strings and bytes are not arrays."""
    return isinstance(x, (list, tuple))


def is_record(x: object) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(x, Mapping)


def is_function(x: object) -> TypeGuard[Callable[..., Any]]:
    return callable(x)


def is_sync_function(x: object) -> TypeGuard[Callable[..., Any]]:
    return callable(x) and not iscoroutinefunction(x)


def is_async_function(x: object) -> TypeGuard[Callable[..., Coroutine[Any, Any, Any]]]:
    return callable(x) and iscoroutinefunction(x)


def is_null(x: object) -> TypeGuard[None]:
    return x is None


def is_undefined(x: object) -> TypeGuard[UndefinedType]:
    return isinstance(x, UndefinedType)


def is_nullish(x: object) -> TypeGuard[UndefinedType | None]:
    return x is None or isinstance(x, UndefinedType)


def is_primitive(x: object) -> TypeGuard[Primitive]:
    return x is None or isinstance(x, _PRIMITIVE_TYPES)


__all__ = [
    "is_any",
    "is_array",
    "is_async_function",
    "is_boolean",
    "is_function",
    "is_int",
    "is_null",
    "is_nullish",
    "is_number",
    "is_primitive",
    "is_record",
    "is_string",
    "is_sync_function",
    "is_undefined",
    "is_unknown",
]
