"""Trust-boundary helpers that turn a predicate verdict into a value or an error."""

from __future__ import annotations

from typing import TypeVar

from shapeguard.errors import AssertError
from shapeguard.factory import require_predicate
from shapeguard.formatting import inspect
from shapeguard.types import Guard, predicate_name

T = TypeVar("T")


def assert_type(x: object, pred: Guard[T], *, message: str | None = None) -> None:
    """Raise ``AssertError`` unless ``pred(x)`` holds."""
    require_predicate("assert_type", pred)
    if not pred(x):
        raise _assert_error(x, pred, message)


def ensure(x: object, pred: Guard[T], *, message: str | None = None) -> T:
    """Return ``x`` unchanged when ``pred(x)`` holds, raise ``AssertError`` otherwise."""
    require_predicate("ensure", pred)
    if not pred(x):
        raise _assert_error(x, pred, message)
    return x


def maybe(x: object, pred: Guard[T]) -> T | None:
    """Return ``x`` when ``pred(x)`` holds, else ``None``."""
    require_predicate("maybe", pred)
    return x if pred(x) else None


def _assert_error(x: object, pred: object, message: str | None) -> AssertError:
    rendered = inspect(x)
    name = predicate_name(pred)
    return AssertError(
        message if message is not None else f"expected a value that satisfies {name}, got {rendered}",
        rendered_value=rendered,
        predicate_name=name,
    )


__all__ = ["assert_type", "ensure", "maybe"]
