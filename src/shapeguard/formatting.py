"""Deterministic, total rendering of values and predicates for diagnostic names."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import Final

from shapeguard.constants import (
    DEFAULT_INSPECT_MAX_DEPTH,
    DEFAULT_INSPECT_THRESHOLD,
    INSPECT_INDENT,
)
from shapeguard.types import UndefinedType, predicate_name

_CIRCULAR: Final[str] = "<circular>"
_TRUNCATED: Final[str] = "..."


@dataclass(frozen=True, slots=True)
class InspectOptions:
    """Rendering knobs for ``inspect``."""

    threshold: int = DEFAULT_INSPECT_THRESHOLD
    max_depth: int = DEFAULT_INSPECT_MAX_DEPTH

    def __post_init__(self) -> None:
        for field_name in ("threshold", "max_depth"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative integer, got {value!r}")


DEFAULT_INSPECT_OPTIONS: Final[InspectOptions] = InspectOptions()


def inspect(value: object, options: InspectOptions | None = None) -> str:
    """Render ``value`` as a short human-readable string.

    Collections longer than ``options.threshold`` characters on one line are
    broken onto indented lines. Cycles render as ``<circular>`` and nesting
    beyond ``options.max_depth`` renders as ``...``. Never raises.
    """
    resolved = options if options is not None else DEFAULT_INSPECT_OPTIONS
    return _render(value, resolved, depth=0, active=frozenset())


def _render(value: object, options: InspectOptions, *, depth: int, active: frozenset[int]) -> str:
    if value is None or isinstance(value, (UndefinedType, bool, int, float, str, bytes)):
        return repr(value)
    if isinstance(value, type):
        return value.__name__
    if callable(value):
        return predicate_name(value)

    if isinstance(value, (list, tuple, Mapping, Set)):
        if id(value) in active:
            return _CIRCULAR
        if depth >= options.max_depth:
            return _TRUNCATED
        nested = active | {id(value)}
        if isinstance(value, Mapping):
            return _render_mapping(value, options, depth=depth, active=nested)
        if isinstance(value, Set):
            items = sorted(_render(item, options, depth=depth + 1, active=nested) for item in value)
            if not items:
                return f"{type(value).__name__}()"
            return _join(items, "{", "}", options)
        items = [_render(item, options, depth=depth + 1, active=nested) for item in value]
        if isinstance(value, tuple):
            if len(items) == 1:
                return f"({items[0]},)"
            return _join(items, "(", ")", options)
        return _join(items, "[", "]", options)

    return type(value).__name__


def _render_mapping(
    value: Mapping[object, object],
    options: InspectOptions,
    *,
    depth: int,
    active: frozenset[int],
) -> str:
    try:
        pairs = list(value.items())
    except Exception:  # noqa: BLE001 - foreign mappings may misbehave; rendering stays total
        return type(value).__name__
    items = [
        f"{_render(key, options, depth=depth + 1, active=active)}: "
        f"{_render(item, options, depth=depth + 1, active=active)}"
        for key, item in pairs
    ]
    return _join(items, "{", "}", options)


def _join(items: list[str], opener: str, closer: str, options: InspectOptions) -> str:
    single = ", ".join(items)
    if len(single) <= options.threshold and "\n" not in single:
        return f"{opener}{single}{closer}"
    body = ",\n".join(items)
    indented = "\n".join(f"{INSPECT_INDENT}{line}" for line in body.splitlines())
    return f"{opener}\n{indented}\n{closer}"


__all__ = ["DEFAULT_INSPECT_OPTIONS", "InspectOptions", "inspect"]
