"""Shared construction helpers: argument checks and metadata registration."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from shapeguard.errors import PredicateConstructionError
from shapeguard.formatting import inspect
from shapeguard.metadata import PredicateFactoryMetadata, set_predicate_factory_metadata
from shapeguard.types import Predicate, PredicateFn


def require_predicate(factory: str, value: object, label: str = "pred") -> PredicateFn:
    """Fail fast unless ``value`` is callable."""
    if not callable(value):
        raise PredicateConstructionError(
            factory, f"{label} must be a predicate, got {type(value).__name__}"
        )
    return value


def require_predicates(factory: str, values: object, label: str = "preds") -> tuple[PredicateFn, ...]:
    """Fail fast unless ``values`` is a list/tuple of callables; returns a frozen copy."""
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
        raise PredicateConstructionError(
            factory, f"{label} must be a sequence of predicates, got {type(values).__name__}"
        )
    return tuple(
        require_predicate(factory, item, f"{label}[{index}]") for index, item in enumerate(values)
    )


def build_predicate(
    factory: str,
    args: Sequence[Any],
    check: PredicateFn,
    *,
    name: str | None = None,
    optional: bool = False,
    readonly: bool = False,
) -> Predicate[Any]:
    """Wrap ``check`` in a ``Predicate`` and register ``{factory, args}`` for it."""
    frozen_args = tuple(args)
    display = name if name is not None else _display_name(factory, frozen_args)
    pred: Predicate[Any] = Predicate(check, name=display, optional=optional, readonly=readonly)
    return set_predicate_factory_metadata(pred, PredicateFactoryMetadata(factory, frozen_args))


def _display_name(factory: str, args: tuple[Any, ...]) -> str:
    return f"{factory}({', '.join(inspect(arg) for arg in args)})"


__all__ = ["build_predicate", "require_predicate", "require_predicates"]
