"""
shapeguard — optional / required / readonly modifier algebra.

File: src/shapeguard/modifiers.py

Purpose
- Wrap and unwrap the optional and readonly facets of a predicate.

Functional requirements
- ``make_optional`` and ``make_readonly`` are idempotent: an already-tagged
  predicate is returned as-is, with no allocation and no new metadata.
- ``make_required`` unwraps exactly one optional layer and returns the
  original inner predicate object, so its own facets and metadata survive.
- Decisions come from facet flags and the metadata store, never from
  probing runtime behavior.

Known limitation
- An optional predicate built by hand (``Predicate(..., optional=True)``)
  has no record of what it wraps; ``make_required`` rejects it with
  ``PredicateConstructionError`` rather than guessing.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, TypeVar, overload

import structlog

from shapeguard.constants import FACTORY_OPTIONAL, FACTORY_READONLY, MODIFIER_REQUIRED
from shapeguard.errors import PredicateConstructionError
from shapeguard.factory import build_predicate, require_predicate
from shapeguard.metadata import get_predicate_factory_metadata
from shapeguard.types import (
    UNDEFINED,
    Guard,
    Predicate,
    PredicateFn,
    UndefinedType,
    predicate_name,
)

T = TypeVar("T")
P = TypeVar("P", bound=PredicateFn)

_Outcome = Literal["wrap", "noop", "unwrap"]

_LOGGER = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


def is_optional_predicate(pred: object) -> bool:
    """Return whether ``pred`` carries the optional facet."""
    return isinstance(pred, Predicate) and pred.optional


def is_readonly_predicate(pred: object) -> bool:
    """Return whether ``pred`` carries the readonly facet."""
    return isinstance(pred, Predicate) and pred.readonly


@overload
def make_optional(pred: Guard[T]) -> Predicate[T | UndefinedType]: ...


@overload
def make_optional(pred: PredicateFn) -> Predicate[Any]: ...


def make_optional(pred: PredicateFn) -> Predicate[Any]:
    """Return a predicate that also accepts ``UNDEFINED``.

    Mainly used for fields of ``object_of`` and trailing entries of
    ``parameters_of`` that may be omitted. Cache the result: each call on an
    untagged predicate allocates a new wrapper.
    """
    require_predicate(FACTORY_OPTIONAL, pred)
    if is_optional_predicate(pred):
        _log_decision(FACTORY_OPTIONAL, "noop", pred)
        return pred  # type: ignore[return-value]

    def check(x: object) -> bool:
        return x is UNDEFINED or bool(pred(x))

    wrapped = build_predicate(
        FACTORY_OPTIONAL,
        (pred,),
        check,
        optional=True,
        readonly=is_readonly_predicate(pred),
    )
    _log_decision(FACTORY_OPTIONAL, "wrap", pred)
    return wrapped


def make_required(pred: P) -> P | Predicate[Any]:
    """Undo one ``make_optional`` layer; a no-op for non-optional predicates."""
    require_predicate(MODIFIER_REQUIRED, pred)
    if not is_optional_predicate(pred):
        _log_decision(MODIFIER_REQUIRED, "noop", pred)
        return pred

    metadata = get_predicate_factory_metadata(pred)
    if metadata is not None and metadata.name == FACTORY_OPTIONAL:
        _log_decision(MODIFIER_REQUIRED, "unwrap", pred)
        inner: P = metadata.args[0]
        return inner
    if metadata is not None and metadata.name == FACTORY_READONLY:
        # Readonly over optional: strip the optional layer underneath, keep readonly on top.
        _log_decision(MODIFIER_REQUIRED, "unwrap", pred)
        return make_readonly(make_required(metadata.args[0]))

    raise PredicateConstructionError(
        MODIFIER_REQUIRED,
        f"cannot unwrap optional predicate {predicate_name(pred)!r}: "
        "it was not produced by make_optional",
    )


@overload
def make_readonly(pred: Guard[T]) -> Predicate[T]: ...


@overload
def make_readonly(pred: PredicateFn) -> Predicate[Any]: ...


def make_readonly(pred: PredicateFn) -> Predicate[Any]:
    """Tag ``pred`` as describing a field that must not be reassigned.

    Acceptance is unchanged; the optional facet of ``pred`` is carried over so
    readonly and optional wrapping commute.
    """
    require_predicate(FACTORY_READONLY, pred)
    if is_readonly_predicate(pred):
        _log_decision(FACTORY_READONLY, "noop", pred)
        return pred  # type: ignore[return-value]

    wrapped = build_predicate(
        FACTORY_READONLY,
        (pred,),
        pred,
        optional=is_optional_predicate(pred),
        readonly=True,
    )
    _log_decision(FACTORY_READONLY, "wrap", pred)
    return wrapped


def _log_decision(modifier: str, outcome: _Outcome, pred: object) -> None:
    _LOGGER.debug(
        "predicate_modifier_applied",
        modifier=modifier,
        outcome=outcome,
        predicate=predicate_name(pred),
    )


__all__ = [
    "is_optional_predicate",
    "is_readonly_predicate",
    "make_optional",
    "make_readonly",
    "make_required",
]
