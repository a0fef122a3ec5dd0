"""
shapeguard — predicate factory metadata store.

File: src/shapeguard/metadata.py

Purpose
- Associate each constructed predicate with the factory name and arguments that built it.

Functional requirements
- Lookups are identity based and return ``None`` when nothing was attached.
- Metadata is attached once, at construction, and never replaced.
- The store holds predicates weakly and never extends their lifetime.

Non-functional requirements
- Thread-safe: the backing mapping is guarded by a lock.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog

from shapeguard.errors import PredicateConstructionError

P = TypeVar("P", bound=Callable[..., Any])

# Emitted through stdlib logging; silent until the host enables DEBUG for "shapeguard".
_LOGGER = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


@dataclass(frozen=True, slots=True)
class PredicateFactoryMetadata:
    """Which factory produced a predicate and with what arguments."""

    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise PredicateConstructionError("metadata", "factory name must be a non-empty string")
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))


class _MetadataStore:
    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: weakref.WeakKeyDictionary[object, PredicateFactoryMetadata] = (
            weakref.WeakKeyDictionary()
        )

    def attach(self, pred: object, metadata: PredicateFactoryMetadata) -> None:
        try:
            weakref.ref(pred)
        except TypeError as exc:
            raise PredicateConstructionError(
                metadata.name,
                f"predicate of type {type(pred).__name__} cannot carry metadata",
            ) from exc
        with self._lock:
            if _lookup(self._entries, pred) is not None:
                raise PredicateConstructionError(
                    metadata.name, "predicate already carries factory metadata"
                )
            self._entries[pred] = metadata

    def lookup(self, pred: object) -> PredicateFactoryMetadata | None:
        with self._lock:
            return _lookup(self._entries, pred)


def _lookup(
    entries: weakref.WeakKeyDictionary[object, PredicateFactoryMetadata], pred: object
) -> PredicateFactoryMetadata | None:
    try:
        return entries.get(pred)
    except TypeError:
        # Unhashable or non-weakrefable objects never carry metadata.
        return None


_STORE = _MetadataStore()


def set_predicate_factory_metadata(pred: P, metadata: PredicateFactoryMetadata) -> P:
    """Attach ``metadata`` to ``pred`` and return the same object."""
    _STORE.attach(pred, metadata)
    _LOGGER.debug(
        "predicate_metadata_attached",
        factory=metadata.name,
        arg_count=len(metadata.args),
    )
    return pred


def get_predicate_factory_metadata(pred: object) -> PredicateFactoryMetadata | None:
    """Return metadata attached to ``pred`` or ``None``."""
    return _STORE.lookup(pred)


def has_predicate_factory_metadata(pred: object) -> bool:
    return _STORE.lookup(pred) is not None


def is_product_of(pred: object, factory: str) -> bool:
    """Return whether ``pred`` was produced by the factory named ``factory``."""
    metadata = _STORE.lookup(pred)
    return metadata is not None and metadata.name == factory


__all__ = [
    "PredicateFactoryMetadata",
    "get_predicate_factory_metadata",
    "has_predicate_factory_metadata",
    "is_product_of",
    "set_predicate_factory_metadata",
]
