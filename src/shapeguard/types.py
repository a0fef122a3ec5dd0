"""
shapeguard — predicate wrapper type and value-model primitives.

File: src/shapeguard/types.py

Purpose
- Define the immutable ``Predicate`` wrapper returned by every factory.
- Define the ``UNDEFINED`` sentinel used for absent keys and positions.

Functional requirements
- Display name is computed once by the factory and never changes.
- Optional/readonly facets are explicit fields checked by direct access.
- Instances are weak-referenceable so the metadata store can key on identity.

Non-functional requirements
- Calling a predicate must not allocate beyond the wrapped check.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final, Generic, NoReturn, TypeAlias, TypeGuard, TypeVar, final

from shapeguard.errors import PredicateConstructionError

T = TypeVar("T")

PredicateFn: TypeAlias = Callable[[Any], bool]
# Any callable that narrows to T on True: a Predicate[T] or a TypeGuard function.
Guard: TypeAlias = Callable[[Any], TypeGuard[T]]
Descriptor: TypeAlias = Mapping[str, PredicateFn]


@final
class UndefinedType:
    """Type of the ``UNDEFINED`` sentinel: an absent key or position."""

    __slots__ = ()
    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final[UndefinedType] = UndefinedType()

Primitive: TypeAlias = str | int | float | bool | bytes | None | UndefinedType


class Predicate(Generic[T]):
    """Immutable callable classifying a value; ``True`` narrows it to ``T``."""

    __slots__ = ("__weakref__", "_check", "_name", "_optional", "_readonly")

    _check: PredicateFn
    _name: str
    _optional: bool
    _readonly: bool

    def __init__(
        self,
        check: PredicateFn,
        *,
        name: str,
        optional: bool = False,
        readonly: bool = False,
    ) -> None:
        if not callable(check):
            raise PredicateConstructionError(
                "Predicate", f"check must be callable, got {type(check).__name__}"
            )
        if not isinstance(name, str) or not name:
            raise PredicateConstructionError("Predicate", "name must be a non-empty string")
        object.__setattr__(self, "_check", check)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_optional", bool(optional))
        object.__setattr__(self, "_readonly", bool(readonly))

    def __call__(self, x: object) -> TypeGuard[T]:
        return bool(self._check(x))

    @property
    def name(self) -> str:
        return self._name

    @property
    def __name__(self) -> str:  # type: ignore[override]
        return self._name

    @property
    def optional(self) -> bool:
        return self._optional

    @property
    def readonly(self) -> bool:
        return self._readonly

    def __setattr__(self, key: str, value: object) -> NoReturn:
        raise AttributeError(f"Predicate is immutable; cannot set {key!r}")

    def __delattr__(self, key: str) -> NoReturn:
        raise AttributeError(f"Predicate is immutable; cannot delete {key!r}")

    def __repr__(self) -> str:
        facets = [flag for flag, on in (("optional", self._optional), ("readonly", self._readonly)) if on]
        suffix = f" [{', '.join(facets)}]" if facets else ""
        return f"<Predicate {self._name}{suffix}>"


def predicate_name(pred: object) -> str:
    """Return the display name of a predicate or plain callable."""
    if isinstance(pred, Predicate):
        return pred.name
    name = getattr(pred, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(pred).__name__


__all__ = [
    "UNDEFINED",
    "Descriptor",
    "Guard",
    "Predicate",
    "PredicateFn",
    "Primitive",
    "UndefinedType",
    "predicate_name",
]
