"""
shapeguard — predicate combinators.

File: src/shapeguard/combinators.py

Purpose
- Build compound predicates (arrays, tuples, records, objects, unions,
  intersections, literals) from leaf or compound predicates.

Functional requirements
- Every factory registers ``{name: <factory>, args}`` in the metadata store
  and gives the result a display name derived from the same arguments.
- Construction arguments are validated eagerly; a bad argument raises
  ``PredicateConstructionError`` at build time, never at check time.
- Produced predicates return ``False`` for malformed values and never raise
  on account of the value under test.
- Sub-predicates run in declaration order and short-circuit.

Non-functional requirements
- Callers should cache constructed predicates; every call allocates.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from types import MappingProxyType
from typing import Any, Final, TypeVar, overload

from shapeguard.constants import (
    FACTORY_ALL_OF,
    FACTORY_ARRAY_OF,
    FACTORY_INSTANCE_OF,
    FACTORY_LITERAL_OF,
    FACTORY_LITERAL_ONE_OF,
    FACTORY_OBJECT_OF,
    FACTORY_ONE_OF,
    FACTORY_PARAMETERS_OF,
    FACTORY_READONLY_TUPLE_OF,
    FACTORY_READONLY_UNIFORM_TUPLE_OF,
    FACTORY_RECORD_OF,
    FACTORY_TUPLE_OF,
    FACTORY_UNIFORM_TUPLE_OF,
)
from shapeguard.errors import PredicateConstructionError
from shapeguard.factory import build_predicate, require_predicate, require_predicates
from shapeguard.formatting import inspect
from shapeguard.leaves import is_any, is_array, is_primitive, is_record
from shapeguard.metadata import get_predicate_factory_metadata
from shapeguard.modifiers import is_optional_predicate, make_optional, make_required
from shapeguard.types import (
    UNDEFINED,
    Descriptor,
    Guard,
    Predicate,
    PredicateFn,
    Primitive,
    predicate_name,
)

T = TypeVar("T")
L = TypeVar("L", bound=Primitive)

_PARTIAL_OF: Final[str] = "partial_of"
_REQUIRED_OF: Final[str] = "required_of"
_PICK_OF: Final[str] = "pick_of"
_OMIT_OF: Final[str] = "omit_of"
_STRICT_OF: Final[str] = "strict_of"


@overload
def array_of(pred: Guard[T]) -> Predicate[list[T] | tuple[T, ...]]: ...


@overload
def array_of(pred: PredicateFn) -> Predicate[list[Any] | tuple[Any, ...]]: ...


def array_of(pred: PredicateFn) -> Predicate[Any]:
    """Accept a list/tuple whose every element satisfies ``pred``."""
    require_predicate(FACTORY_ARRAY_OF, pred)

    def check(x: object) -> bool:
        return is_array(x) and all(pred(item) for item in x)

    return build_predicate(FACTORY_ARRAY_OF, (pred,), check)


def tuple_of(
    preds: Sequence[PredicateFn], rest: PredicateFn | None = None
) -> Predicate[list[Any] | tuple[Any, ...]]:
    """Accept a fixed-length list/tuple checked position by position.

    Without ``rest`` the length must equal ``len(preds)``. With ``rest`` the
    length must be at least ``len(preds)``; the head is checked positionally
    and the remaining slice is handed to ``rest`` as a whole, e.g.
    ``tuple_of([is_number, is_string], array_of(is_boolean))``.
    """
    return _build_tuple_of(FACTORY_TUPLE_OF, preds, rest)


def readonly_tuple_of(
    preds: Sequence[PredicateFn], rest: PredicateFn | None = None
) -> Predicate[list[Any] | tuple[Any, ...]]:
    """Same acceptance as ``tuple_of``; names an immutable tuple shape."""
    return _build_tuple_of(FACTORY_READONLY_TUPLE_OF, preds, rest)


@overload
def uniform_tuple_of(n: int, pred: Guard[T]) -> Predicate[list[T] | tuple[T, ...]]: ...


@overload
def uniform_tuple_of(
    n: int, pred: PredicateFn = is_any
) -> Predicate[list[Any] | tuple[Any, ...]]: ...


def uniform_tuple_of(n: int, pred: PredicateFn = is_any) -> Predicate[Any]:
    """Accept a list/tuple of exactly ``n`` elements, each satisfying ``pred``."""
    return _build_uniform_tuple_of(FACTORY_UNIFORM_TUPLE_OF, n, pred)


@overload
def readonly_uniform_tuple_of(
    n: int, pred: Guard[T]
) -> Predicate[list[T] | tuple[T, ...]]: ...


@overload
def readonly_uniform_tuple_of(
    n: int, pred: PredicateFn = is_any
) -> Predicate[list[Any] | tuple[Any, ...]]: ...


def readonly_uniform_tuple_of(n: int, pred: PredicateFn = is_any) -> Predicate[Any]:
    return _build_uniform_tuple_of(FACTORY_READONLY_UNIFORM_TUPLE_OF, n, pred)


@overload
def record_of(pred: Guard[T]) -> Predicate[Mapping[Any, T]]: ...


@overload
def record_of(pred: PredicateFn) -> Predicate[Mapping[Any, Any]]: ...


def record_of(pred: PredicateFn) -> Predicate[Any]:
    """Accept a mapping whose every value satisfies ``pred``; keys are unconstrained."""
    require_predicate(FACTORY_RECORD_OF, pred)

    def check(x: object) -> bool:
        if not is_record(x):
            return False
        values = _mapping_values(x)
        if values is None:
            return False
        return all(pred(item) for item in values)

    return build_predicate(FACTORY_RECORD_OF, (pred,), check)


def object_of(descriptor: Descriptor, *, strict: bool = False) -> Predicate[Mapping[str, Any]]:
    """Accept a mapping whose fields satisfy the predicates in ``descriptor``.

    A missing key is checked as ``UNDEFINED``, so only fields wrapped with
    ``make_optional`` may be omitted. In strict mode the value may not carry
    keys absent from ``descriptor``; otherwise extra keys are allowed.
    """
    fields = _require_descriptor(FACTORY_OBJECT_OF, descriptor)
    if not isinstance(strict, bool):
        raise PredicateConstructionError(FACTORY_OBJECT_OF, "strict must be a bool")
    frozen = MappingProxyType(dict(fields))
    options = MappingProxyType({"strict": strict})
    allowed_keys = frozenset(frozen)

    def check_fields(x: Mapping[Any, Any]) -> bool:
        for key, field_pred in fields:
            found, item = _mapping_get(x, key)
            if not found:
                return False
            if not field_pred(item):
                return False
        return True

    def check_loose(x: object) -> bool:
        return is_record(x) and check_fields(x)

    def check_strict(x: object) -> bool:
        if not is_record(x):
            return False
        keys = _mapping_keys(x)
        if keys is None or len(keys) > len(allowed_keys):
            return False
        if not _keys_within(keys, allowed_keys):
            return False
        return check_fields(x)

    name = f"{FACTORY_OBJECT_OF}({inspect(frozen)}{', strict=True' if strict else ''})"
    return build_predicate(
        FACTORY_OBJECT_OF,
        (frozen, options),
        check_strict if strict else check_loose,
        name=name,
    )


def parameters_of(
    preds: Sequence[PredicateFn], rest: PredicateFn | None = None
) -> Predicate[list[Any] | tuple[Any, ...]]:
    """Accept an argument list: like ``tuple_of``, but trailing optional positions may be omitted."""
    positional = require_predicates(FACTORY_PARAMETERS_OF, preds)
    if rest is not None:
        require_predicate(FACTORY_PARAMETERS_OF, rest, "rest")
    size = len(positional)
    minimum = size
    while minimum > 0 and is_optional_predicate(positional[minimum - 1]):
        minimum -= 1

    def check_head(x: Sequence[Any]) -> bool:
        length = len(x)
        for index, pred in enumerate(positional):
            if not pred(x[index] if index < length else UNDEFINED):
                return False
        return True

    def check(x: object) -> bool:
        if not is_array(x) or len(x) < minimum:
            return False
        if rest is None:
            return len(x) <= size and check_head(x)
        return check_head(x) and bool(rest(x[size:]))

    return build_predicate(
        FACTORY_PARAMETERS_OF,
        (positional,) if rest is None else (positional, rest),
        check,
        name=_sequence_call_name(FACTORY_PARAMETERS_OF, positional, rest),
    )


@overload
def one_of(preds: Sequence[Guard[T]]) -> Predicate[T]: ...


@overload
def one_of(preds: Sequence[PredicateFn]) -> Predicate[Any]: ...


def one_of(preds: Sequence[PredicateFn]) -> Predicate[Any]:
    """Union: accept when any predicate accepts."""
    members = require_predicates(FACTORY_ONE_OF, preds)

    def check(x: object) -> bool:
        return any(pred(x) for pred in members)

    return build_predicate(
        FACTORY_ONE_OF, (members,), check, name=_sequence_call_name(FACTORY_ONE_OF, members)
    )


def all_of(preds: Sequence[PredicateFn]) -> Predicate[Any]:
    """Intersection: accept when every predicate accepts.

    ``all_of([object_of({"a": is_number}), object_of({"b": is_string})])``
    accepts ``{"a": 0, "b": "a"}``.
    """
    members = require_predicates(FACTORY_ALL_OF, preds)

    def check(x: object) -> bool:
        return all(pred(x) for pred in members)

    return build_predicate(
        FACTORY_ALL_OF, (members,), check, name=_sequence_call_name(FACTORY_ALL_OF, members)
    )


def literal_of(value: L) -> Predicate[L]:
    """Accept exactly ``value``: equal and of the same type, so ``True`` never matches ``1``."""
    if not is_primitive(value):
        raise PredicateConstructionError(
            FACTORY_LITERAL_OF, f"literal must be a primitive, got {type(value).__name__}"
        )

    def check(x: object) -> bool:
        return _same_literal(x, value)

    return build_predicate(FACTORY_LITERAL_OF, (value,), check)


def literal_one_of(values: Iterable[L]) -> Predicate[L]:
    """Accept any of ``values`` under the same rule as ``literal_of``."""
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, (Sequence, Set)):
        raise PredicateConstructionError(
            FACTORY_LITERAL_ONE_OF,
            f"values must be a sequence or set of primitives, got {type(values).__name__}",
        )
    literals = tuple(values)
    for index, item in enumerate(literals):
        if not is_primitive(item):
            raise PredicateConstructionError(
                FACTORY_LITERAL_ONE_OF,
                f"values[{index}] must be a primitive, got {type(item).__name__}",
            )

    def check(x: object) -> bool:
        return any(_same_literal(x, item) for item in literals)

    return build_predicate(
        FACTORY_LITERAL_ONE_OF,
        (literals,),
        check,
        name=f"{FACTORY_LITERAL_ONE_OF}({inspect(list(literals))})",
    )


def instance_of(cls: type[T]) -> Predicate[T]:
    if not isinstance(cls, type):
        raise PredicateConstructionError(
            FACTORY_INSTANCE_OF, f"cls must be a class, got {type(cls).__name__}"
        )

    def check(x: object) -> bool:
        return isinstance(x, cls)

    return build_predicate(FACTORY_INSTANCE_OF, (cls,), check)


def partial_of(pred: PredicateFn) -> Predicate[Mapping[str, Any]]:
    """Re-derive an ``object_of`` predicate with every field made optional."""
    descriptor, strict = _object_of_parts(_PARTIAL_OF, pred)
    return object_of({key: make_optional(field) for key, field in descriptor.items()}, strict=strict)


def required_of(pred: PredicateFn) -> Predicate[Mapping[str, Any]]:
    """Re-derive an ``object_of`` predicate with one optional layer removed from every field."""
    descriptor, strict = _object_of_parts(_REQUIRED_OF, pred)
    return object_of({key: make_required(field) for key, field in descriptor.items()}, strict=strict)


def pick_of(pred: PredicateFn, keys: Iterable[str]) -> Predicate[Mapping[str, Any]]:
    """Re-derive an ``object_of`` predicate restricted to ``keys``."""
    descriptor, strict = _object_of_parts(_PICK_OF, pred)
    selected = _require_known_keys(_PICK_OF, descriptor, keys)
    return object_of(
        {key: field for key, field in descriptor.items() if key in selected}, strict=strict
    )


def omit_of(pred: PredicateFn, keys: Iterable[str]) -> Predicate[Mapping[str, Any]]:
    """Re-derive an ``object_of`` predicate without ``keys``."""
    descriptor, strict = _object_of_parts(_OMIT_OF, pred)
    dropped = _require_known_keys(_OMIT_OF, descriptor, keys)
    return object_of(
        {key: field for key, field in descriptor.items() if key not in dropped}, strict=strict
    )


def strict_of(pred: PredicateFn) -> Predicate[Mapping[str, Any]]:
    """Re-derive an ``object_of`` predicate in strict mode."""
    descriptor, _ = _object_of_parts(_STRICT_OF, pred)
    return object_of(descriptor, strict=True)


def _build_tuple_of(
    factory: str, preds: Sequence[PredicateFn], rest: PredicateFn | None
) -> Predicate[Any]:
    positional = require_predicates(factory, preds)
    size = len(positional)

    def check_head(x: Sequence[Any]) -> bool:
        return all(pred(item) for pred, item in zip(positional, x))

    if rest is None:

        def check(x: object) -> bool:
            return is_array(x) and len(x) == size and check_head(x)

        args: tuple[Any, ...] = (positional,)
    else:
        tail_pred = require_predicate(factory, rest, "rest")

        def check(x: object) -> bool:
            if not is_array(x) or len(x) < size:
                return False
            return check_head(x) and bool(tail_pred(x[size:]))

        args = (positional, tail_pred)

    return build_predicate(factory, args, check, name=_sequence_call_name(factory, positional, rest))


def _build_uniform_tuple_of(factory: str, n: int, pred: PredicateFn) -> Predicate[Any]:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise PredicateConstructionError(factory, f"n must be a non-negative int, got {n!r}")
    require_predicate(factory, pred)
    inner = tuple_of([pred] * n)
    return build_predicate(factory, (n, pred), inner)


def _sequence_call_name(
    factory: str, preds: tuple[PredicateFn, ...], rest: PredicateFn | None = None
) -> str:
    rendered = inspect(list(preds))
    if rest is None:
        return f"{factory}({rendered})"
    return f"{factory}({rendered}, {inspect(rest)})"


def _require_descriptor(
    factory: str, descriptor: object
) -> tuple[tuple[str, PredicateFn], ...]:
    if not isinstance(descriptor, Mapping):
        raise PredicateConstructionError(
            factory, f"descriptor must be a mapping, got {type(descriptor).__name__}"
        )
    fields: list[tuple[str, PredicateFn]] = []
    for key, pred in descriptor.items():
        if not isinstance(key, str):
            raise PredicateConstructionError(
                factory, f"descriptor keys must be strings, got {type(key).__name__}"
            )
        fields.append((key, require_predicate(factory, pred, f"descriptor[{key!r}]")))
    return tuple(fields)


def _object_of_parts(factory: str, pred: object) -> tuple[Descriptor, bool]:
    metadata = get_predicate_factory_metadata(pred)
    if metadata is None or metadata.name != FACTORY_OBJECT_OF:
        raise PredicateConstructionError(
            factory, f"{predicate_name(pred)!r} was not produced by {FACTORY_OBJECT_OF}"
        )
    descriptor, options = metadata.args
    return descriptor, bool(options["strict"])


def _require_known_keys(
    factory: str, descriptor: Mapping[str, PredicateFn], keys: Iterable[str]
) -> frozenset[str]:
    if isinstance(keys, (str, bytes)):
        raise PredicateConstructionError(factory, "keys must be an iterable of strings, not a string")
    selected = frozenset(keys)
    unknown = sorted(str(key) for key in selected if key not in descriptor)
    if unknown:
        raise PredicateConstructionError(factory, f"unknown keys: {', '.join(unknown)}")
    return selected


def _same_literal(x: object, literal: object) -> bool:
    return x is literal or (type(x) is type(literal) and x == literal)


def _mapping_get(x: Mapping[Any, Any], key: str) -> tuple[bool, object]:
    try:
        return True, x.get(key, UNDEFINED)
    except Exception:  # noqa: BLE001 - a foreign mapping failing on access is a rejection
        return False, UNDEFINED


def _mapping_keys(x: Mapping[Any, Any]) -> list[Any] | None:
    try:
        return list(x.keys())
    except Exception:  # noqa: BLE001 - a foreign mapping failing on access is a rejection
        return None


def _keys_within(keys: list[Any], allowed: frozenset[str]) -> bool:
    try:
        return all(key in allowed for key in keys)
    except Exception:  # noqa: BLE001 - unhashable or misbehaving foreign keys are a rejection
        return False


def _mapping_values(x: Mapping[Any, Any]) -> list[Any] | None:
    try:
        return list(x.values())
    except Exception:  # noqa: BLE001 - a foreign mapping failing on access is a rejection
        return None


__all__ = [
    "all_of",
    "array_of",
    "instance_of",
    "literal_of",
    "literal_one_of",
    "object_of",
    "omit_of",
    "one_of",
    "parameters_of",
    "partial_of",
    "pick_of",
    "readonly_tuple_of",
    "readonly_uniform_tuple_of",
    "record_of",
    "required_of",
    "strict_of",
    "tuple_of",
    "uniform_tuple_of",
]
