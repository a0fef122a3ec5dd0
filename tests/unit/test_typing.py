"""Static narrowing of factory results.

The ``assert_static_type`` calls are checked by mypy and are no-ops at run time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, get_overloads
from typing import assert_type as assert_static_type

import pytest

from shapeguard import UNDEFINED, Guard, UndefinedType
from shapeguard.assertions import ensure
from shapeguard.combinators import (
    array_of,
    instance_of,
    literal_of,
    object_of,
    one_of,
    record_of,
    uniform_tuple_of,
)
from shapeguard.leaves import is_boolean, is_string
from shapeguard.modifiers import make_optional, make_readonly


class _Point:
    pass


def test_array_of_narrows_to_element_type() -> None:
    value: object = ["a", "b"]
    pred = array_of(is_string)

    assert pred(value)
    assert_static_type(value, list[str] | tuple[str, ...])


def test_record_of_narrows_to_value_type() -> None:
    value: object = {"a": "b"}

    assert record_of(is_string)(value)
    assert_static_type(value, Mapping[Any, str])


def test_make_optional_adds_undefined_to_the_narrowed_type() -> None:
    value: object = UNDEFINED

    assert make_optional(is_string)(value)
    assert_static_type(value, str | UndefinedType)


def test_make_readonly_keeps_the_narrowed_type() -> None:
    value: object = True

    assert make_readonly(is_boolean)(value)
    assert_static_type(value, bool)


def test_instance_of_and_literal_of_narrow() -> None:
    point: object = _Point()
    label: object = "a"

    assert instance_of(_Point)(point)
    assert_static_type(point, _Point)
    assert literal_of("a")(label)
    assert_static_type(label, str)


def test_ensure_returns_the_narrowed_value() -> None:
    tags = ensure(["x"], array_of(is_string))

    assert_static_type(tags, list[str] | tuple[str, ...])
    assert tags == ["x"]


def test_object_of_narrows_to_a_mapping() -> None:
    value: object = {"a": "x"}

    assert object_of({"a": is_string})(value)
    assert_static_type(value, Mapping[str, Any])


@pytest.mark.parametrize(
    "factory",
    [array_of, record_of, uniform_tuple_of, one_of, make_optional, make_readonly],
)
def test_typed_factories_declare_guard_and_plain_overloads(factory: Any) -> None:
    assert len(get_overloads(factory)) == 2


def test_guard_alias_is_subscriptable() -> None:
    alias = Guard[str]

    assert alias is not None
