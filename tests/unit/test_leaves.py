"""Leaf predicate acceptance tables."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from shapeguard import UNDEFINED
from shapeguard.leaves import (
    is_any,
    is_array,
    is_async_function,
    is_boolean,
    is_function,
    is_int,
    is_null,
    is_nullish,
    is_number,
    is_primitive,
    is_record,
    is_string,
    is_sync_function,
    is_undefined,
    is_unknown,
)


async def _coroutine_fn() -> None:
    return None


def _plain_fn() -> None:
    return None


def test_is_any_and_is_unknown_accept_everything() -> None:
    for value in (None, UNDEFINED, 0, "", [], {}, object()):
        assert is_any(value)
        assert is_unknown(value)


def test_is_string() -> None:
    assert is_string("")
    assert not is_string(b"")
    assert not is_string(None)


@pytest.mark.parametrize("value", [0, -1, 1.5, float("inf"), 10**40])
def test_is_number_accepts_ints_and_floats(value: object) -> None:
    assert is_number(value)


@pytest.mark.parametrize("value", [True, False, "1", None, UNDEFINED])
def test_is_number_rejects_bools_and_non_numbers(value: object) -> None:
    assert not is_number(value)


def test_is_int() -> None:
    assert is_int(10**40)
    assert not is_int(1.0)
    assert not is_int(True)


def test_is_boolean() -> None:
    assert is_boolean(True)
    assert is_boolean(False)
    assert not is_boolean(0)


def test_is_array_excludes_strings_and_mappings() -> None:
    assert is_array([])
    assert is_array(())
    assert not is_array("abc")
    assert not is_array(b"abc")
    assert not is_array({})
    assert not is_array({1})


def test_is_record_accepts_any_mapping() -> None:
    assert is_record({})
    assert is_record(OrderedDict(a=1))
    assert not is_record([])
    assert not is_record(None)


def test_function_kinds() -> None:
    assert is_function(_plain_fn)
    assert is_function(_coroutine_fn)
    assert is_sync_function(_plain_fn)
    assert not is_sync_function(_coroutine_fn)
    assert is_async_function(_coroutine_fn)
    assert not is_async_function(_plain_fn)
    assert not is_function("not callable")
    assert not is_async_function(None)


def test_null_undefined_and_nullish() -> None:
    assert is_null(None)
    assert not is_null(UNDEFINED)
    assert is_undefined(UNDEFINED)
    assert not is_undefined(None)
    assert is_nullish(None)
    assert is_nullish(UNDEFINED)
    assert not is_nullish(0)
    assert not is_nullish("")


@pytest.mark.parametrize("value", [None, UNDEFINED, "s", b"b", 0, 1.5, True])
def test_is_primitive_accepts(value: object) -> None:
    assert is_primitive(value)


@pytest.mark.parametrize("value", [[], {}, (), object(), _plain_fn])
def test_is_primitive_rejects(value: object) -> None:
    assert not is_primitive(value)
