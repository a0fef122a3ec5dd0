"""Unit tests for the predicate factory metadata store."""

from __future__ import annotations

import gc
import threading
import weakref
from types import MappingProxyType

import pytest
from structlog.testing import capture_logs

from shapeguard import PredicateConstructionError
from shapeguard.combinators import array_of, object_of
from shapeguard.leaves import is_number, is_string
from shapeguard.metadata import (
    PredicateFactoryMetadata,
    get_predicate_factory_metadata,
    has_predicate_factory_metadata,
    is_product_of,
    set_predicate_factory_metadata,
)


class _NoWeakrefCallable:
    __slots__ = ()

    def __call__(self, x: object) -> bool:
        return True


def test_factory_products_carry_name_and_args() -> None:
    pred = array_of(is_string)

    metadata = get_predicate_factory_metadata(pred)

    assert metadata == PredicateFactoryMetadata("array_of", (is_string,))
    assert has_predicate_factory_metadata(pred)
    assert is_product_of(pred, "array_of")
    assert not is_product_of(pred, "tuple_of")


def test_object_of_args_hold_frozen_descriptor_and_options() -> None:
    pred = object_of({"a": is_number}, strict=True)

    metadata = get_predicate_factory_metadata(pred)

    assert metadata is not None
    descriptor, options = metadata.args
    assert isinstance(descriptor, MappingProxyType)
    assert dict(descriptor) == {"a": is_number}
    assert descriptor["a"] is is_number
    assert options == {"strict": True}


def test_plain_callables_have_no_metadata() -> None:
    assert get_predicate_factory_metadata(is_string) is None
    assert get_predicate_factory_metadata(lambda x: True) is None
    assert not has_predicate_factory_metadata(is_string)
    assert not is_product_of(is_string, "array_of")


@pytest.mark.parametrize("value", [None, 3, "text", [], {}])
def test_lookup_on_arbitrary_objects_returns_none(value: object) -> None:
    assert get_predicate_factory_metadata(value) is None


def test_attach_returns_same_object_and_logs() -> None:
    def is_even(x: object) -> bool:
        return isinstance(x, int) and x % 2 == 0

    metadata = PredicateFactoryMetadata("custom", [2])

    with capture_logs() as logs:
        result = set_predicate_factory_metadata(is_even, metadata)

    assert result is is_even
    assert get_predicate_factory_metadata(is_even) is metadata
    assert metadata.args == (2,)
    assert logs == [
        {
            "event": "predicate_metadata_attached",
            "factory": "custom",
            "arg_count": 1,
            "log_level": "debug",
        }
    ]


def test_attaching_twice_is_rejected() -> None:
    pred = array_of(is_string)

    with pytest.raises(PredicateConstructionError, match="already carries"):
        set_predicate_factory_metadata(pred, PredicateFactoryMetadata("other"))

    metadata = get_predicate_factory_metadata(pred)
    assert metadata is not None
    assert metadata.name == "array_of"


def test_non_weakrefable_objects_cannot_carry_metadata() -> None:
    with pytest.raises(PredicateConstructionError, match="cannot carry metadata"):
        set_predicate_factory_metadata(_NoWeakrefCallable(), PredicateFactoryMetadata("custom"))


def test_metadata_requires_a_factory_name() -> None:
    with pytest.raises(PredicateConstructionError):
        PredicateFactoryMetadata("")


def test_store_does_not_keep_predicates_alive() -> None:
    pred = array_of(is_string)
    ref = weakref.ref(pred)

    del pred
    gc.collect()

    assert ref() is None


def test_concurrent_construction_registers_every_predicate() -> None:
    results: list[bool] = []
    lock = threading.Lock()

    def worker() -> None:
        built = [array_of(is_number) for _ in range(200)]
        ok = all(is_product_of(pred, "array_of") for pred in built)
        with lock:
            results.append(ok)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [True] * 8
