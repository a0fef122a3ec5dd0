from __future__ import annotations

import copy
import pickle

import pytest

from shapeguard import UNDEFINED, Predicate, PredicateConstructionError, UndefinedType
from shapeguard.leaves import is_primitive, is_string
from shapeguard.types import Primitive
from shapeguard.modifiers import make_optional, make_readonly


def test_undefined_is_a_falsy_singleton() -> None:
    assert UndefinedType() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert UNDEFINED is not None


def test_undefined_survives_copy_and_pickle() -> None:
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_predicate_normalizes_result_to_bool() -> None:
    pred: Predicate[object] = Predicate(lambda x: 1 if x else 0, name="truthy")

    assert pred("x") is True
    assert pred("") is False


def test_predicate_exposes_name_and_facets() -> None:
    pred: Predicate[object] = Predicate(is_string, name="custom", readonly=True)

    assert pred.name == "custom"
    assert pred.__name__ == "custom"
    assert not pred.optional
    assert pred.readonly


def test_predicate_is_immutable() -> None:
    pred: Predicate[object] = Predicate(is_string, name="custom")

    with pytest.raises(AttributeError):
        pred._name = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del pred._check  # type: ignore[misc]
    assert pred.name == "custom"


def test_predicate_repr_lists_facets() -> None:
    assert repr(make_optional(is_string)) == "<Predicate optional(is_string) [optional]>"
    assert (
        repr(make_readonly(make_optional(is_string)))
        == "<Predicate readonly(optional(is_string)) [optional, readonly]>"
    )


@pytest.mark.parametrize(
    ("check", "name"),
    [(5, "five"), (is_string, ""), (is_string, None)],
)
def test_predicate_validates_construction(check: object, name: object) -> None:
    with pytest.raises(PredicateConstructionError):
        Predicate(check, name=name)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [None, UNDEFINED, "s", b"b", 0, 1.5, True, [], {}, object()])
def test_primitive_alias_matches_is_primitive(value: object) -> None:
    assert isinstance(value, Primitive) == is_primitive(value)
