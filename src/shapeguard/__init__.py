"""
shapeguard — composable runtime value predicates.

File: src/shapeguard/__init__.py

Purpose
- Package root. Exports the predicate type, the ``is_``/``as_`` namespaces,
  the combinators and modifiers, and the boundary assertion helpers.

Functional requirements
- Must not have side effects at import time (no logging configuration).

Key interfaces / contracts
- Every predicate returns ``bool`` and never raises on the value under test.
- Construction-time misuse raises ``PredicateConstructionError``.
"""

from shapeguard import as_, is_
from shapeguard.assertions import assert_type, ensure, maybe
from shapeguard.combinators import (
    all_of,
    array_of,
    instance_of,
    literal_of,
    literal_one_of,
    object_of,
    omit_of,
    one_of,
    parameters_of,
    partial_of,
    pick_of,
    readonly_tuple_of,
    readonly_uniform_tuple_of,
    record_of,
    required_of,
    strict_of,
    tuple_of,
    uniform_tuple_of,
)
from shapeguard.errors import AssertError, PredicateConstructionError
from shapeguard.formatting import InspectOptions, inspect
from shapeguard.metadata import (
    PredicateFactoryMetadata,
    get_predicate_factory_metadata,
    has_predicate_factory_metadata,
    is_product_of,
    set_predicate_factory_metadata,
)
from shapeguard.modifiers import (
    is_optional_predicate,
    is_readonly_predicate,
    make_optional,
    make_readonly,
    make_required,
)
from shapeguard.types import UNDEFINED, Guard, Predicate, PredicateFn, UndefinedType

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "AssertError",
    "Guard",
    "InspectOptions",
    "Predicate",
    "PredicateConstructionError",
    "PredicateFactoryMetadata",
    "PredicateFn",
    "UndefinedType",
    "__version__",
    "all_of",
    "array_of",
    "as_",
    "assert_type",
    "ensure",
    "get_predicate_factory_metadata",
    "has_predicate_factory_metadata",
    "inspect",
    "instance_of",
    "is_",
    "is_optional_predicate",
    "is_product_of",
    "is_readonly_predicate",
    "literal_of",
    "literal_one_of",
    "make_optional",
    "make_readonly",
    "make_required",
    "maybe",
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
    "set_predicate_factory_metadata",
    "strict_of",
    "tuple_of",
    "uniform_tuple_of",
]
