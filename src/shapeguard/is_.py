"""Predicate construction namespace.

Stable CapWords names for every leaf predicate and combinator::

    from shapeguard import as_, is_

    is_user = is_.ObjectOf({"name": is_.String, "age": as_.Optional(is_.Number)})
"""

from __future__ import annotations

from shapeguard import combinators, leaves

Any = leaves.is_any
Unknown = leaves.is_unknown
String = leaves.is_string
Number = leaves.is_number
Int = leaves.is_int
Boolean = leaves.is_boolean
Array = leaves.is_array
Record = leaves.is_record
Function = leaves.is_function
SyncFunction = leaves.is_sync_function
AsyncFunction = leaves.is_async_function
Null = leaves.is_null
Undefined = leaves.is_undefined
Nullish = leaves.is_nullish
Primitive = leaves.is_primitive

ArrayOf = combinators.array_of
TupleOf = combinators.tuple_of
ReadonlyTupleOf = combinators.readonly_tuple_of
UniformTupleOf = combinators.uniform_tuple_of
ReadonlyUniformTupleOf = combinators.readonly_uniform_tuple_of
RecordOf = combinators.record_of
ObjectOf = combinators.object_of
ParametersOf = combinators.parameters_of
PartialOf = combinators.partial_of
RequiredOf = combinators.required_of
PickOf = combinators.pick_of
OmitOf = combinators.omit_of
StrictOf = combinators.strict_of
InstanceOf = combinators.instance_of
LiteralOf = combinators.literal_of
LiteralOneOf = combinators.literal_one_of
OneOf = combinators.one_of
AllOf = combinators.all_of

__all__ = [
    "AllOf",
    "Any",
    "Array",
    "ArrayOf",
    "AsyncFunction",
    "Boolean",
    "Function",
    "InstanceOf",
    "Int",
    "LiteralOf",
    "LiteralOneOf",
    "Null",
    "Nullish",
    "Number",
    "ObjectOf",
    "OmitOf",
    "OneOf",
    "ParametersOf",
    "PartialOf",
    "PickOf",
    "Primitive",
    "ReadonlyTupleOf",
    "ReadonlyUniformTupleOf",
    "Record",
    "RecordOf",
    "RequiredOf",
    "StrictOf",
    "String",
    "SyncFunction",
    "TupleOf",
    "Undefined",
    "UniformTupleOf",
    "Unknown",
]
