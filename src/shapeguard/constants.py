"""Stable constants shared across predicate construction and diagnostics."""

from __future__ import annotations

from typing import Final

# Factory names recorded in predicate metadata.
FACTORY_ARRAY_OF: Final[str] = "array_of"
FACTORY_TUPLE_OF: Final[str] = "tuple_of"
FACTORY_READONLY_TUPLE_OF: Final[str] = "readonly_tuple_of"
FACTORY_UNIFORM_TUPLE_OF: Final[str] = "uniform_tuple_of"
FACTORY_READONLY_UNIFORM_TUPLE_OF: Final[str] = "readonly_uniform_tuple_of"
FACTORY_RECORD_OF: Final[str] = "record_of"
FACTORY_OBJECT_OF: Final[str] = "object_of"
FACTORY_PARAMETERS_OF: Final[str] = "parameters_of"
FACTORY_ONE_OF: Final[str] = "one_of"
FACTORY_ALL_OF: Final[str] = "all_of"
FACTORY_LITERAL_OF: Final[str] = "literal_of"
FACTORY_LITERAL_ONE_OF: Final[str] = "literal_one_of"
FACTORY_INSTANCE_OF: Final[str] = "instance_of"
FACTORY_OPTIONAL: Final[str] = "optional"
FACTORY_READONLY: Final[str] = "readonly"
MODIFIER_REQUIRED: Final[str] = "required"

# Diagnostic formatter defaults.
DEFAULT_INSPECT_THRESHOLD: Final[int] = 20
DEFAULT_INSPECT_MAX_DEPTH: Final[int] = 8
INSPECT_INDENT: Final[str] = "  "

__all__ = [
    "DEFAULT_INSPECT_MAX_DEPTH",
    "DEFAULT_INSPECT_THRESHOLD",
    "FACTORY_ALL_OF",
    "FACTORY_ARRAY_OF",
    "FACTORY_INSTANCE_OF",
    "FACTORY_LITERAL_OF",
    "FACTORY_LITERAL_ONE_OF",
    "FACTORY_OBJECT_OF",
    "FACTORY_ONE_OF",
    "FACTORY_OPTIONAL",
    "FACTORY_PARAMETERS_OF",
    "FACTORY_READONLY",
    "FACTORY_READONLY_TUPLE_OF",
    "FACTORY_READONLY_UNIFORM_TUPLE_OF",
    "FACTORY_RECORD_OF",
    "FACTORY_TUPLE_OF",
    "FACTORY_UNIFORM_TUPLE_OF",
    "INSPECT_INDENT",
    "MODIFIER_REQUIRED",
]
