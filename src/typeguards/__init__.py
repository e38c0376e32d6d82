"""typeguards: composable runtime type guards.

Build small immutable guards, compose them into schemas, arrays, records
and unions, then ``validate`` values against them and ``transform``
matching values::

    from typeguards import TypeGuards as T

    Job = T.Schema({"title": T.String, "salary": T.Nullable(T.Number)})
    Job.validate({"title": "Dreamer", "salary": None})  # True
"""

from typeguards.catalog import REGISTRY, TypeGuards, create_schema
from typeguards.config.logging import configure_logging
from typeguards.domain.combinators import (
    Array,
    Const,
    NonNullable,
    Nullable,
    Optional,
    Record,
    StringArray,
)
from typeguards.domain.definitions import ATOMIC, UNDEFINED, Atomic, SchemaShape
from typeguards.domain.dispatch import (
    is_plain_object,
    is_schema_type_guard,
    is_type_guard,
    transform_object,
    validate_object,
    validate_value,
)
from typeguards.domain.errors import ConfigError, SchemaDefinitionError, TypeGuardError
from typeguards.domain.guard import TypeGuard, type_guard
from typeguards.domain.schema import Omit, Partial, Pick, Required, Schema
from typeguards.domain.union import Union

__version__ = "1.1.0"

__all__ = [
    "ATOMIC",
    "REGISTRY",
    "UNDEFINED",
    "Array",
    "Atomic",
    "ConfigError",
    "Const",
    "NonNullable",
    "Nullable",
    "Omit",
    "Optional",
    "Partial",
    "Pick",
    "Record",
    "Required",
    "Schema",
    "SchemaDefinitionError",
    "SchemaShape",
    "StringArray",
    "TypeGuard",
    "TypeGuardError",
    "TypeGuards",
    "Union",
    "configure_logging",
    "create_schema",
    "is_plain_object",
    "is_schema_type_guard",
    "is_type_guard",
    "transform_object",
    "type_guard",
    "validate_object",
    "validate_value",
]
