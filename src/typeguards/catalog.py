"""The combined namespace of every built-in guard and combinator.

``create_schema`` hands this namespace to a factory so schema bodies can
use ``String``, ``Any`` or ``Optional`` without shadowing the caller's
own names.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType, SimpleNamespace
from typing import Any

from typeguards.domain import combinators, leaves, schema, union
from typeguards.domain.guard import TypeGuard

LEAF_NAMES = (
    "Boolean",
    "StringBoolean",
    "Number",
    "Integer",
    "Float",
    "NaN",
    "PositiveNumber",
    "NegativeNumber",
    "StringNumber",
    "String",
    "NonEmptyString",
    "Bytes",
    "Undefined",
    "Null",
    "Object",
    "Dict",
    "Mapping",
    "Set",
    "FrozenSet",
    "Pattern",
    "Date",
    "DateTime",
    "StringDate",
    "Awaitable",
    "ByteArray",
    "MemoryView",
    "Proxy",
    "Function",
    "CoroutineFunction",
    "GeneratorFunction",
    "AsyncGeneratorFunction",
    "Generator",
    "Unknown",
    "Any",
    "Never",
)

COMBINATOR_NAMES = (
    "Optional",
    "Nullable",
    "NonNullable",
    "Array",
    "StringArray",
    "Record",
    "Const",
)

SCHEMA_NAMES = ("Schema", "Partial", "Required", "Pick", "Omit")


def _collect() -> Mapping[str, Any]:
    entries: dict[str, Any] = {}
    entries.update({name: getattr(leaves, name) for name in LEAF_NAMES})
    entries.update({name: getattr(combinators, name) for name in COMBINATOR_NAMES})
    entries.update({name: getattr(schema, name) for name in SCHEMA_NAMES})
    entries["Union"] = union.Union
    return MappingProxyType(entries)


REGISTRY: Mapping[str, Any] = _collect()

TypeGuards = SimpleNamespace(**REGISTRY)


def create_schema(factory: Callable[[SimpleNamespace], Mapping[Any, Any]]) -> TypeGuard:
    """Build a schema guard from ``factory(TypeGuards)``.

    Usage::

        Person = create_schema(lambda t: {"name": t.String, "age": t.Optional(t.Number)})
    """
    return schema.Schema(factory(TypeGuards))
