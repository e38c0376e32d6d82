"""Schema guards and the operators that derive new schemas from them.

Partial and Required share the source definition and only change the
validation mode. Pick and Omit copy the surviving entries into a fresh
mapping; they always validate in exact mode.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from typeguards.domain.definitions import SchemaShape
from typeguards.domain.dispatch import is_type_guard, transform_object, validate_object
from typeguards.domain.errors import SchemaDefinitionError
from typeguards.domain.guard import TypeGuard, type_guard


def schema_fields(schema: Any) -> Mapping[Any, Any]:
    """Return the definition mapping of a schema guard or bare schema dict.

    Raises:
        SchemaDefinitionError: *schema* is an atomic guard or not a mapping.
    """
    if is_type_guard(schema):
        if isinstance(schema.shape, SchemaShape):
            return schema.shape.fields
        msg = "Expected a schema-shaped type guard, got an atomic one"
        raise SchemaDefinitionError(msg)
    if isinstance(schema, Mapping):
        return schema
    msg = f"Expected a schema definition, got {type(schema).__name__}"
    raise SchemaDefinitionError(msg)


def _schema_guard(fields: Mapping[Any, Any], *, partial: bool = False) -> TypeGuard:
    shape = SchemaShape(fields)
    return type_guard(
        lambda obj: validate_object(obj, shape.fields, partial=partial),
        lambda obj: transform_object(obj, shape.fields),
        definition=shape,
    )


def Schema(definition: Any) -> TypeGuard:  # noqa: N802
    """Guard for a mapping with exactly the keys of *definition*."""
    return _schema_guard(schema_fields(definition))


def Partial(schema: Any) -> TypeGuard:  # noqa: N802
    """Schema guard whose properties are all optional."""
    return _schema_guard(schema_fields(schema), partial=True)


def Required(schema: Any) -> TypeGuard:  # noqa: N802
    """Schema guard whose properties are all required, even if *schema* was partial."""
    return _schema_guard(schema_fields(schema))


def Pick(schema: Any, keys: Iterable[Any]) -> TypeGuard:  # noqa: N802
    """Schema guard with only the properties of *schema* listed in *keys*."""
    wanted = list(keys)
    fields = schema_fields(schema)
    return _schema_guard({k: v for k, v in fields.items() if k in wanted})


def Omit(schema: Any, keys: Iterable[Any]) -> TypeGuard:  # noqa: N802
    """Schema guard with the properties of *schema* not listed in *keys*."""
    unwanted = list(keys)
    fields = schema_fields(schema)
    return _schema_guard({k: v for k, v in fields.items() if k not in unwanted})
