"""Union of type definitions with schema merging.

A plain "any candidate matches" union cannot accept a dict that draws its
fields from several schema candidates when those candidates share a key
typed differently. The merge step builds one extra schema ``M`` holding
every key seen across the schema-shaped candidates; keys declared by more
than one candidate are widened into a nested Union of their definitions.

Given ``A = {a: Number, b: String}`` and ``B = {a: String}``, ``M`` is
``{a: Union(Number, String), b: String}``, so ``{a: "", b: ""}`` passes
while ``{a: 0}`` still fails (exact mode on ``M``, exact mode on ``A``).

INVARIANT: ``M`` only widens acceptance. Transform always dispatches to
the first raw candidate that validates, in declaration order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typeguards.domain.definitions import ATOMIC, SchemaShape
from typeguards.domain.dispatch import (
    is_plain_object,
    is_schema_type_guard,
    is_type_guard,
    validate_object,
    validate_value,
)
from typeguards.domain.guard import TypeGuard, type_guard

logger = logging.getLogger(__name__)


def _candidate_fields(candidate: Any) -> Mapping[Any, Any] | None:
    """Schema definition of a shape-like candidate, or None for anything else."""
    if is_schema_type_guard(candidate):
        return candidate.shape.fields
    if is_plain_object(candidate):
        return candidate
    return None


def merge_schemas(candidates: tuple[Any, ...]) -> tuple[dict[Any, Any], int] | None:
    """Merge the shape-like *candidates* into one schema definition.

    Returns ``(merged, shapes_seen)``, or None when no candidate is a shape.
    """
    merged: dict[Any, Any] = {}
    common_props: dict[Any, list[Any]] = {}
    shapes_seen = 0

    for candidate in candidates:
        fields = _candidate_fields(candidate)
        if fields is None:
            continue
        shapes_seen += 1
        for key, definition in fields.items():
            if key not in merged:
                merged[key] = definition
                continue
            if key not in common_props:
                common_props[key] = [merged[key], definition]
            else:
                common_props[key].append(definition)
            merged[key] = Union(*common_props[key])

    if not shapes_seen:
        return None
    logger.debug(
        "Merged %d schema candidates into %d keys (%d widened)",
        shapes_seen,
        len(merged),
        len(common_props),
    )
    return merged, shapes_seen


def Union(*types: Any) -> TypeGuard:  # noqa: N802
    """Guard for a value matching any of *types*.

    ``Union(A, B, C) = A | B | C``, widened by the merged schema described
    in the module docstring. A union of schema-shaped candidates only is
    itself schema-shaped, with the merged schema as its definition.
    """
    merge = merge_schemas(types)
    merged = merge[0] if merge is not None else None

    def validate(value: Any) -> bool:
        if merged is not None and is_plain_object(value) and validate_object(value, merged):
            return True
        return any(validate_value(value, type_) for type_ in types)

    def transform(value: Any) -> Any:
        for type_ in types:
            if validate_value(value, type_):
                return type_.transform(value) if is_type_guard(type_) else value
        return value

    shape = ATOMIC
    if merge is not None and merge[1] == len(types):
        shape = SchemaShape(merged)
    return type_guard(validate, transform, definition=shape)
