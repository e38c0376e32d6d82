"""Value dispatch, object validation and shallow transformation.

Every combinator funnels through :func:`validate_value`. A definition is
either a guard (delegate to it) or a literal value (match it exactly):

- list/tuple literal -> same-length sequence, pairwise strict equality
- ``None``           -> the value is ``None``
- plain dict literal -> exact-mode :func:`validate_object`
- anything else      -> strict equality

Keys match by equality and type, so ``True`` never stands in for ``1``.
None of these functions raise on well-formed input. Definition graphs
are assumed acyclic.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from typeguards.domain.definitions import UNDEFINED, SchemaShape
from typeguards.domain.guard import TypeGuard

_SCALARS = (bool, int, float, complex, str, bytes)
_MISSING = object()


def is_type_guard(obj: Any) -> bool:
    return isinstance(obj, TypeGuard)


def is_schema_type_guard(obj: Any) -> bool:
    return isinstance(obj, TypeGuard) and isinstance(obj.shape, SchemaShape)


def is_plain_object(obj: Any) -> bool:
    """True for ``dict`` instances: key/value literals, not class instances."""
    return isinstance(obj, dict)


def is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def strict_equals(a: Any, b: Any) -> bool:
    """Identity for objects, value equality for scalars.

    ``True`` never equals ``1`` and NaN never equals itself.
    """
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        if isinstance(a, float) and math.isnan(a):
            return False
        return a == b
    return a is b


def same_key(a: Any, b: Any) -> bool:
    """Key equality that also requires matching types.

    ``1``, ``1.0`` and ``True`` hash alike in a dict but are different keys here.
    """
    return a == b and type(a) is type(b)


def _declared_key(key: Any, definition: Mapping[Any, Any]) -> Any:
    if key not in definition:
        return _MISSING
    for declared in definition:
        if same_key(key, declared):
            return declared
    return _MISSING


def _is_identical_sequence(value: Any, definition: list[Any] | tuple[Any, ...]) -> bool:
    if not is_sequence(value) or len(value) != len(definition):
        return False
    return all(strict_equals(v, d) for v, d in zip(value, definition, strict=True))


def validate_value(value: Any, definition: Any) -> bool:
    """Return whether *value* matches *definition* (a guard or a literal)."""
    if isinstance(definition, TypeGuard):
        return definition.validate(value)
    if is_sequence(definition):
        return _is_identical_sequence(value, definition)
    if definition is None:
        return value is None
    if is_plain_object(definition):
        return isinstance(value, Mapping) and validate_object(value, definition)
    return strict_equals(value, definition)


def validate_object(obj: Any, definition: Mapping[Any, Any], *, partial: bool = False) -> bool:
    """Validate a mapping against a schema definition.

    Exact mode requires precisely the declared keys. Partial mode accepts
    any subset of them and treats ``UNDEFINED`` values as absent. Foreign
    keys are rejected in both modes.
    """
    if not isinstance(obj, Mapping):
        return False
    obj_keys = list(obj.keys())
    if not partial and len(obj_keys) != len(definition):
        return False
    for k in obj_keys:
        declared = _declared_key(k, definition)
        if declared is _MISSING:
            return False
        value = obj[k]
        if partial and value is UNDEFINED:
            continue
        if not validate_value(value, definition[declared]):
            return False
    return True


def transform_object(obj: Any, definition: Mapping[Any, Any]) -> Any:
    """Apply each declared guard's transform to the matching value.

    Shallow: nested mappings are only transformed when the nested guard's
    own transform does so. Non-mapping input passes through unchanged.
    """
    if not isinstance(obj, Mapping):
        return obj
    result: dict[Any, Any] = {}
    for key, value in obj.items():
        declared = _declared_key(key, definition)
        type_ = UNDEFINED if declared is _MISSING else definition[declared]
        result[key] = type_.transform(value) if isinstance(type_, TypeGuard) else value
    return result
