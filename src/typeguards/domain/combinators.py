"""Guard constructors built from other type definitions.

Each combinator accepts a type definition (a guard or a literal) and
returns a new atomic guard. Transforms delegate to the wrapped guard's
transform; literal definitions transform as identity, and so do Record
and Const.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from typeguards.domain.definitions import UNDEFINED
from typeguards.domain.dispatch import (
    is_plain_object,
    is_sequence,
    is_type_guard,
    same_key,
    validate_value,
)
from typeguards.domain.guard import TypeGuard, identity, type_guard

logger = logging.getLogger(__name__)

_KEY_COLLECTIONS = (list, tuple, set, frozenset)


def _delegate_transform(type_: Any) -> Callable[[Any], Any]:
    return type_.transform if is_type_guard(type_) else identity


def Optional(type_: Any) -> TypeGuard:  # noqa: N802
    """``Optional(T) = T | UNDEFINED``"""
    return type_guard(
        lambda value: value is UNDEFINED or validate_value(value, type_),
        _delegate_transform(type_),
    )


def Nullable(type_: Any) -> TypeGuard:  # noqa: N802
    """``Nullable(T) = T | None``"""
    return type_guard(
        lambda value: value is None or validate_value(value, type_),
        _delegate_transform(type_),
    )


def NonNullable(type_: Any) -> TypeGuard:  # noqa: N802
    """``NonNullable(T) = T`` minus ``None`` and ``UNDEFINED``"""

    def validate(value: Any) -> bool:
        if value is None or value is UNDEFINED:
            return False
        return validate_value(value, type_)

    return type_guard(validate, _delegate_transform(type_))


def Array(type_: Any = UNDEFINED) -> TypeGuard:  # noqa: N802
    """Guard for a list or tuple whose items all match *type_*.

    Without *type_* any list or tuple is accepted.
    """

    def validate(value: Any) -> bool:
        if not is_sequence(value):
            return False
        if type_ is UNDEFINED:
            return True
        return all(validate_value(item, type_) for item in value)

    def transform(value: Any) -> Any:
        if is_sequence(value) and is_type_guard(type_):
            items = [type_.transform(item) for item in value]
            return tuple(items) if isinstance(value, tuple) else items
        return value

    return type_guard(validate, transform)


def StringArray(type_: Any = UNDEFINED, delimiter: str = ",") -> TypeGuard:  # noqa: N802
    """Guard for a delimited string whose parts all match *type_*.

    Useful for query parameters and flat-file columns, e.g.
    ``"item1,item2,item3"``. The transform returns the split parts,
    each passed through *type_*'s transform when it is a guard.
    """

    def validate(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if type_ is UNDEFINED:
            return True
        return all(validate_value(part, type_) for part in value.split(delimiter))

    def transform(value: Any) -> Any:
        if not isinstance(value, str):
            return value
        parts = value.split(delimiter)
        if is_type_guard(type_):
            return [type_.transform(part) for part in parts]
        return parts

    return type_guard(validate, transform)


def _key_predicate(keys: Any) -> Callable[[Any], bool] | None:
    if is_type_guard(keys):
        return keys.validate
    if not isinstance(keys, _KEY_COLLECTIONS):
        return None
    allowed = list(keys)

    def is_allowed(key: Any) -> bool:
        return any(same_key(key, k) for k in allowed)

    return is_allowed


def Record(keys: Any, value: Any) -> TypeGuard:  # noqa: N802
    """Guard for a plain dict whose keys match *keys* and values match *value*.

    *keys* is either a collection of allowed keys or a guard over keys.
    Anything else makes the guard reject every input.
    """
    key_check = _key_predicate(keys)

    def validate(obj: Any) -> bool:
        if key_check is None:
            logger.debug("Record key predicate %r is neither a key collection nor a guard", keys)
            return False
        if not is_plain_object(obj):
            return False
        return all(key_check(k) and validate_value(v, value) for k, v in obj.items())

    return type_guard(validate)


def Const(definition: Any) -> TypeGuard:  # noqa: N802
    """Guard matching one literal value, sequence or nested dict exactly."""
    return type_guard(lambda value: validate_value(value, definition))
