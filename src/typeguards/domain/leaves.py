"""Atomic leaf guards for built-in Python types.

The engine treats these as opaque predicates. String* guards accept text
(query parameters, CSV cells, environment values) and transform it into
the typed value. Their transforms hand back anything they would not
validate unchanged, so ``Optional(StringNumber).transform(UNDEFINED)``
is ``UNDEFINED``.
"""

from __future__ import annotations

import inspect
import math
import numbers
import re
import weakref
from collections.abc import Callable
from collections.abc import Mapping as _Mapping
from datetime import date, datetime

from typeguards.domain.definitions import UNDEFINED
from typeguards.domain.guard import TypeGuard, type_guard

_SCALARS = (bool, int, float, complex, str, bytes)


def _converting(
    validate: Callable[[object], bool], convert: Callable[[str], object]
) -> TypeGuard:
    return type_guard(validate, lambda value: convert(value) if validate(value) else value)


# --- Scalars ---


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _is_string_number(value: object) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        number = _parse_number(value)
    except ValueError:
        return False
    return not (isinstance(number, float) and math.isnan(number))


_STRING_TRUE = ("true", "1")
_STRING_BOOLEANS = (*_STRING_TRUE, "false", "0")

Boolean = type_guard(lambda value: isinstance(value, bool))
StringBoolean = _converting(
    lambda value: isinstance(value, str) and value.lower() in _STRING_BOOLEANS,
    lambda value: value.lower() in _STRING_TRUE,
)
"""Text boolean indicator: ``"true"``, ``"FALSE"``, ``"1"``, ``"0"``..."""

Number = type_guard(_is_number)
Integer = type_guard(lambda value: isinstance(value, int) and not isinstance(value, bool))
Float = type_guard(lambda value: isinstance(value, float))
NaN = type_guard(lambda value: isinstance(value, float) and math.isnan(value))
PositiveNumber = type_guard(lambda value: _is_number(value) and value > 0)
NegativeNumber = type_guard(lambda value: _is_number(value) and value < 0)
StringNumber = _converting(_is_string_number, _parse_number)
"""Text holding a number, e.g. ``"0"``, ``"-1"``, ``"3.33"``. Transforms to int or float."""

String = type_guard(lambda value: isinstance(value, str))
NonEmptyString = type_guard(lambda value: isinstance(value, str) and bool(value.strip()))
Bytes = type_guard(lambda value: isinstance(value, bytes))
Undefined = type_guard(lambda value: value is UNDEFINED)
Null = type_guard(lambda value: value is None)

# --- Objects ---

Object = type_guard(
    lambda value: value is not None
    and value is not UNDEFINED
    and not isinstance(value, _SCALARS)
    and not callable(value)
)
"""Any non-null, non-scalar, non-callable value: containers, dates, instances."""

Dict = type_guard(lambda value: isinstance(value, dict))
Mapping = type_guard(lambda value: isinstance(value, _Mapping))
Set = type_guard(lambda value: isinstance(value, set))
FrozenSet = type_guard(lambda value: isinstance(value, frozenset))
Pattern = type_guard(lambda value: isinstance(value, re.Pattern))
Date = type_guard(lambda value: isinstance(value, date))
DateTime = type_guard(lambda value: isinstance(value, datetime))


def _is_string_date(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


StringDate = _converting(_is_string_date, datetime.fromisoformat)
"""ISO 8601 text, e.g. ``"1996-07-23"``. Transforms to a datetime."""

Awaitable = type_guard(inspect.isawaitable)
ByteArray = type_guard(lambda value: isinstance(value, bytearray))
MemoryView = type_guard(lambda value: isinstance(value, memoryview))
Proxy = type_guard(lambda value: isinstance(value, weakref.ProxyTypes))

# --- Callables ---

Function = type_guard(callable)
CoroutineFunction = type_guard(inspect.iscoroutinefunction)
GeneratorFunction = type_guard(inspect.isgeneratorfunction)
AsyncGeneratorFunction = type_guard(inspect.isasyncgenfunction)
Generator = type_guard(inspect.isgenerator)

# --- Wildcards ---

Unknown = type_guard(lambda value: True)
Any = type_guard(lambda value: True)
Never = type_guard(lambda value: False, lambda value: UNDEFINED)
