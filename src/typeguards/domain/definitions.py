"""Definition tags carried by every type guard.

A guard is either atomic (an opaque leaf predicate) or schema-shaped
(it validates a keyed mapping against a :class:`SchemaShape`). The two
are modelled as a closed tagged variant and inspected with ``isinstance``.

``UNDEFINED`` stands in for a missing value. ``None`` is a real value
(null); ``UNDEFINED`` is what Optional fields and partial schemas tolerate.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final


class _Undefined:
    """Singleton marker for an absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

Key = Hashable


@dataclass(frozen=True)
class Atomic:
    """Tag of a leaf guard whose structure is opaque to the engine."""

    name: str = "typeguard"


@dataclass(frozen=True)
class SchemaShape:
    """Tag of a schema-shaped guard: an ordered key -> definition mapping.

    The mapping is copied on construction and exposed read-only, so later
    changes to the caller's dict never leak into an existing guard.
    """

    fields: Mapping[Key, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def keys(self) -> list[Key]:
        return list(self.fields)


Definition = Atomic | SchemaShape

ATOMIC: Final = Atomic()
