"""The TypeGuard unit.

INVARIANT: Guards are immutable. ``config`` and every combinator return
a new guard; nothing ever mutates an existing one.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from typeguards.domain.definitions import ATOMIC, UNDEFINED, Definition, Key, SchemaShape

Validator = Callable[[Any], bool]
Transformer = Callable[[Any], Any]

_CONFIGURABLE: Final = frozenset({"validate", "transform"})
_MISSING: Final = object()


def identity(value: Any) -> Any:
    return value


@dataclass(frozen=True, eq=False)
class TypeGuard:
    """A validation predicate and a transform bundled with a definition tag.

    Attributes:
        validate: Returns whether a value has the guarded type.
        transform: Maps a matching value to something else. Identity by default.
        shape: :class:`~typeguards.domain.definitions.Atomic` for leaf guards,
            :class:`~typeguards.domain.definitions.SchemaShape` for schemas.
    """

    validate: Validator
    transform: Transformer = identity
    shape: Definition = ATOMIC

    @property
    def is_schema(self) -> bool:
        return isinstance(self.shape, SchemaShape)

    def config(
        self,
        overrides: Mapping[str, Callable[[Any], Any] | None] | None = None,
        /,
        **kwargs: Callable[[Any], Any] | None,
    ) -> TypeGuard:
        """Return a new guard with ``validate`` and/or ``transform`` replaced.

        Overrides may be given as a mapping, as keywords, or both. ``None``
        values keep the current function. The definition tag is preserved.
        """
        changes = {**(overrides or {}), **kwargs}
        unknown = set(changes) - _CONFIGURABLE
        if unknown:
            msg = (
                f"Cannot configure {sorted(unknown)}; "
                "only validate and transform are configurable"
            )
            raise TypeError(msg)
        return dataclasses.replace(
            self, **{name: fn for name, fn in changes.items() if fn is not None}
        )

    def definition(self, key: Key = _MISSING) -> Any:
        """Return the definition, or the sub-definition declared at *key*.

        Atomic guards have no sub-definitions; asking for one, or for a key
        the schema does not declare, returns ``UNDEFINED``.
        """
        if key is _MISSING:
            if isinstance(self.shape, SchemaShape):
                return dict(self.shape.fields)
            return self.shape
        if isinstance(self.shape, SchemaShape):
            return self.shape.fields.get(key, UNDEFINED)
        return UNDEFINED


def type_guard(
    validate: Validator,
    transform: Transformer = identity,
    *,
    definition: Definition = ATOMIC,
) -> TypeGuard:
    """Build a guard from a predicate. The entry point for custom leaf guards."""
    return TypeGuard(validate=validate, transform=transform, shape=definition)
