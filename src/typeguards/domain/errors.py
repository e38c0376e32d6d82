"""Exceptions raised for programmer errors.

Validation never raises: a mismatch is ``False``. These exceptions only
surface when a guard is built from arguments that cannot describe a type.
"""

from __future__ import annotations


class TypeGuardError(Exception):
    """Base class for all typeguards errors."""


class SchemaDefinitionError(TypeGuardError, TypeError):
    """A schema operator received something that is not a schema."""


class ConfigError(TypeGuardError):
    """Settings could not be loaded."""
