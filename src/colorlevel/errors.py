"""Centralised exception hierarchy for colorlevel."""

from __future__ import annotations


class ColorLevelError(Exception):
    """Base class for all custom colorlevel exceptions."""


class InvalidColorLevelError(ColorLevelError, ValueError):
    """A value passed by the caller is not one of the known colour levels."""


class SchemaError(ColorLevelError):
    """Base class for errors related to the structured output schema."""


class UnknownSchemaVersionError(SchemaError, ValueError):
    """The requested JSON schema version is not shipped with the package."""


__all__ = [
    "ColorLevelError",
    "InvalidColorLevelError",
    "SchemaError",
    "UnknownSchemaVersionError",
]
