"""Schema generation errors."""

from __future__ import annotations


class OpenApiDocError(Exception):
    """Base class for every error raised by openapidoc."""


class SchemaGenerationError(OpenApiDocError):
    """Raised when a value cannot be converted into component schemas."""


class GeneratorConfigError(SchemaGenerationError):
    """Raised for invalid generator options."""


class FieldCountMismatchError(SchemaGenerationError):
    """Raised when a record declares fields its instance does not carry."""


class UnsupportedKindError(SchemaGenerationError):
    """Raised when a value has no scalar, object, array or map mapping."""


class NestingTooDeepError(SchemaGenerationError):
    """Raised when the walk exceeds the configured nesting depth."""


class DuplicateSchemaError(SchemaGenerationError):
    """Raised when a resolved schema name would be overwritten."""


class InvalidFragmentError(SchemaGenerationError):
    """Raised when a schema fragment violates its shape invariant."""
