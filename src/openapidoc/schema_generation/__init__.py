"""Schema generation exports."""

from .schema_errors import (
    DuplicateSchemaError,
    FieldCountMismatchError,
    GeneratorConfigError,
    InvalidFragmentError,
    NestingTooDeepError,
    OpenApiDocError,
    SchemaGenerationError,
    UnsupportedKindError,
)
from .schema_models import (
    COMPONENT_SCHEMA_PREFIX,
    GenerateOut,
    SchemaFragment,
    SchemaKind,
    reference_name,
    schema_reference,
)
from .schema_registry import SchemaRegistry
from .value_inspection import FieldDescriptor, ValueKind, classify
from .value_walker import FieldCustomizer, SchemaGenerator, schema_name_for

__all__ = [
    "COMPONENT_SCHEMA_PREFIX",
    "DuplicateSchemaError",
    "FieldCountMismatchError",
    "FieldCustomizer",
    "FieldDescriptor",
    "GenerateOut",
    "GeneratorConfigError",
    "InvalidFragmentError",
    "NestingTooDeepError",
    "OpenApiDocError",
    "SchemaFragment",
    "SchemaGenerationError",
    "SchemaGenerator",
    "SchemaKind",
    "SchemaRegistry",
    "UnsupportedKindError",
    "ValueKind",
    "classify",
    "reference_name",
    "schema_name_for",
    "schema_reference",
]
