"""Generate OpenAPI 3 component schemas from example dataclass values."""

from .configuration import GeneratorSettings
from .document_assembly import (
    DocumentRegistry,
    HeaderSpec,
    PathParam,
    RequestSpec,
    ResponseSpec,
    render_document,
    write_document,
)
from .field_customization import FieldDoc, apply_field_doc, parse_field_doc
from .schema_generation import (
    GenerateOut,
    OpenApiDocError,
    SchemaFragment,
    SchemaGenerationError,
    SchemaGenerator,
    SchemaKind,
    SchemaRegistry,
    schema_name_for,
)

__all__ = [
    "DocumentRegistry",
    "FieldDoc",
    "GenerateOut",
    "GeneratorSettings",
    "HeaderSpec",
    "OpenApiDocError",
    "PathParam",
    "RequestSpec",
    "ResponseSpec",
    "SchemaFragment",
    "SchemaGenerationError",
    "SchemaGenerator",
    "SchemaKind",
    "SchemaRegistry",
    "apply_field_doc",
    "parse_field_doc",
    "render_document",
    "schema_name_for",
    "write_document",
]
