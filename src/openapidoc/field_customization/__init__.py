"""Field documentation exports."""

from .field_docs import (
    FIELD_DOC_METADATA_KEY,
    FieldDoc,
    apply_field_doc,
    field_doc_for,
    parse_field_doc,
)

__all__ = [
    "FIELD_DOC_METADATA_KEY",
    "FieldDoc",
    "apply_field_doc",
    "field_doc_for",
    "parse_field_doc",
]
