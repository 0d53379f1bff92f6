"""Field documentation overrides applied after schema generation."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from openapidoc.schema_generation.schema_errors import GeneratorConfigError
from openapidoc.schema_generation.schema_models import SchemaFragment
from openapidoc.schema_generation.value_inspection import ValueKind

FIELD_DOC_METADATA_KEY = "openapi"

_LOGGER = logging.getLogger("openapidoc.schema")
_LOGGER.addHandler(logging.NullHandler())

_REQUIRED_KINDS = (ValueKind.RECORD, ValueKind.MAPPING)


@dataclass(frozen=True)
class FieldDoc:
    """Cosmetic overrides for one field's schema."""

    description: str | None = None
    example: str | None = None
    required: tuple[str, ...] = ()


def field_doc_for(metadata: Mapping[str, Any]) -> FieldDoc | None:
    """Return the parsed field documentation stored in dataclass field metadata."""
    raw = metadata.get(FIELD_DOC_METADATA_KEY)
    if raw is None:
        return None
    if isinstance(raw, FieldDoc):
        return raw
    if isinstance(raw, str):
        return parse_field_doc(raw)
    if isinstance(raw, Mapping):
        return _field_doc_from_mapping(raw)
    raise GeneratorConfigError(
        f"Field metadata '{FIELD_DOC_METADATA_KEY}' must be a FieldDoc, mapping or string."
    )


@lru_cache(maxsize=256)
def parse_field_doc(text: str) -> FieldDoc:
    """Parse the compact ``desc:'...',ex:'...',required:'a;b'`` notation.

    Entries are separated by commas and split on the first colon; single
    quotes are stripped from values. Unknown keys are ignored.
    """
    entries: dict[str, str] = {}
    for chunk in text.split(","):
        key, _, value = chunk.partition(":")
        key = key.strip()
        if key:
            entries[key] = value.replace("'", "").strip()
    return _field_doc_from_mapping(entries)


def _field_doc_from_mapping(entries: Mapping[str, Any]) -> FieldDoc:
    description = entries.get("desc", entries.get("description"))
    example = entries.get("ex", entries.get("example"))
    required_raw = entries.get("required")
    if isinstance(required_raw, str):
        required = tuple(name.strip() for name in required_raw.split(";") if name.strip())
    elif isinstance(required_raw, (list, tuple)):
        required = tuple(str(name) for name in required_raw)
    else:
        required = ()
    return FieldDoc(
        description=str(description) if description else None,
        example=str(example) if example is not None and example != "" else None,
        required=required,
    )


def apply_field_doc(
    kind: ValueKind, doc: FieldDoc | None, fragment: SchemaFragment
) -> SchemaFragment:
    """Return ``fragment`` with the documentation overrides of ``doc`` applied."""
    if doc is None:
        return fragment

    changes: dict[str, Any] = {}
    if doc.description:
        changes["description"] = doc.description
    if doc.example is not None:
        example = _coerce_example(kind, doc.example)
        if example is not None:
            changes["example"] = example
    if doc.required and kind in _REQUIRED_KINDS:
        changes["required"] = doc.required

    if not changes:
        return fragment
    return dataclasses.replace(fragment, **changes)


def _coerce_example(kind: ValueKind, text: str) -> Any:
    try:
        if kind is ValueKind.INTEGER:
            return int(text)
        if kind is ValueKind.NUMBER:
            return float(text)
        if kind is ValueKind.BOOLEAN:
            return _parse_bool(text)
    except ValueError:
        _LOGGER.warning("ignoring example %r that does not parse as %s", text, kind.value)
        return None
    if kind is ValueKind.SEQUENCE:
        return text.split(";")
    if kind in (ValueKind.STRING, ValueKind.STRINGER, ValueKind.TEMPORAL):
        return text.split(";")[-1]
    return text


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in ("1", "t", "true"):
        return True
    if lowered in ("0", "f", "false"):
        return False
    raise ValueError(text)
