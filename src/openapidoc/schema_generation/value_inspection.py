"""Runtime value inspection for the schema walker.

The walker only sees the closed set of :class:`ValueKind` tags and the
:class:`FieldDescriptor` records produced here; everything that knows about
dataclasses, enums or stdlib value types lives in this module.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from openapidoc.configuration.runtime_settings import DEFAULT_MAX_DEPTH

from .schema_errors import FieldCountMismatchError

_MISSING = object()


class ValueKind(str, Enum):
    """Kinds the walker dispatches on."""

    NIL = "nil"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    TEMPORAL = "temporal"
    STRINGER = "stringer"
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared record field with its resolved external name and current value."""

    declared_name: str
    name: str
    value: Any
    metadata: Mapping[str, Any]
    readable: bool


def classify(value: Any) -> ValueKind:
    """Return the walker kind for ``value``."""
    if value is None:
        return ValueKind.NIL
    if isinstance(value, Enum):
        return classify(value.value)
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.STRING
    if isinstance(value, (datetime, date, time)):
        return ValueKind.TEMPORAL
    if is_record(value):
        return ValueKind.STRINGER if _overrides_str(type(value)) else ValueKind.RECORD
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set)):
        return ValueKind.SEQUENCE
    if _overrides_str(type(value)):
        return ValueKind.STRINGER
    return ValueKind.UNSUPPORTED


def is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def scalar_example(value: Any) -> Any:
    """Return the literal example for a scalar, temporal or stringer value."""
    if isinstance(value, Enum):
        return scalar_example(value.value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def render_example(
    value: Any,
    tag_keys: Sequence[str] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
    _active: frozenset[int] = frozenset(),
) -> Any:
    """Return a plain, serializable rendition of ``value`` for array examples.

    Records are rendered as mappings keyed by their resolved field names. A
    value already being rendered higher up (an instance cycle) renders as None,
    and so does any record or container nested more than ``max_depth`` levels
    below ``value``.
    """
    kind = classify(value)
    if kind in (ValueKind.RECORD, ValueKind.MAPPING, ValueKind.SEQUENCE):
        if id(value) in _active or max_depth <= 0:
            return None
        _active = _active | {id(value)}
    depth = max_depth - 1
    if kind is ValueKind.RECORD:
        rendered = {}
        for descriptor in record_fields(value, tag_keys):
            if not descriptor.readable:
                continue
            item = render_example(descriptor.value, tag_keys, depth, _active)
            if item is not None:
                rendered[descriptor.name] = item
        return rendered
    if kind is ValueKind.MAPPING:
        return {
            render_label(key): render_example(item, tag_keys, depth, _active)
            for key, item in value.items()
        }
    if kind is ValueKind.SEQUENCE:
        return [render_example(item, tag_keys, depth, _active) for item in sequence_items(value)]
    if kind is ValueKind.NIL:
        return None
    return scalar_example(value)


def render_label(value: Any) -> str:
    """Render a value as a plain string label, honoring custom ``__str__``."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def sequence_items(value: Any) -> list[Any]:
    if isinstance(value, Set):
        return sorted(value, key=repr)
    return list(value)


def type_name(value: Any) -> str:
    """Return the declared, fully qualified type name of ``value``."""
    cls = type(value)
    qualname = ".".join(part for part in cls.__qualname__.split(".") if part != "<locals>")
    return f"{cls.__module__}.{qualname}"


def record_fields(value: Any, tag_keys: Sequence[str]) -> list[FieldDescriptor]:
    """Describe the declared fields of a record in declaration order.

    Raises:
      FieldCountMismatchError: If a declared field has no value on the instance.
    """
    declared = dataclasses.fields(value)
    descriptors = []
    for declared_field in declared:
        current = getattr(value, declared_field.name, _MISSING)
        if current is _MISSING:
            raise FieldCountMismatchError(
                f"{type_name(value)} declares {len(declared)} fields but field "
                f"'{declared_field.name}' has no value on the instance."
            )
        descriptors.append(
            FieldDescriptor(
                declared_name=declared_field.name,
                name=resolve_field_name(declared_field.name, declared_field.metadata, tag_keys),
                value=current,
                metadata=declared_field.metadata,
                readable=not declared_field.name.startswith("_"),
            )
        )
    return descriptors


def resolve_field_name(
    declared_name: str, metadata: Mapping[str, Any], tag_keys: Sequence[str]
) -> str:
    """Return the first non-empty tag name, falling back to the declared name."""
    for tag_key in tag_keys:
        raw = metadata.get(tag_key)
        if not isinstance(raw, str):
            continue
        candidate = raw.strip().split(",", 1)[0].strip()
        if candidate:
            return candidate
    return declared_name


def _overrides_str(cls: type) -> bool:
    for klass in cls.__mro__:
        if klass is object:
            return False
        if "__str__" in klass.__dict__:
            return True
    return False
