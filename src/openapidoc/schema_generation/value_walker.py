"""Recursive schema generation over example values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from openapidoc.configuration.runtime_settings import GeneratorSettings
from openapidoc.field_customization.field_docs import FieldDoc, apply_field_doc, field_doc_for

from .schema_errors import GeneratorConfigError, NestingTooDeepError, UnsupportedKindError
from .schema_models import GenerateOut, SchemaFragment, SchemaKind, schema_reference
from .schema_registry import SchemaRegistry
from .value_inspection import (
    ValueKind,
    classify,
    is_record,
    record_fields,
    render_example,
    render_label,
    scalar_example,
    sequence_items,
    type_name,
)

_LOGGER = logging.getLogger("openapidoc.schema")
_LOGGER.addHandler(logging.NullHandler())

_SCALAR_KINDS = {
    ValueKind.BOOLEAN: SchemaKind.BOOLEAN,
    ValueKind.INTEGER: SchemaKind.INTEGER,
    ValueKind.NUMBER: SchemaKind.NUMBER,
    ValueKind.STRING: SchemaKind.STRING,
    ValueKind.TEMPORAL: SchemaKind.STRING,
    ValueKind.STRINGER: SchemaKind.STRING,
}

FieldCustomizer = Callable[[ValueKind, FieldDoc | None, SchemaFragment], SchemaFragment]


def schema_name_for(value: Any, prefix: str = "") -> str:
    """Return the component schema name used for ``value``."""
    return f"{prefix.strip()}{type_name(value)}"


class SchemaGenerator:
    """Walk example records and collect one component schema per record type.

    Every value is expected to be fully populated: field values are both the
    source of the schema shape and the examples rendered into it.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        customizer: FieldCustomizer | None = None,
    ) -> None:
        settings = settings or GeneratorSettings()
        seen: dict[str, int] = {}
        for index, tag_key in enumerate(settings.tag_keys):
            if tag_key in seen:
                raise GeneratorConfigError(
                    f"tag {tag_key} already defined before on index {seen[tag_key]}"
                )
            seen[tag_key] = index
        if settings.max_depth <= 0:
            raise GeneratorConfigError("max_depth must be greater than zero.")

        self._tag_keys = tuple(settings.tag_keys)
        self._prefix = settings.schema_prefix.strip()
        self._max_depth = settings.max_depth
        self._logger = logger or _LOGGER
        self._customizer = customizer or apply_field_doc

    @property
    def schema_prefix(self) -> str:
        return self._prefix

    def schema_name(self, value: Any) -> str:
        return schema_name_for(value, self._prefix)

    def generate(self, value: Any, registry: SchemaRegistry | None = None) -> GenerateOut:
        """Generate component schemas for ``value``.

        Args:
          value: Root record instance.
          registry: Registry to accumulate into; a fresh one is used when omitted.

        Returns:
          The root schema name and every schema known to the registry.

        Raises:
          SchemaGenerationError: On the first fatal problem; the registry keeps
            whatever was stored before the failure and no name stays in progress.
        """
        registry = registry if registry is not None else SchemaRegistry()
        # a record with a custom __str__ is only a string when nested
        if not is_record(value):
            raise UnsupportedKindError(
                f"Root value of type {type(value).__name__} is not a record."
            )
        try:
            parent_schema_name = self.walk(value, "", registry)
        finally:
            registry.abandon()
        return GenerateOut(parent_schema_name=parent_schema_name, schemas=registry.as_dict())

    def walk(self, value: Any, json_path: str, registry: SchemaRegistry, depth: int = 0) -> str:
        """Register the schema of one record and return its schema name."""
        self._check_depth(depth, json_path)
        schema_name = self.schema_name(value)

        if registry.has(schema_name):
            self._logger.debug("%d exist schema name %s", depth, schema_name)
            return schema_name
        if registry.is_in_progress(schema_name):
            self._logger.debug("%d cycle on schema name %s at '%s'", depth, schema_name, json_path)
            return schema_name

        self._logger.debug("%d not exist, will append schema name %s", depth, schema_name)
        registry.begin(schema_name)

        properties: dict[str, SchemaFragment] = {}
        for descriptor in record_fields(value, self._tag_keys):
            kind = classify(descriptor.value)
            self._logger.debug(
                "%d iterate field name '%s' as '%s' with type %s",
                depth,
                descriptor.declared_name,
                descriptor.name,
                kind.value,
            )
            if not descriptor.readable:
                self._logger.debug(
                    "%d field '%s' on '%s' is not exported, skipping",
                    depth,
                    descriptor.declared_name,
                    schema_name,
                )
                continue
            if kind is ValueKind.NIL:
                self._logger.debug("%d nil field '%s' omitted", depth, descriptor.declared_name)
                continue

            fragment = self._value_fragment(
                kind,
                descriptor.value,
                json_path=f"{json_path}.{descriptor.name}",
                registry=registry,
                depth=depth,
                field_label=descriptor.declared_name,
            )
            properties[descriptor.name] = self._customizer(
                kind, field_doc_for(descriptor.metadata), fragment
            )

        registry.put(schema_name, SchemaFragment.object(properties))
        self._logger.debug("%d appended %s with %d properties", depth, schema_name, len(properties))
        return schema_name

    def _value_fragment(  # pylint: disable=too-many-arguments
        self,
        kind: ValueKind,
        value: Any,
        *,
        json_path: str,
        registry: SchemaRegistry,
        depth: int,
        field_label: str,
        with_example: bool = True,
    ) -> SchemaFragment:
        if kind in _SCALAR_KINDS:
            example = scalar_example(value) if with_example else None
            return SchemaFragment.scalar(_SCALAR_KINDS[kind], example)
        if kind is ValueKind.RECORD:
            return schema_reference(self.walk(value, json_path, registry, depth + 1))
        if kind is ValueKind.SEQUENCE:
            return self._array_fragment(value, json_path, registry, depth + 1, field_label)
        if kind is ValueKind.MAPPING:
            return self._mapping_fragment(value, json_path, registry, depth + 1, field_label)
        raise UnsupportedKindError(
            f"not supported type {type(value).__name__} on field '{field_label}'"
        )

    def _array_fragment(
        self,
        value: Any,
        json_path: str,
        registry: SchemaRegistry,
        depth: int,
        field_label: str,
    ) -> SchemaFragment:
        self._check_depth(depth, json_path)
        elements = sequence_items(value)
        element_fragments: list[SchemaFragment | None] = [None] * len(elements)

        # Walk last-to-first so that, for a type name shared by several elements,
        # the schema left in ``folded`` is the one built from the lowest index.
        folded = SchemaRegistry()
        for index in range(len(elements) - 1, -1, -1):
            element = elements[index]
            kind = classify(element)
            if kind is ValueKind.NIL:
                continue
            scratch = registry.child()
            element_fragments[index] = self._value_fragment(
                kind,
                element,
                json_path=f"{json_path}[{index}]",
                registry=scratch,
                depth=depth,
                field_label=field_label,
                with_example=False,
            )
            folded.overwrite_from(scratch)

        added = registry.merge_missing(folded)
        if added:
            self._logger.debug("%d array at '%s' added schemas %s", depth, json_path, added)

        alternatives: dict[str, SchemaFragment] = {}
        for fragment in element_fragments:
            if fragment is not None:
                alternatives.setdefault(fragment.shape_key(), fragment)

        members = tuple(alternatives.values())
        items = members[0] if len(members) == 1 else SchemaFragment.alternatives(members)
        example = render_example(elements, self._tag_keys, max_depth=self._max_depth - depth)
        return SchemaFragment.array(items, example=example)

    def _mapping_fragment(
        self,
        value: Mapping[Any, Any],
        json_path: str,
        registry: SchemaRegistry,
        depth: int,
        field_label: str,
    ) -> SchemaFragment:
        self._check_depth(depth, json_path)
        properties: dict[str, SchemaFragment] = {}
        example: dict[str, str] = {}
        for key, item in value.items():
            label = render_label(key)
            kind = classify(item)
            if kind is ValueKind.NIL:
                continue
            example[label] = render_label(item)
            properties[label] = self._value_fragment(
                kind,
                item,
                json_path=f"{json_path}.{label}",
                registry=registry,
                depth=depth,
                field_label=field_label,
            )
        return SchemaFragment.object(properties, example=example)

    def _check_depth(self, depth: int, json_path: str) -> None:
        if depth > self._max_depth:
            raise NestingTooDeepError(
                f"Nesting deeper than {self._max_depth} levels at '{json_path or '.'}'."
            )
