"""Schema generation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .schema_errors import InvalidFragmentError

COMPONENT_SCHEMA_PREFIX = "#/components/schemas/"


class SchemaKind(str, Enum):
    """OpenAPI 3 data types emitted by the generator."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @property
    def is_scalar(self) -> bool:
        return self not in (SchemaKind.OBJECT, SchemaKind.ARRAY)


@dataclass(frozen=True)
class SchemaFragment:  # pylint: disable=too-many-instance-attributes
    """One schema node: a scalar, an object, an array, a reference or an alternative set."""

    kind: SchemaKind | None = None
    ref: str | None = None
    properties: Mapping[str, SchemaFragment] = field(default_factory=dict)
    items: SchemaFragment | None = None
    any_of: tuple[SchemaFragment, ...] = ()
    example: Any = None
    description: str = ""
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.ref is not None:
            if self.kind is not None or self.properties or self.items is not None or self.any_of:
                raise InvalidFragmentError(f"Reference fragment {self.ref} cannot carry a shape.")
            return
        if self.kind is None:
            # an empty alternative set renders as the unconstrained schema {}
            if self.properties or self.items is not None:
                raise InvalidFragmentError("Alternative set cannot carry properties or items.")
            return
        if self.any_of:
            raise InvalidFragmentError(f"{self.kind.value} fragment cannot carry alternatives.")
        if self.kind is SchemaKind.ARRAY:
            if self.items is None:
                raise InvalidFragmentError("Array fragment requires items.")
            if self.properties:
                raise InvalidFragmentError("Array fragment cannot carry properties.")
        elif self.kind is SchemaKind.OBJECT:
            if self.items is not None:
                raise InvalidFragmentError("Object fragment cannot carry items.")
        elif self.properties or self.items is not None:
            raise InvalidFragmentError(
                f"Scalar {self.kind.value} fragment cannot carry properties or items."
            )

    @property
    def is_reference(self) -> bool:
        return self.ref is not None

    @staticmethod
    def scalar(kind: SchemaKind, example: Any = None) -> SchemaFragment:
        return SchemaFragment(kind=kind, example=example)

    @staticmethod
    def object(
        properties: Mapping[str, SchemaFragment], example: Any = None
    ) -> SchemaFragment:
        return SchemaFragment(kind=SchemaKind.OBJECT, properties=dict(properties), example=example)

    @staticmethod
    def array(items: SchemaFragment, example: Any = None) -> SchemaFragment:
        return SchemaFragment(kind=SchemaKind.ARRAY, items=items, example=example)

    @staticmethod
    def alternatives(members: tuple[SchemaFragment, ...]) -> SchemaFragment:
        return SchemaFragment(any_of=members)

    def shape_key(self) -> str:
        """Return a stable key describing the fragment shape, ignoring examples."""
        return repr(_shape(self))

    def to_openapi(self) -> dict[str, Any]:
        """Render the fragment as an OpenAPI schema object."""
        rendered: dict[str, Any] = {}
        if self.ref is not None:
            # OpenAPI 3.0 ignores siblings of $ref, so documented references are wrapped
            documented = self.description or self.required or self.example is not None
            if documented:
                rendered["allOf"] = [{"$ref": self.ref}]
            else:
                rendered["$ref"] = self.ref
        if self.kind is not None:
            rendered["type"] = self.kind.value
        if self.description:
            rendered["description"] = self.description
        if self.properties:
            rendered["properties"] = {
                name: child.to_openapi() for name, child in self.properties.items()
            }
        if self.required:
            rendered["required"] = list(self.required)
        if self.items is not None:
            rendered["items"] = self.items.to_openapi()
        if self.any_of:
            rendered["anyOf"] = [member.to_openapi() for member in self.any_of]
        if self.example is not None:
            rendered["example"] = self.example
        return rendered


def _shape(fragment: SchemaFragment) -> tuple[Any, ...]:
    return (
        fragment.kind.value if fragment.kind else None,
        fragment.ref,
        tuple((name, _shape(child)) for name, child in fragment.properties.items()),
        _shape(fragment.items) if fragment.items is not None else None,
        tuple(_shape(member) for member in fragment.any_of),
    )


def schema_reference(schema_name: str) -> SchemaFragment:
    """Build a reference fragment pointing at a component schema."""
    return SchemaFragment(ref=f"{COMPONENT_SCHEMA_PREFIX}{schema_name}")


def reference_name(ref: str) -> str:
    """Return the component schema name a reference points at."""
    if not ref.startswith(COMPONENT_SCHEMA_PREFIX):
        raise InvalidFragmentError(f"Not a component schema reference: {ref}")
    return ref[len(COMPONENT_SCHEMA_PREFIX) :]


@dataclass(frozen=True)
class GenerateOut:
    """Result of one top-level generation."""

    parent_schema_name: str
    schemas: Mapping[str, SchemaFragment]

    def components(self) -> dict[str, Any]:
        """Render the schemas for a document's components.schemas section."""
        return {name: fragment.to_openapi() for name, fragment in self.schemas.items()}
