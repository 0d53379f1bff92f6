"""Field documentation override tests."""

from __future__ import annotations

import logging

import pytest
from openapidoc.field_customization import FieldDoc, apply_field_doc, field_doc_for, parse_field_doc
from openapidoc.schema_generation import (
    GeneratorConfigError,
    SchemaFragment,
    SchemaGenerator,
    SchemaKind,
    ValueKind,
    schema_reference,
)

from sample_models import build_pet


def test_parse_compact_notation() -> None:
    doc = parse_field_doc("desc:'the name',ex:'a;b',required:'id;name'")

    assert doc == FieldDoc(description="the name", example="a;b", required=("id", "name"))


def test_parse_keeps_text_after_first_colon() -> None:
    assert parse_field_doc("desc:'at 10:30'").description == "at 10:30"


def test_parse_is_cached_per_text() -> None:
    assert parse_field_doc("desc:'x'") is parse_field_doc("desc:'x'")


def test_field_doc_for_accepts_records_mappings_and_strings() -> None:
    doc = FieldDoc(description="d")

    assert field_doc_for({}) is None
    assert field_doc_for({"openapi": doc}) is doc
    assert field_doc_for({"openapi": {"description": "d", "required": ["a"]}}) == FieldDoc(
        description="d", required=("a",)
    )
    assert field_doc_for({"openapi": "desc:d"}) == FieldDoc(description="d")


def test_field_doc_for_rejects_other_types() -> None:
    with pytest.raises(GeneratorConfigError):
        field_doc_for({"openapi": 42})


def test_description_override_always_wins() -> None:
    fragment = SchemaFragment(kind=SchemaKind.STRING, example="v", description="walker")

    result = apply_field_doc(ValueKind.STRING, FieldDoc(description="x"), fragment)

    assert result.description == "x"
    assert result.example == "v"
    assert fragment.description == "walker"


@pytest.mark.parametrize(
    ("kind", "schema_kind", "text", "expected"),
    [
        (ValueKind.STRING, SchemaKind.STRING, "first;last", "last"),
        (ValueKind.INTEGER, SchemaKind.INTEGER, "42", 42),
        (ValueKind.NUMBER, SchemaKind.NUMBER, "1.5", 1.5),
        (ValueKind.BOOLEAN, SchemaKind.BOOLEAN, "true", True),
        (ValueKind.BOOLEAN, SchemaKind.BOOLEAN, "0", False),
    ],
)
def test_example_override_is_coerced_by_kind(kind, schema_kind, text, expected) -> None:
    fragment = SchemaFragment.scalar(schema_kind, "original")

    result = apply_field_doc(kind, FieldDoc(example=text), fragment)

    assert result.example == expected


def test_sequence_example_override_splits_items() -> None:
    fragment = SchemaFragment.array(SchemaFragment.scalar(SchemaKind.STRING), example=["z"])

    result = apply_field_doc(ValueKind.SEQUENCE, FieldDoc(example="a;b"), fragment)

    assert result.example == ["a", "b"]


def test_unparsable_example_keeps_walker_example(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="openapidoc.schema")
    fragment = SchemaFragment.scalar(SchemaKind.INTEGER, 3)

    result = apply_field_doc(ValueKind.INTEGER, FieldDoc(example="many"), fragment)

    assert result.example == 3
    assert "many" in caplog.text


def test_required_replaces_list_only_for_object_like_fields() -> None:
    doc = FieldDoc(required=("a", "b"))
    reference = schema_reference("pkg.Owner")
    scalar = SchemaFragment.scalar(SchemaKind.STRING, "x")

    assert apply_field_doc(ValueKind.RECORD, doc, reference).required == ("a", "b")
    assert apply_field_doc(ValueKind.MAPPING, doc, SchemaFragment.object({})).required == (
        "a",
        "b",
    )
    assert apply_field_doc(ValueKind.STRING, doc, scalar) is scalar


def test_generator_applies_field_docs_from_metadata() -> None:
    out = SchemaGenerator().generate(build_pet())

    pet = out.schemas["sample_models.Pet"].properties
    assert pet["id"].example == 2
    assert pet["name"].description == "Pet name"
    assert pet["name"].example == "Rex"
    assert pet["owner"].ref == "#/components/schemas/sample_models.Customer"
    assert pet["owner"].description == "who owns it"
    assert pet["owner"].required == ("name", "home")


def test_documented_record_field_keeps_docs_next_to_reference() -> None:
    out = SchemaGenerator().generate(build_pet())

    owner = out.schemas["sample_models.Pet"].properties["owner"].to_openapi()

    assert owner == {
        "allOf": [{"$ref": "#/components/schemas/sample_models.Customer"}],
        "description": "who owns it",
        "required": ["name", "home"],
    }
