"""Document writer tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from openapidoc.document_assembly import render_document, write_document

_DOCUMENT = {
    "openapi": "3.0.3",
    "paths": {"/b": {}, "/a": {}},
    "components": {"schemas": {"S": {"type": "object", "required": ("x",)}}},
}


def test_render_yaml_keeps_key_order_and_plain_containers() -> None:
    text = render_document(_DOCUMENT, "yaml")

    assert text.index("/b") < text.index("/a")
    assert "&id" not in text
    assert "!!python" not in text
    assert yaml.safe_load(text)["components"]["schemas"]["S"]["required"] == ["x"]


def test_render_yaml_does_not_emit_aliases_for_shared_objects() -> None:
    shared = {"type": "string"}
    text = render_document({"a": shared, "b": shared}, "yaml")

    assert "*id" not in text
    assert yaml.safe_load(text) == {"a": shared, "b": shared}


def test_render_json_is_indented_with_trailing_newline() -> None:
    text = render_document(_DOCUMENT, "json")

    assert text.endswith("}\n")
    assert json.loads(text)["openapi"] == "3.0.3"
    assert '\n  "openapi"' in text


def test_render_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        render_document(_DOCUMENT, "xml")


@pytest.mark.parametrize(
    ("filename", "loader"), [("out.json", json.loads), ("out.yaml", yaml.safe_load)]
)
def test_write_document_picks_format_from_suffix(tmp_path: Path, filename: str, loader) -> None:
    destination = tmp_path / "nested" / filename

    written = write_document(_DOCUMENT, destination)

    assert written == destination.resolve()
    assert loader(destination.read_text(encoding="utf-8"))["openapi"] == "3.0.3"


def test_write_document_explicit_format_overrides_suffix(tmp_path: Path) -> None:
    destination = tmp_path / "out.yaml"

    write_document(_DOCUMENT, destination, "json")

    assert json.loads(destination.read_text(encoding="utf-8"))["openapi"] == "3.0.3"
