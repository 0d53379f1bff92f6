"""Configured document assembly integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openapidoc.configuration import load_configuration
from openapidoc.document_assembly import (
    PayloadTargetError,
    build_configured_document,
    load_payload,
    request_name,
)
from sample_models import ROOT_ANIMAL, Animal, Toy


def test_load_payload_returns_attribute_value() -> None:
    assert load_payload("sample_models:ROOT_ANIMAL") is ROOT_ANIMAL


def test_load_payload_calls_factories_but_not_classes() -> None:
    assert isinstance(load_payload("sample_models:build_animal"), Animal)
    assert load_payload("sample_models:Toy") is Toy


def test_load_payload_follows_dotted_attributes() -> None:
    assert load_payload("sample_models:Color.RED").value == "red"


@pytest.mark.parametrize(
    ("target", "message"),
    [
        ("no-colon", "must look like"),
        ("sample_models:", "must look like"),
        ("missing_module_for_tests:x", "Cannot import module"),
        ("sample_models:nothing_here", "has no attribute"),
    ],
)
def test_load_payload_errors(target: str, message: str) -> None:
    with pytest.raises(PayloadTargetError, match=message):
        load_payload(target)


def test_build_configured_document_from_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
generator:
  schema_prefix: api.
document:
  title: Pets
  version: 1.0.0
routes:
  - method: put
    path: /pets
    request:
      target: "sample_models:build_pet"
      description: new pet
      required: true
    responses:
      200:
        target: "sample_models:build_pet"
        description: stored pet
      default:
        target: "sample_models:build_animal"
        schema_name: Problem
""",
        encoding="utf-8",
    )

    document = build_configured_document(load_configuration(config_path))

    name = request_name("PUT", "/pets")
    operation = document["paths"]["/pets"]["put"]
    assert set(operation["responses"]) == {"200", "DEFAULT"}
    components = document["components"]
    assert components["requestBodies"][name]["description"] == "new pet"
    assert components["requestBodies"][name]["required"] is True
    assert components["responses"][f"{name}-200"]["description"] == "stored pet"
    assert "api.sample_models.Pet" in components["schemas"]
    assert components["schemas"]["Problem"] == components["schemas"]["api.sample_models.Animal"]
