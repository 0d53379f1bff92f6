"""Helpers for OpenAPI components sections."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

COMPONENT_SECTIONS = ("schemas", "parameters", "headers", "requestBodies", "responses")

Components = dict[str, dict[str, Any]]


def empty_components() -> Components:
    return {section: {} for section in COMPONENT_SECTIONS}


def merge_components(target: Components, source: Mapping[str, Mapping[str, Any]]) -> Components:
    """Copy every entry of ``source`` into ``target``; entries of ``source`` win."""
    for section in COMPONENT_SECTIONS:
        target.setdefault(section, {}).update(source.get(section, {}))
    return target


def component_ref(section: str, name: str) -> dict[str, str]:
    return {"$ref": f"#/components/{section}/{name}"}
