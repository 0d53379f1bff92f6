"""Schema registry tests."""

from __future__ import annotations

import pytest
from openapidoc.schema_generation import (
    DuplicateSchemaError,
    SchemaFragment,
    SchemaKind,
    SchemaRegistry,
)

_OBJECT = SchemaFragment.object({"name": SchemaFragment.scalar(SchemaKind.STRING, "x")})


def test_put_resolves_name_and_clears_in_progress_marker() -> None:
    registry = SchemaRegistry()
    registry.begin("pkg.Pet")

    assert registry.is_in_progress("pkg.Pet")
    assert not registry.has("pkg.Pet")

    registry.put("pkg.Pet", _OBJECT)

    assert registry.has("pkg.Pet")
    assert not registry.is_in_progress("pkg.Pet")
    assert registry.get("pkg.Pet") is _OBJECT
    assert "pkg.Pet" in registry


def test_put_never_overwrites_a_resolved_name() -> None:
    registry = SchemaRegistry()
    registry.put("pkg.Pet", _OBJECT)

    with pytest.raises(DuplicateSchemaError):
        registry.put("pkg.Pet", SchemaFragment.object({}))

    assert registry.get("pkg.Pet") is _OBJECT


def test_get_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        SchemaRegistry().get("missing")


def test_child_reads_through_parent_but_keeps_writes_local() -> None:
    parent = SchemaRegistry()
    parent.put("pkg.Owner", _OBJECT)
    parent.begin("pkg.Root")
    child = parent.child()

    child.put("pkg.Pet", _OBJECT)

    assert child.has("pkg.Owner")
    assert child.is_in_progress("pkg.Root")
    assert child.has("pkg.Pet")
    assert not parent.has("pkg.Pet")
    assert child.names() == ["pkg.Pet"]


def test_child_cannot_shadow_a_parent_entry() -> None:
    parent = SchemaRegistry()
    parent.put("pkg.Owner", _OBJECT)

    with pytest.raises(DuplicateSchemaError):
        parent.child().put("pkg.Owner", SchemaFragment.object({}))


def test_merge_missing_skips_known_and_in_progress_names() -> None:
    target = SchemaRegistry()
    target.put("pkg.Known", _OBJECT)
    target.begin("pkg.Building")
    source = SchemaRegistry()
    replacement = SchemaFragment.object({})
    for name in ("pkg.Known", "pkg.Building", "pkg.New"):
        source.put(name, replacement)

    added = target.merge_missing(source)

    assert added == ["pkg.New"]
    assert target.get("pkg.Known") is _OBJECT
    assert not target.has("pkg.Building")
    assert target.get("pkg.New") is replacement


def test_overwrite_from_replaces_local_entries() -> None:
    folded = SchemaRegistry()
    folded.put("pkg.Pet", _OBJECT)
    later = SchemaRegistry()
    replacement = SchemaFragment.object({})
    later.put("pkg.Pet", replacement)

    folded.overwrite_from(later)

    assert folded.get("pkg.Pet") is replacement
    assert len(folded) == 1


def test_abandon_forgets_in_progress_names_but_keeps_resolved_ones() -> None:
    registry = SchemaRegistry()
    registry.put("pkg.Known", _OBJECT)
    registry.begin("pkg.Building")

    registry.abandon()

    assert not registry.is_in_progress("pkg.Building")
    assert registry.has("pkg.Known")
