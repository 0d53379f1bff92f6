"""Registry of generated component schemas keyed by type name."""

from __future__ import annotations

from collections.abc import Iterator

from .schema_errors import DuplicateSchemaError
from .schema_models import SchemaFragment


class SchemaRegistry:
    """Map type names to resolved fragments and track names still being built.

    A name is either absent, in progress (its record is being walked further up
    the call stack) or resolved (its fragment is stored). Both states stop the
    walker from recursing into the name again, which is what terminates cycles.

    A child registry reads through to its parent but keeps its writes local
    until the owner merges them back with ``merge_missing``.
    """

    def __init__(self, parent: SchemaRegistry | None = None) -> None:
        self._parent = parent
        self._schemas: dict[str, SchemaFragment] = {}
        self._in_progress: set[str] = set()

    def child(self) -> SchemaRegistry:
        return SchemaRegistry(parent=self)

    def has(self, name: str) -> bool:
        if name in self._schemas:
            return True
        return self._parent is not None and self._parent.has(name)

    def get(self, name: str) -> SchemaFragment:
        if name in self._schemas:
            return self._schemas[name]
        if self._parent is not None:
            return self._parent.get(name)
        raise KeyError(name)

    def put(self, name: str, fragment: SchemaFragment) -> None:
        if self.has(name):
            raise DuplicateSchemaError(f"Schema {name} is already registered.")
        self._schemas[name] = fragment
        self._in_progress.discard(name)

    def begin(self, name: str) -> None:
        self._in_progress.add(name)

    def abandon(self) -> None:
        """Forget names still in progress after a walk failed part way."""
        self._in_progress.clear()

    def is_in_progress(self, name: str) -> bool:
        if name in self._in_progress:
            return True
        return self._parent is not None and self._parent.is_in_progress(name)

    def merge_missing(self, other: SchemaRegistry) -> list[str]:
        """Copy resolved entries of ``other`` that this registry does not know yet."""
        added = []
        for name, fragment in other.local_items():
            if self.has(name) or self.is_in_progress(name):
                continue
            self._schemas[name] = fragment
            added.append(name)
        return added

    def overwrite_from(self, other: SchemaRegistry) -> None:
        """Copy every local entry of ``other`` over this registry's local entries."""
        for name, fragment in other.local_items():
            self._schemas[name] = fragment

    def local_items(self) -> Iterator[tuple[str, SchemaFragment]]:
        return iter(list(self._schemas.items()))

    def names(self) -> list[str]:
        return list(self._schemas)

    def as_dict(self) -> dict[str, SchemaFragment]:
        return dict(self._schemas)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._schemas)
