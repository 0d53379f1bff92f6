"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TAG_KEYS = ("json",)
DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class GeneratorSettings:
    """Options of the schema generator."""

    tag_keys: tuple[str, ...] = DEFAULT_TAG_KEYS
    schema_prefix: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ServerSettings:
    """One entry of the document's servers list."""

    url: str
    description: str = ""


@dataclass(frozen=True)
class DocumentSettings:
    """Document-level metadata rendered into info and servers."""

    title: str = "My Server"
    version: str = "v0.0.0"
    description: str = "Description server"
    servers: tuple[ServerSettings, ...] = (
        ServerSettings(url="https://example.com/", description="This is example URL"),
    )


@dataclass(frozen=True)
class PayloadTarget:
    """Import reference of an example value used as a request or response body."""

    target: str
    content_type: str = "application/json"
    description: str = ""
    schema_name: str | None = None


@dataclass(frozen=True)
class RouteSettings:
    """One operation of the assembled document."""

    method: str
    path: str
    request: PayloadTarget | None
    request_required: bool
    responses: tuple[tuple[str, PayloadTarget], ...]


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    generator: GeneratorSettings = GeneratorSettings()
    document: DocumentSettings = DocumentSettings()
    routes: tuple[RouteSettings, ...] = field(default_factory=tuple)
