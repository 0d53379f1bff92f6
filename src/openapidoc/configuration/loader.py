"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TAG_KEYS,
    Configuration,
    DocumentSettings,
    GeneratorSettings,
    PayloadTarget,
    RouteSettings,
    ServerSettings,
)

_HTTP_METHODS = ("GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH", "TRACE")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        generator=_parse_generator_section(parsed.get("generator")),
        document=_parse_document_section(parsed.get("document")),
        routes=_parse_routes_section(parsed.get("routes")),
    )


def _parse_generator_section(value: Any) -> GeneratorSettings:
    section = _optional_mapping(value, "generator")
    tags_raw = section.get("tags", list(DEFAULT_TAG_KEYS))
    if isinstance(tags_raw, str):
        tags_raw = [tags_raw]
    if not isinstance(tags_raw, Sequence):
        raise ConfigurationError("generator.tags must be a string or list of strings.")
    tag_keys = tuple(
        _require_non_empty_string(item, "generator.tags entries") for item in tags_raw
    )
    if not tag_keys:
        raise ConfigurationError("generator.tags must contain at least one tag key.")
    if len(set(tag_keys)) != len(tag_keys):
        raise ConfigurationError("generator.tags must not repeat a tag key.")

    prefix = _optional_string(section.get("schema_prefix"), "generator.schema_prefix") or ""
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "generator.max_depth"
    )
    return GeneratorSettings(tag_keys=tag_keys, schema_prefix=prefix, max_depth=max_depth)


def _parse_document_section(value: Any) -> DocumentSettings:
    section = _optional_mapping(value, "document")
    defaults = DocumentSettings()
    title = _optional_string(section.get("title"), "document.title") or defaults.title
    version = _optional_string(section.get("version"), "document.version") or defaults.version
    description = _optional_string(section.get("description"), "document.description")
    servers_raw = section.get("servers")
    if servers_raw is None:
        servers = defaults.servers
    else:
        if not isinstance(servers_raw, Sequence) or isinstance(servers_raw, str):
            raise ConfigurationError("document.servers must be a list.")
        servers = tuple(_parse_server(item) for item in servers_raw)
    return DocumentSettings(
        title=title,
        version=version,
        description=description if description is not None else defaults.description,
        servers=servers,
    )


def _parse_server(value: Any) -> ServerSettings:
    if isinstance(value, str):
        return ServerSettings(url=_require_non_empty_string(value, "document.servers entries"))
    section = _require_mapping(value, "document.servers entry")
    return ServerSettings(
        url=_require_non_empty_string(section.get("url"), "document.servers.url"),
        description=_optional_string(section.get("description"), "document.servers.description")
        or "",
    )


def _parse_routes_section(value: Any) -> tuple[RouteSettings, ...]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError("routes must be a list.")
    return tuple(_parse_route(item, index) for index, item in enumerate(value))


def _parse_route(value: Any, index: int) -> RouteSettings:
    label = f"routes[{index}]"
    section = _require_mapping(value, label)
    method = _require_non_empty_string(section.get("method"), f"{label}.method").upper()
    if method not in _HTTP_METHODS:
        raise ConfigurationError(f"{label}.method '{method}' is not an HTTP method.")
    path = _require_non_empty_string(section.get("path"), f"{label}.path")
    if not path.startswith("/"):
        raise ConfigurationError(f"{label}.path must start with '/'.")

    request_raw = section.get("request")
    request = None
    request_required = False
    if request_raw is not None:
        request = _parse_payload(request_raw, f"{label}.request")
        request_required = bool(_require_mapping(request_raw, f"{label}.request").get("required"))

    responses_raw = _require_mapping(section.get("responses"), f"{label}.responses")
    if not responses_raw:
        raise ConfigurationError(f"{label}.responses must define at least one status code.")
    responses = tuple(
        (str(code).upper(), _parse_payload(payload, f"{label}.responses.{code}"))
        for code, payload in responses_raw.items()
    )
    return RouteSettings(
        method=method,
        path=path,
        request=request,
        request_required=request_required,
        responses=responses,
    )


def _parse_payload(value: Any, label: str) -> PayloadTarget:
    section = _require_mapping(value, label)
    target = _require_non_empty_string(section.get("target"), f"{label}.target")
    if ":" not in target:
        raise ConfigurationError(f"{label}.target must look like 'module:attribute'.")
    content_type = (
        _optional_string(section.get("content_type"), f"{label}.content_type")
        or "application/json"
    )
    return PayloadTarget(
        target=target,
        content_type=content_type,
        description=_optional_string(section.get("description"), f"{label}.description") or "",
        schema_name=_optional_string(section.get("schema_name"), f"{label}.schema_name"),
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
