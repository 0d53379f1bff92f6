"""JSON and YAML rendering of assembled documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

SUPPORTED_FORMATS = ("yaml", "json")


class _NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data: Any) -> bool:
        return True


def render_document(document: Mapping[str, Any], output_format: str = "yaml") -> str:
    """Serialize ``document`` as YAML or JSON text."""
    if output_format == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.dump(
            _plain(document),
            Dumper=_NoAliasDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            indent=2,
        )
    raise ValueError(f"Unsupported output format: {output_format}")


def write_document(
    document: Mapping[str, Any], output_path: Path | str, output_format: str | None = None
) -> Path:
    """Write ``document`` to ``output_path``; the format defaults to the file suffix."""
    destination = Path(output_path)
    if output_format is None:
        output_format = "json" if destination.suffix.lower() == ".json" else "yaml"
    text = render_document(document, output_format)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    return destination.resolve()


def _plain(value: Any) -> Any:
    # SafeDumper only represents exact builtin containers
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
