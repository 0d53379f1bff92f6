"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapidoc.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for openapidoc.
# Replace every <REQUIRED> placeholder before running the document command.
# Replace <OPTIONAL> placeholders only when your setup needs them.

generator:
  # Field metadata keys checked in order for the property name.
  tags:
    - json
  # schema_prefix: "<OPTIONAL>"
  # max_depth: 256

document:
  title: "<REQUIRED>"
  version: "<REQUIRED>"
  # description: "<OPTIONAL>"
  # servers:
  #   - url: "<OPTIONAL>"
  #     description: "<OPTIONAL>"

routes:
  # target is "module:attribute"; the attribute is an example value or a
  # zero-argument callable returning one.
  - method: "<REQUIRED>"
    path: "<REQUIRED>"
    # request:
    #   target: "<OPTIONAL>"
    #   content_type: "application/json"
    #   description: "<OPTIONAL>"
    #   required: true
    responses:
      "200":
        target: "<REQUIRED>"
        description: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
