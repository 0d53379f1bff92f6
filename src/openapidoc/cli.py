"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path

import click

from openapidoc.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
    write_placeholder_configuration,
)
from openapidoc.document_assembly import (
    SUPPORTED_FORMATS,
    DocumentAssemblyError,
    PayloadTargetError,
    build_configured_document,
    load_payload,
    render_document,
    write_document,
)
from openapidoc.schema_generation import SchemaGenerationError, SchemaGenerator


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s %(levelname)s %(message)s"
        )


def _ensure_working_directory_importable() -> None:
    # console scripts do not put the working directory on the import path
    working_directory = os.getcwd()
    if working_directory not in sys.path:
        sys.path.insert(0, working_directory)


def _emit(document: dict, output_path: str | None, output_format: str | None) -> None:
    if output_path is None:
        click.echo(render_document(document, output_format or "yaml"), nl=False)
        return
    click.echo(str(write_document(document, output_path, output_format)))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapidoc")
def cli() -> None:
    """OpenAPI 3 schema generator for example values."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="schema")
@click.option(
    "--target",
    required=True,
    help="Example value as module:attribute; callables are called without arguments",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration providing generator settings",
)
@click.option("--prefix", required=False, help="Prefix prepended to every schema name")
@click.option(
    "--tag",
    "tags",
    multiple=True,
    help="Field metadata key used for property names; repeat to set the lookup order",
)
@click.option("--format", "output_format", type=click.Choice(SUPPORTED_FORMATS), default=None)
@click.option("--output", "output_path", required=False, type=click.Path(path_type=str))
@click.option("--verbose", is_flag=True, default=False, help="Log the schema walk to stderr.")
def generate_schema(  # pylint: disable=too-many-arguments
    target: str,
    config_path: str | None,
    prefix: str | None,
    tags: tuple[str, ...],
    output_format: str | None,
    output_path: str | None,
    verbose: bool,
) -> None:
    """Generate component schemas for one example value."""
    _configure_logging(verbose)
    _ensure_working_directory_importable()
    try:
        settings = (
            load_configuration(config_path).generator if config_path else GeneratorSettings()
        )
        if prefix is not None:
            settings = dataclasses.replace(settings, schema_prefix=prefix)
        if tags:
            settings = dataclasses.replace(settings, tag_keys=tuple(tags))
        out = SchemaGenerator(settings).generate(load_payload(target))
    except (ConfigurationError, PayloadTargetError, SchemaGenerationError) as exc:
        raise CliError(str(exc)) from exc

    document = {
        "x-root-schema": out.parent_schema_name,
        "components": {"schemas": out.components()},
    }
    try:
        _emit(document, output_path, output_format)
    except OSError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="document")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file with routes",
)
@click.option("--format", "output_format", type=click.Choice(SUPPORTED_FORMATS), default=None)
@click.option("--output", "output_path", required=False, type=click.Path(path_type=str))
@click.option("--verbose", is_flag=True, default=False, help="Log the schema walk to stderr.")
def generate_document(
    config_path: str, output_format: str | None, output_path: str | None, verbose: bool
) -> None:
    """Assemble a full OpenAPI document from the configured routes."""
    _configure_logging(verbose)
    _ensure_working_directory_importable()
    try:
        configuration: Configuration = load_configuration(config_path)
        if not configuration.routes:
            raise CliError(f"No routes configured in {Path(config_path).resolve()}")
        document = build_configured_document(configuration)
    except (
        ConfigurationError,
        PayloadTargetError,
        DocumentAssemblyError,
        SchemaGenerationError,
    ) as exc:
        raise CliError(str(exc)) from exc

    try:
        _emit(document, output_path, output_format)
    except OSError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
