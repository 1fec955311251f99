"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from schema_builder.configuration import ConfigurationError, load_definition, load_instance
from schema_builder.serialization import to_json
from schema_builder.validation import SchemaCheckError, validate_instance


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-builder")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Build JSON Schema documents and validate sample payloads against them."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="render")
@click.option(
    "--definition",
    "definition_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON schema definition file",
)
@click.option(
    "--indent",
    required=False,
    type=click.IntRange(min=0),
    help="Indent the rendered document by this many spaces",
)
def render(definition_path: str, indent: int | None) -> None:
    """Print the canonical JSON Schema document for a definition file."""
    try:
        schema = load_definition(definition_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(to_json(schema, indent=indent))


@cli.command(name="validate")
@click.option(
    "--definition",
    "definition_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON schema definition file",
)
@click.option(
    "--instance",
    "instance_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON sample instance to validate",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for reported key errors",
)
def validate(definition_path: str, instance_path: str, output_format: str) -> None:
    """Validate a sample instance against a schema definition file."""
    try:
        schema = load_definition(definition_path)
        instance = load_instance(instance_path)
        key_errors = validate_instance(schema, instance)
    except (ConfigurationError, SchemaCheckError) as exc:
        raise CliError(str(exc)) from exc

    if output_format == "json":
        payload = [
            {"path": error.property_path, "value": error.invalid_value, "message": error.message}
            for error in key_errors
        ]
        click.echo(json.dumps(payload, ensure_ascii=False, default=str))
    elif not key_errors:
        click.echo("valid")
    else:
        for error in key_errors:
            click.echo(f"{error.property_path}: {error.message}")

    if key_errors:
        raise CliError(f"{len(key_errors)} validation error(s) found.")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="schema-builder", standalone_mode=False)
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
