"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from form_schema_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from form_schema_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_generation_run,
    list_category_types,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="form-schema-generator")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress details.")
def cli(verbose: bool) -> None:
    """Derive form-renderer schemas from a generated configuration schema."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Write a starter generator configuration with the default categories."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON generator configuration",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Base JSON Schema to read instead of the configured schema_path",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory to write into instead of the configured output_dir",
)
def generate(config_path: str, schema_path: str | None, output_dir: str | None) -> None:
    """Generate one schema per discovered type and an index per category."""
    try:
        outcome = execute_generation_run(
            GenerationRequest(
                config_path=config_path,
                schema_path=schema_path,
                output_dir=output_dir,
            )
        )
    except GenerationError as exc:
        raise CliError(str(exc)) from exc

    for category in outcome.categories:
        click.echo(f"Generated {len(category.written)} schemas for {category.name}")
        for skipped in category.skipped:
            click.echo(f"  skipped {skipped}")
        for removed in category.removed:
            click.echo(f"  removed stale {removed.name}")
    click.echo(f"Output directory: {outcome.output_dir}")


@cli.command(name="list-types")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON generator configuration",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Base JSON Schema to read instead of the configured schema_path",
)
def list_types(config_path: str, schema_path: str | None) -> None:
    """Show which definitions each category would generate."""
    try:
        listings = list_category_types(
            GenerationRequest(config_path=config_path, schema_path=schema_path)
        )
    except GenerationError as exc:
        raise CliError(str(exc)) from exc

    for listing in listings:
        click.echo(f"{listing.category.name} ({len(listing.types)} types)")
        for discovered_type in listing.types:
            click.echo(f"  {discovered_type.key}: {discovered_type.display_name}")


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
