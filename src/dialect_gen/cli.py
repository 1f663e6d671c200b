"""Click CLI entry point for dialect-gen."""

from __future__ import annotations

from pathlib import Path

import click

from dialect_gen import __version__
from dialect_gen.config import is_initialized, resolve_config, save_config
from dialect_gen.errors import DialectGenError
from dialect_gen.exporters import export_json, export_yaml
from dialect_gen.generator import generate_parser_impls, read_license_text
from dialect_gen.logging import configure_logging
from dialect_gen.models import GeneratorConfig
from dialect_gen.traverser import DialectTraverser

_DIRECTORY = click.Path(exists=True, file_okay=False, path_type=Path)


@click.group()
@click.version_option(version=__version__, prog_name="dialect-gen")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Minimum level of log events written to stderr",
)
@click.option("--json-logs", is_flag=True, default=False, help="Write log events as JSON lines")
def cli(log_level: str, json_logs: bool) -> None:
    """Extract and merge grammar productions for SQL dialects."""
    configure_logging(level=log_level, json_format=json_logs)


@cli.command()
@click.argument("root", type=_DIRECTORY)
def init(root: Path) -> None:
    """Write the default configuration for a grammar root directory."""
    if is_initialized(root):
        click.echo("Warning: Configuration already exists. Leaving it unchanged.")
        return
    path = save_config(GeneratorConfig(), root)
    click.echo(f"Config:  {path}")


@cli.command()
@click.argument("root", type=_DIRECTORY)
@click.argument("dialect", type=_DIRECTORY)
@click.option(
    "--format", "fmt", type=click.Choice(["text", "json", "yaml"]), default="text"
)
@click.pass_context
def extract(ctx: click.Context, root: Path, dialect: Path, fmt: str) -> None:
    """Print the merged productions of DIALECT, inherited from ROOT."""
    try:
        config = resolve_config(root)
        traverser = DialectTraverser(
            root, dialect, config=config, license_text=read_license_text(root, config)
        )
        productions = traverser.extract_productions()
    except DialectGenError as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)
        return

    if fmt == "json":
        click.echo(export_json(productions))
    elif fmt == "yaml":
        click.echo(export_yaml(productions), nl=False)
    else:
        for name, text in productions.items():
            click.echo(f"{name}={text}\n")


@cli.command()
@click.argument("root", type=_DIRECTORY)
@click.argument("dialect", type=_DIRECTORY)
@click.option(
    "--output",
    "output_file",
    default=None,
    help="Output path relative to DIALECT (defaults to the configured output_file)",
)
@click.pass_context
def generate(ctx: click.Context, root: Path, dialect: Path, output_file: str | None) -> None:
    """Write the merged parserImpls file for DIALECT."""
    try:
        path = generate_parser_impls(root, dialect, output_file=output_file)
    except DialectGenError as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)
        return
    click.echo(f"Wrote: {path}")
