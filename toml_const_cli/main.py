"""
toml-const-cli — CLI entrypoint.

Usage:
    toml-const-cli --help
    toml-const-cli init path/to/Cargo.toml
    python -m toml_const_cli.main init Cargo.toml --with-name app
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from toml_const_cli import __version__
from toml_const_cli.core.observability.logging_config import LogSettings, setup_logging
from toml_const_cli.core.use_cases.init import DEFAULT_CONFIG_PATH, DEFAULT_GENERATED_FILE_PATH


@click.group()
@click.version_option(version=__version__, prog_name="toml-const-cli")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only report errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """toml-const-cli — set up compile-time TOML constants for a Cargo package."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    setup_logging(LogSettings.from_cli(os.environ, debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.argument("manifest_path", type=click.Path(path_type=Path))
@click.option(
    "--with-name",
    "-w",
    default=None,
    help="Name prefix for the toml files. Uses the manifest package name by default.",
)
@click.option(
    "--config-path",
    "-c",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help=(
        "Configuration dir for toml files, relative to the root cargo manifest. "
        "The root manifest differs from MANIFEST_PATH when the package belongs "
        "to a workspace or is nested in another package."
    ),
)
@click.option(
    "--generated-file-path",
    "-g",
    default=DEFAULT_GENERATED_FILE_PATH,
    show_default=True,
    help="Path to the generated file, relative to MANIFEST_PATH.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def init(
    ctx: click.Context,
    manifest_path: Path,
    with_name: str | None,
    config_path: str,
    generated_file_path: str,
    as_json: bool,
) -> None:
    """Initialize a package with toml config boilerplate.

    MANIFEST_PATH is the package's Cargo.toml.

    Examples:

        toml-const-cli init Cargo.toml

        toml-const-cli init crates/app/Cargo.toml -w app -c config/
    """
    from toml_const_cli.core.use_cases.init import run_init

    result = run_init(
        manifest_path,
        with_name=with_name,
        config_path=config_path,
        generated_file_path=generated_file_path,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if ctx.obj.get("quiet", False):
        return

    assert result.env is not None
    click.secho(f"\n📦 {result.package_name}", fg="cyan", bold=True)
    click.echo(f"   Root:   {result.project_root}")
    click.echo(f"   Config: {result.cargo_config}")
    click.echo()
    for key, value in result.env.entries().items():
        click.echo(f"     {key} = {value}")
    click.echo()
    for path in result.boilerplate_files:
        click.secho("   ✓ ", fg="green", nl=False)
        click.echo(str(path))
    for path in result.ignore_files:
        click.secho("   ✓ ", fg="green", nl=False)
        click.echo(str(path))
    click.echo()


if __name__ == "__main__":
    cli()
