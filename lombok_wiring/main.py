"""
lombok-wiring — CLI entrypoint.

Usage:
    lombok-wiring --help
    lombok-wiring configure [--json]
    lombok-wiring config check [--json]
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from lombok_wiring import __version__
from lombok_wiring.core.observability.logging_config import resolve_level, setup_logging_from_env

if TYPE_CHECKING:
    from lombok_wiring.core.use_cases.config_check import ConfigCheckResult
    from lombok_wiring.core.use_cases.configure import ConfigureResult


def _emit_json(data: dict, ok: bool) -> None:
    click.echo(json.dumps(data, indent=2))
    sys.exit(0 if ok else 1)


def _echo_warnings(warnings: list[str]) -> None:
    if not warnings:
        return
    click.echo()
    click.secho("⚠️  Warnings:", fg="yellow")
    for warning in warnings:
        click.echo(f"   • {warning}")


@click.group()
@click.version_option(version=__version__, prog_name="lombok-wiring")
@click.option("--verbose", "-v", is_flag=True, help="Show what gets wired and why.")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors and the wiring summary.")
@click.option("--debug", is_flag=True, help="Debug logging, including lombok config output.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to build.yml (default: nearest one upward from cwd).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """lombok-wiring — wire Lombok into every source set of a build."""
    ctx.obj = {
        "verbose": verbose,
        "quiet": quiet,
        "config_path": Path(config_path) if config_path else None,
    }
    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


# ── configure ───────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def configure(ctx: click.Context, as_json: bool) -> None:
    """Configure the build and show the resulting Lombok wiring."""
    from lombok_wiring.core.use_cases.configure import run_configure

    result = run_configure(config_path=ctx.obj["config_path"])
    if as_json:
        _emit_json(result.to_dict(), result.ok)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    _print_configure(result, quiet=ctx.obj["quiet"], verbose=ctx.obj["verbose"])


def _print_configure(result: ConfigureResult, quiet: bool, verbose: bool) -> None:
    if not quiet:
        click.secho(f"\n📋 {result.project_name}", fg="cyan", bold=True)
        click.echo(f"   Plugins: {', '.join(result.plugins)}\n")

    click.secho(f"   Delombok tasks: {len(result.delombok_tasks)}", bold=True)
    for task in result.delombok_tasks:
        encoding = f" [{task['encoding']}]" if task["encoding"] else ""
        click.echo(f"     • {task['name']}{encoding}  → {task['target']}")
        if verbose:
            click.echo(f"       {' '.join(task['arguments'])}")

    if result.dependencies and not quiet:
        click.secho("\n   Dependencies:", bold=True)
        for configuration, notations in result.dependencies.items():
            for notation in notations:
                click.echo(f"     • {configuration}: {notation}")

    _echo_warnings(result.warnings)
    click.echo()


# ── config check ────────────────────────────────────────────────


@cli.group()
def config() -> None:
    """build.yml commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate build.yml without configuring the build."""
    from lombok_wiring.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj["config_path"])
    if as_json:
        _emit_json(result.to_dict(), result.valid)

    _print_check(result)
    if not result.valid:
        sys.exit(1)


def _print_check(result: ConfigCheckResult) -> None:
    if result.valid and result.descriptor is not None:
        descriptor = result.descriptor
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Project: {descriptor.name}")
        click.echo(f"   Plugins: {', '.join(descriptor.plugins) or '(none)'}")
        click.echo(f"   Source sets: {len(descriptor.source_sets)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for error in result.errors:
            click.echo(f"   • {error}")

    _echo_warnings(result.warnings)
    click.echo()


if __name__ == "__main__":
    cli()
