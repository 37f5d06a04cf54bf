"""
Click-based CLI for bloodhound-cli.

Usage:
    from bloodhound_cli.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..version import __version__
from .context import CliContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bloodhound-cli")
@click.option(
    "--file",
    "-f",
    "file_override",
    type=click.Path(path_type=str),
    default=None,
    help="Override the YAML file in the configured data directory and use a "
    "different YAML file for the container commands.",
)
@click.pass_context
def cli(ctx: click.Context, file_override: str | None) -> None:
    """A command line interface for managing BloodHound.

    BloodHound CLI manages BloodHound and its associated containers and
    services. Commands are grouped by their use.

    \b
    Getting started:
        bloodhound-cli check       Check Docker and download the YAML files
        bloodhound-cli install     Pull the images and start BloodHound

    \b
    Day to day:
        bloodhound-cli containers  Start, stop, rebuild the containers
        bloodhound-cli logs        Show container logs
        bloodhound-cli config      View or change the configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    if not isinstance(ctx.obj, CliContext):
        ctx.obj = CliContext.create(file_override=file_override)
    elif file_override:
        ctx.obj.file_override = Path(file_override)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "CliContext",
    "__version__",
    "cli",
    "register_commands",
]
