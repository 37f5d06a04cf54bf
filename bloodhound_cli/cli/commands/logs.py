"""
Native Click implementation of the logs command.

Usage: bloodhound-cli logs <name> [--lines N]
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("logs")
@click.argument("name")
@click.option(
    "--lines",
    "-l",
    default="500",
    show_default=True,
    help="Number of lines to display (or 'all').",
)
@click.pass_obj
@handle_errors
@require_environment(require_files=False)
def logs(ctx: CliContext, name: str, lines: str) -> None:
    """Fetch logs for BloodHound services.

    NAME is "all" or a container name; the "bhce_" prefix is optional.

    \b
    Valid names are:
      * bloodhound
      * neo4j
      * postgres
    """
    if lines != "all" and not lines.isdigit():
        raise click.BadParameter("must be a number or 'all'", param_hint="--lines")
    ctx.presenter.print(f"[+] Fetching up to {lines} lines of logs for `{name}`...")
    for section in ctx.runtime.fetch_logs(name, lines):
        click.echo(section, nl=False)
