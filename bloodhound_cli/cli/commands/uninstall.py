"""
Native Click implementation of the uninstall command.

Usage: bloodhound-cli uninstall
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("uninstall")
@click.pass_obj
@handle_errors
@require_environment(require_files=False)
def uninstall(ctx: CliContext) -> None:
    """Remove all BloodHound containers, images, and volume data.

    \b
    The command performs the following steps:
      * Brings down running containers and deletes them
      * Deletes the container images
      * Deletes all BloodHound volumes and data
      * Optionally deletes the config directory

    This command is irreversible.
    """
    ctx.presenter.print("[+] Starting BloodHound environment removal")
    if not ctx.orchestrator().uninstall(ctx.service_file()):
        ctx.presenter.print("Aborted.")
