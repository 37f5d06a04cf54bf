"""
Native Click implementation of the update command.

Usage: bloodhound-cli update
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("update")
@click.pass_obj
@handle_errors
@require_environment()
def update(ctx: CliContext) -> None:
    """Pull the latest BloodHound container images.

    Bring the containers down and up afterwards to run the new images.
    """
    ctx.presenter.print("[+] Checking for BloodHound image updates...")
    ctx.orchestrator().pull(ctx.service_file())
