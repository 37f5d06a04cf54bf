"""
Native Click implementation of the resetpwd command.

Usage: bloodhound-cli resetpwd
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("resetpwd")
@click.pass_obj
@handle_errors
@require_environment()
def resetpwd(ctx: CliContext) -> None:
    """Reset the default admin password.

    \b
    The command performs the following steps:
      * Brings down any running containers
      * Generates a new password and saves it to the config file
      * Brings the containers back up with "bhe_recreate_default_admin" set
        so the admin account is recreated

    NOTE: requires BloodHound >= v7.1.0.

    WARNING: this wipes all user data for the default admin user.
    """
    ctx.presenter.print("[+] Resetting admin password")
    ctx.orchestrator().reset_admin_password(ctx.service_file())
