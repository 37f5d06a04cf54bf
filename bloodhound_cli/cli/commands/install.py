"""
Native Click implementation of the install command.

Usage: bloodhound-cli install
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("install")
@click.pass_obj
@handle_errors
@require_environment(require_files=False)
def install(ctx: CliContext) -> None:
    """Pull the images and perform first-time setup of BloodHound.

    \b
    The command performs the following steps:
      * Downloads the YAML files into the config directory (asks before overwriting)
      * Pulls the container images
      * Starts the containers with a default admin user and a random password

    This only needs to be run once.
    """
    ctx.presenter.print("[+] Starting BloodHound environment installation")
    ctx.orchestrator().install(ctx.file_override)
