"""
Native Click implementation of the check command.

Usage: bloodhound-cli check
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.command("check")
@click.pass_obj
@handle_errors
@require_environment(require_files=False)
def check(ctx: CliContext) -> None:
    """Evaluate the Docker environment and download the YAML files, as needed.

    Run this before or after `install` to make sure the required commands
    are on the PATH and the YAML files are in the config directory. If a YAML
    file already exists you are asked before it is replaced.
    """
    ctx.presenter.print("[+] Checking for the Docker YAML files...")
    ctx.service_files.fetch()
    ctx.presenter.print_success("[+] Environment checks are complete!")
