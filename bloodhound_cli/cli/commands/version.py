"""
Native Click implementation of the version command.

Usage: bloodhound-cli version
"""

from __future__ import annotations

import click

from ...version import BUILD_DATE, NAME, __version__
from ..context import CliContext
from ..decorators import handle_errors


def local_version() -> str:
    """``BloodHound CLI v1.2.3 (build date)`` for the installed package."""
    text = f"{NAME} v{__version__.lstrip('v')}"
    if BUILD_DATE:
        text = f"{text} ({BUILD_DATE})"
    return text


@click.command("version")
@click.pass_obj
@handle_errors
def version(ctx: CliContext) -> None:
    """Display the local version and the latest published release.

    If the latest release cannot be looked up the error is reported and no
    comparison table is printed.
    """
    local = local_version()
    ctx.presenter.print(f"[+] {local}")

    latest = ctx.release_client.latest()
    ctx.presenter.print_table(
        ["", "VERSION", "LINK"],
        [
            ["Local", local, ""],
            ["Latest", latest.describe(NAME), latest.html_url],
        ],
    )
