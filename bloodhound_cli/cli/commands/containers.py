"""
Native Click implementation of the containers command group.

Usage: bloodhound-cli containers {build|up|down|start|stop|restart|running}
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors, require_environment


@click.group("containers")
def containers() -> None:
    """Manage BloodHound containers and services."""


@containers.command("build")
@click.pass_obj
@handle_errors
@require_environment()
def build(ctx: CliContext) -> None:
    """Rebuild the BloodHound containers (only needed for updates).

    Brings the containers down, builds them and brings them back up.
    """
    ctx.presenter.print("[+] Starting build")
    ctx.orchestrator().upgrade(ctx.service_file())


@containers.command("up")
@click.pass_obj
@handle_errors
@require_environment()
def up(ctx: CliContext) -> None:
    """Create and start all BloodHound containers ("docker compose up -d")."""
    ctx.presenter.print("[+] Bringing up the BloodHound environment")
    ctx.orchestrator().up(ctx.service_file())


@containers.command("down")
@click.option("--volumes", is_flag=True, help="Delete data volumes when containers come down.")
@click.pass_obj
@handle_errors
@require_environment()
def down(ctx: CliContext, volumes: bool) -> None:
    """Stop all BloodHound services and remove the containers ("docker compose down")."""
    ctx.presenter.print("[+] Bringing down the BloodHound environment")
    ctx.orchestrator().down(ctx.service_file(), volumes=volumes)


@containers.command("start")
@click.pass_obj
@handle_errors
@require_environment()
def start(ctx: CliContext) -> None:
    """Start all stopped BloodHound services ("docker compose start")."""
    ctx.presenter.print("[+] Starting the BloodHound environment")
    ctx.orchestrator().start(ctx.service_file())


@containers.command("stop")
@click.pass_obj
@handle_errors
@require_environment()
def stop(ctx: CliContext) -> None:
    """Stop all BloodHound services without removing them ("docker compose stop")."""
    ctx.presenter.print("[+] Stopping the BloodHound environment")
    ctx.orchestrator().stop(ctx.service_file())


@containers.command("restart")
@click.pass_obj
@handle_errors
@require_environment()
def restart(ctx: CliContext) -> None:
    """Restart all BloodHound services ("docker compose restart")."""
    ctx.presenter.print("[+] Restarting the BloodHound environment")
    ctx.orchestrator().restart(ctx.service_file())


@containers.command("running")
@click.pass_obj
@handle_errors
@require_environment(require_files=False)
def running(ctx: CliContext) -> None:
    """List the running BloodHound containers."""
    found = ctx.runtime.running()
    if not found:
        ctx.presenter.print("[+] No BloodHound containers are running")
        return
    ctx.presenter.print_table(
        ["CONTAINER ID", "IMAGE", "STATUS", "PORTS", "NAME"],
        [
            [c.short_id, c.image, c.status, ", ".join(str(p) for p in c.ports), c.name]
            for c in found
        ],
    )
