"""
Native Click implementation of the config command.

Usage: bloodhound-cli config [get|set] [key] [value]
"""

from __future__ import annotations

import click

from ..context import CliContext
from ..decorators import handle_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """Display or adjust the configuration.

    Without a subcommand, prints every setting from bloodhound.config.json
    (including defaults and environment overrides).

    \b
    Examples:

        bloodhound-cli config                          # Show everything

        bloodhound-cli config get default_password     # Get a value

        bloodhound-cli config set log_level DEBUG      # Set a value
    """
    if ctx.invoked_subcommand is None:
        _display(ctx.obj)


@handle_errors
def _display(ctx: CliContext) -> None:
    ctx.presenter.print("[+] Current configuration and available variables:")
    ctx.presenter.print(ctx.store.dump())


@config.command("get")
@click.argument("keys", nargs=-1, required=True)
@click.pass_obj
@handle_errors
def config_get_cmd(ctx: CliContext, keys: tuple[str, ...]) -> None:
    """Get one or more configuration values.

    \b
    Arguments:

        KEYS    Config keys to print (e.g. bind_addr default_password)
    """
    for entry in ctx.store.get_many(keys):
        ctx.presenter.print(f"{entry.key} = {entry.display_value()}")


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@handle_errors
def config_set_cmd(ctx: CliContext, key: str, value: str) -> None:
    """Set a configuration value.

    Quote the value if it contains spaces, for example:
    bloodhound-cli config set default_admin.principal_name "bloodhound"

    \b
    Arguments:

        KEY    The config key to set

        VALUE  The value to set ("true"/"false" are stored as booleans)
    """
    ctx.store.set(key, value)
    ctx.presenter.print_success(
        "[+] Configuration successfully updated. "
        "Bring containers down and up for changes to take effect."
    )
