"""
Click command implementations for bloodhound-cli.

Each module corresponds to a command (e.g. install.py implements
'bloodhound-cli install'). Commands are registered with the main group by
register_commands() in bloodhound_cli.cli.
"""

from .check import check
from .config import config
from .containers import containers
from .install import install
from .logs import logs
from .reset import resetpwd
from .uninstall import uninstall
from .update import update
from .version import version

COMMANDS = [
    check,
    config,
    containers,
    install,
    logs,
    resetpwd,
    uninstall,
    update,
    version,
]

__all__ = [
    "COMMANDS",
    "check",
    "config",
    "containers",
    "install",
    "logs",
    "resetpwd",
    "uninstall",
    "update",
    "version",
]
