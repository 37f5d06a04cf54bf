"""
Click decorators for bloodhound-cli commands.

- handle_errors: the single place where internal errors become CLI exits
- require_environment: runs the capability prober before a command
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import BloodHoundCliError

if TYPE_CHECKING:
    from .context import CliContext

F = TypeVar("F", bound=Callable[..., Any])


def _context_from(args: tuple, kwargs: dict, decorator: str) -> CliContext:
    ctx_maybe: Any = args[0] if args else kwargs.get("ctx")
    if ctx_maybe is None:
        raise click.ClickException(
            "Internal error: CliContext not available. "
            f"Ensure @click.pass_obj is applied before @{decorator}."
        )
    return ctx_maybe


def handle_errors(f: F) -> F:
    """Decorator turning BloodHoundCliError into a click error exit.

    The message is printed as ``Error: <message>`` and the process exits
    with the exception's exit code. Apply it directly under
    ``@click.pass_obj`` so errors from the other decorators are caught.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except BloodHoundCliError as e:
            exc = click.ClickException(e.message)
            exc.exit_code = e.exit_code
            raise exc from e

    return wrapper  # type: ignore[return-value]


def require_environment(require_files: bool = True) -> Callable[[F], F]:
    """Decorator factory that validates the host before a command runs.

    Runs the capability prober and stores the chosen compose invocation on
    the context. Only then is the YAML file resolved: with ``require_files``
    (the default) it must already exist; install and uninstall pass False
    because they create or remove it.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        @require_environment()
        def up(ctx: CliContext):
            ...
    """

    def decorator(f: F) -> F:
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ctx = _context_from(args, kwargs, "require_environment")
            ctx.capability = ctx.prober.evaluate()
            if require_files:
                ctx.service_files.ensure_exists(ctx.service_file())
            return f(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
