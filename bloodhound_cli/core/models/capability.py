"""
Host capability model.
"""

from __future__ import annotations

from .base import ImmutableModel

COMPOSE_PLUGIN = "plugin"
COMPOSE_LEGACY = "legacy"


class CapabilityState(ImmutableModel):
    """Which compose invocation to use for the rest of the invocation.

    ``executable`` is the binary to run; ``prefix`` holds the arguments
    inserted before ``-f <file>`` (``["compose"]`` for the plugin form,
    empty for the legacy standalone script).
    """

    executable: str
    prefix: tuple[str, ...] = ()
    mode: str = COMPOSE_PLUGIN

    @property
    def is_legacy(self) -> bool:
        return self.mode == COMPOSE_LEGACY

    def command(self, *args: str) -> list[str]:
        """Build the argument list (without the executable) for a compose call."""
        return [*self.prefix, *args]

    def describe(self) -> str:
        return " ".join([self.executable, *self.prefix])
