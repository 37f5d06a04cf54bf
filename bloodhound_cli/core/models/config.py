"""
Configuration store models.
"""

from __future__ import annotations

from typing import Union

from .base import ImmutableModel

ConfigValue = Union[str, bool, int]


class ConfigEntry(ImmutableModel):
    """A single resolved ``key = value`` pair from the configuration store."""

    key: str
    val: ConfigValue

    def display_value(self) -> str:
        """Render the value the way it is written to the JSON file."""
        if isinstance(self.val, bool):
            return "true" if self.val else "false"
        return str(self.val)
