"""
Pydantic models for bloodhound-cli.
"""

from .base import BloodHoundBaseModel, ImmutableModel
from .capability import COMPOSE_LEGACY, COMPOSE_PLUGIN, CapabilityState
from .config import ConfigEntry, ConfigValue
from .container import ContainerSummary, PortMapping
from .release import ReleaseInfo

__all__ = [
    "COMPOSE_LEGACY",
    "COMPOSE_PLUGIN",
    "BloodHoundBaseModel",
    "CapabilityState",
    "ConfigEntry",
    "ConfigValue",
    "ContainerSummary",
    "ImmutableModel",
    "PortMapping",
    "ReleaseInfo",
]
