"""
Base pydantic models for bloodhound-cli.

Models here describe data coming from outside the CLI (the Docker API, the
release API, the config store). Strict mode keeps a wrong type from being
silently coerced; a release whose ``tag_name`` is a number is an error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BloodHoundBaseModel(BaseModel):
    """Strict model that rejects unknown fields and validates on assignment."""

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        populate_by_name=True,
    )


class ImmutableModel(BloodHoundBaseModel):
    """Strict, frozen model for values built once and only read afterwards."""

    model_config = ConfigDict(frozen=True)
