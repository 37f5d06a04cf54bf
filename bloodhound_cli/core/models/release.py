"""
Release metadata models for the remote version check.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict

from .base import BloodHoundBaseModel


class ReleaseInfo(BloodHoundBaseModel):
    """The subset of the release API response the CLI relies on."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    published_at: str
    tag_name: str
    html_url: str

    def published_date(self) -> datetime | None:
        """Parse ``published_at`` as RFC 3339, or None if it does not parse."""
        try:
            return datetime.fromisoformat(self.published_at.replace("Z", "+00:00"))
        except ValueError:
            return None

    def describe(self, name: str) -> str:
        """Format the release as ``<name> <tag> (DD Month YYYY)``."""
        published = self.published_date()
        if published is None:
            return f"{name} (published at: {self.published_at})"
        return f"{name} {self.tag_name} ({published.strftime('%d %B %Y')})"
