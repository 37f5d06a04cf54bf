"""
Container models.

Read-only projections of what the container runtime reports. Built
transiently for listing and log retrieval; never persisted.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import ImmutableModel


class PortMapping(ImmutableModel):
    """A port published by a container."""

    private_port: int
    public_port: int | None = None
    ip: str | None = None
    protocol: str = "tcp"

    def __str__(self) -> str:
        if self.public_port is None:
            return f"{self.private_port}/{self.protocol}"
        host = f"{self.ip}:" if self.ip else ""
        return f"{host}{self.public_port}->{self.private_port}/{self.protocol}"


class ContainerSummary(ImmutableModel):
    """A running container as shown by ``containers running``."""

    id: str
    image: str
    status: str
    ports: tuple[PortMapping, ...] = Field(default_factory=tuple)
    name: str = ""

    @property
    def short_id(self) -> str:
        return self.id[:12]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ContainerSummary:
        """Build a summary from one entry of the runtime's container list."""
        ports = tuple(
            PortMapping(
                private_port=int(p.get("PrivatePort", 0)),
                public_port=int(p["PublicPort"]) if p.get("PublicPort") else None,
                ip=p.get("IP") or None,
                protocol=p.get("Type", "tcp"),
            )
            for p in data.get("Ports") or []
        )
        labels = data.get("Labels") or {}
        return cls(
            id=data.get("Id", ""),
            image=data.get("Image", ""),
            status=data.get("Status", ""),
            ports=ports,
            name=labels.get("name", ""),
        )
