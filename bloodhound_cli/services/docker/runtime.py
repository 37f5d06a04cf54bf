"""
Container runtime client.

Lists BloodHound containers and reads their logs through the Docker Engine
API. Containers are matched on their ``name`` label.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterator
from typing import Any, BinaryIO

import docker
from docker.errors import DockerException
from docker.utils import kwargs_from_env

from ...core.exceptions import ContainerRuntimeError
from ...core.interfaces.logger import ILogger
from ...core.models.container import ContainerSummary
from ..logging import NullLogger

SERVICE_PREFIX = "bhce_"
SERVICE_NAMES = ("bhce_bloodhound", "bhce_neo4j", "bhce_postgres")
ALL_CONTAINERS = "all"

FRAME_HEADER_SIZE = 8


def read_log_frames(stream: BinaryIO) -> Iterator[bytes]:
    """Yield payloads from a multiplexed log stream.

    Each frame starts with an 8-byte header: the stream type, three padding
    bytes and the payload length as a big-endian unsigned 32-bit integer.
    A truncated trailing frame yields whatever payload arrived.
    """
    while True:
        header = _read_exact(stream, FRAME_HEADER_SIZE)
        if len(header) < FRAME_HEADER_SIZE:
            return
        (length,) = struct.unpack(">I", header[4:])
        payload = _read_exact(stream, length)
        if payload:
            yield payload
        if len(payload) < length:
            return


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def matches_service(label: str, requested: str) -> bool:
    """True if a container ``name`` label answers to ``requested``."""
    if requested == ALL_CONTAINERS:
        return True
    return label == requested or label == f"{SERVICE_PREFIX}{requested}"


class ContainerRuntime:
    """
    Thin wrapper around the Docker Engine API.

    Usage:
        runtime = ContainerRuntime()
        for container in runtime.running():
            ...
        for section in runtime.fetch_logs("neo4j", lines="100"):
            print(section, end="")
    """

    def __init__(
        self,
        client_factory: Callable[[], Any] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Args:
            client_factory: Returns a ``docker.APIClient``-compatible object
                (defaults to one configured from the environment)
            logger: Diagnostics logger
        """
        self._client_factory = client_factory or _client_from_env
        self._client: Any = None
        self._logger = logger or NullLogger()

    @property
    def client(self) -> Any:
        if self._client is None:
            try:
                self._client = self._client_factory()
            except DockerException as e:
                raise ContainerRuntimeError(
                    f"Failed to get client connection to Docker: {e}", cause=e
                ) from e
        return self._client

    def list_containers(self, all: bool = False) -> list[dict[str, Any]]:
        """Raw container list from the API (running only unless ``all``)."""
        try:
            return self.client.containers(all=all)
        except DockerException as e:
            raise ContainerRuntimeError(f"Failed to get container list from Docker: {e}", cause=e) from e

    def running(self) -> list[ContainerSummary]:
        """Running BloodHound containers, sorted by image."""
        summaries = [
            ContainerSummary.from_api(data)
            for data in self.list_containers(all=False)
            if (data.get("Labels") or {}).get("name") in SERVICE_NAMES
        ]
        return sorted(summaries, key=lambda c: c.image)

    def fetch_logs(self, name: str, lines: str = "500") -> list[str]:
        """
        Collect logs for containers whose ``name`` label matches ``name``.

        Args:
            name: ``all``, a full ``name`` label, or the label without ``bhce_``
            lines: How many lines to take from the end of each log ("all" for everything)

        Returns:
            Text sections: a banner per container followed by its log output
        """
        containers = self.list_containers(all=False)
        if not containers:
            return [f"\n*** No running containers found for '{name}' ***\n"]

        logs: list[str] = []
        for data in containers:
            label = (data.get("Labels") or {}).get("name", "")
            if not matches_service(label, name):
                continue
            logs.append(f"\n*** Logs for `{label}` ***\n\n")
            logs.extend(self._container_logs(data["Id"], lines))

        if not logs:
            logs.append(f"\n*** No logs found for requested container '{name}' ***\n")
        return logs

    def _container_logs(self, container_id: str, lines: str) -> list[str]:
        client = self.client
        params = {"stdout": 1, "stderr": 1, "tail": lines}
        try:
            tty = bool(client.inspect_container(container_id).get("Config", {}).get("Tty"))
            response = client.get(
                f"{client.base_url}/containers/{container_id}/logs", params=params, stream=True
            )
            response.raise_for_status()
        except (DockerException, OSError) as e:
            raise ContainerRuntimeError(f"Failed to get container logs: {e}", cause=e) from e

        self._logger.debug("Reading logs for %s (tty=%s)", container_id, tty)
        with response:
            if tty:
                return [response.raw.read().decode("utf-8", errors="replace")]
            return [
                frame.decode("utf-8", errors="replace") for frame in read_log_frames(response.raw)
            ]


def _client_from_env() -> Any:
    return docker.APIClient(**kwargs_from_env())
