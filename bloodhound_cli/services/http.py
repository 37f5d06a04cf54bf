"""
HTTP helpers: service-definition downloads and the release lookup.

Plain blocking requests with a timeout; no retries.
"""

from __future__ import annotations

import json
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from pydantic import ValidationError

from ..core.exceptions import DownloadError, ReleaseLookupError
from ..core.interfaces.logger import ILogger
from ..core.models.release import ReleaseInfo
from .files import atomic_writer
from .logging import NullLogger

USER_AGENT = "bloodhound-cli"


class Downloader:
    """Downloads a URL into a file, replacing the file only on success."""

    def __init__(self, timeout: float = 60.0, logger: ILogger | None = None) -> None:
        self._timeout = timeout
        self._logger = logger or NullLogger()

    def download(self, url: str, dest: Path) -> Path:
        """
        Fetch ``url`` into ``dest``.

        Raises:
            DownloadError: On connection failures, non-200 responses or write errors
        """
        self._logger.debug("Downloading %s -> %s", url, dest)
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                if resp.status != 200:
                    raise DownloadError(
                        f"failed to download file: received status code {resp.status}",
                        url=url,
                        status_code=resp.status,
                    )
                with atomic_writer(dest) as out:
                    shutil.copyfileobj(resp, out)
        except urllib.error.HTTPError as e:
            raise DownloadError(
                f"failed to download file: received status code {e.code}",
                url=url,
                status_code=e.code,
                cause=e,
            ) from e
        except urllib.error.URLError as e:
            raise DownloadError(f"failed to download file: {e.reason}", url=url, cause=e) from e
        except OSError as e:
            raise DownloadError(f"failed to write file: {e}", url=url, cause=e) from e
        self._logger.info("Downloaded %s", dest)
        return dest


class ReleaseClient:
    """Looks up the latest published bloodhound-cli release."""

    def __init__(self, url: str, timeout: float = 10.0, logger: ILogger | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._logger = logger or NullLogger()

    def latest(self) -> ReleaseInfo:
        """
        Fetch the latest release metadata.

        Raises:
            ReleaseLookupError: On network errors, non-200 responses or malformed JSON
        """
        req = urllib.request.Request(
            self._url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                if resp.status != 200:
                    raise ReleaseLookupError(
                        f"unexpected HTTP status: {resp.status}",
                        url=self._url,
                        status_code=resp.status,
                    )
                body = resp.read().decode()
        except urllib.error.HTTPError as e:
            raise ReleaseLookupError(
                f"unexpected HTTP status: {e.code}", url=self._url, status_code=e.code, cause=e
            ) from e
        except urllib.error.URLError as e:
            self._logger.debug("Release lookup connection error: %s", e)
            raise ReleaseLookupError(
                f"Connection error: {e.reason}", url=self._url, cause=e
            ) from e
        except OSError as e:
            raise ReleaseLookupError(f"Connection error: {e}", url=self._url, cause=e) from e

        return self._parse(body)

    def _parse(self, body: str) -> ReleaseInfo:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ReleaseLookupError(
                f"Invalid JSON in release response at position {e.pos}", url=self._url, cause=e
            ) from e
        if not isinstance(data, dict):
            raise ReleaseLookupError("Release response is not a JSON object", url=self._url)
        try:
            return ReleaseInfo.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(
                f"'{'.'.join(str(p) for p in err['loc'])}' {err['msg'].lower()}" for err in e.errors()
            )
            raise ReleaseLookupError(
                f"Malformed release response: {fields}", url=self._url, cause=e
            ) from e
