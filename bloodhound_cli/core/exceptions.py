"""
Custom exception hierarchy for bloodhound-cli.

Internal functions raise these instead of exiting the process. The CLI layer
converts them into click exceptions in one place (see cli.decorators).
"""

from __future__ import annotations


class BloodHoundCliError(Exception):
    """
    Base exception for all bloodhound-cli errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, URLs, commands, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Environment Errors
# =============================================================================


class EnvironmentCheckError(BloodHoundCliError):
    """Base class for host capability failures (runtime, daemon, compose)."""

    pass


class ContainerRuntimeMissingError(EnvironmentCheckError):
    """The container runtime executable is not on the PATH."""

    pass


class DaemonUnavailableError(EnvironmentCheckError):
    """The container runtime is installed but its daemon does not answer."""

    pass


class ComposeUnavailableError(EnvironmentCheckError):
    """Neither the compose plugin nor the legacy compose script is available."""

    pass


# =============================================================================
# Service File Errors
# =============================================================================


class ServiceFileError(BloodHoundCliError):
    """Base class for service-definition file errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
        self.path = path


class ServiceFileMissingError(ServiceFileError):
    """The resolved service-definition file does not exist."""

    pass


class InvalidOverridePathError(ServiceFileError):
    """The ``--file`` override does not exist or is a directory."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(BloodHoundCliError):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ConfigError):
    """
    Error reading, parsing or writing the JSON config file.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigPermissionError(ConfigFileError):
    """The config directory does not grant the owner read and write access."""

    pass


class ConfigValidationError(ConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
        self.key = key


class UnknownConfigKeyError(ConfigValidationError):
    """A requested key has no value (unset or empty)."""

    pass


class ProtectedConfigKeyError(ConfigValidationError):
    """A key that cannot be changed with ``config set``."""

    pass


class ConflictingConfigKeyError(ConfigValidationError):
    """A key that is a dotted prefix or extension of another (``tls`` vs ``tls.cert_file``)."""

    pass


# =============================================================================
# Process Errors
# =============================================================================


class ProcessError(BloodHoundCliError):
    """Base class for external command errors."""

    pass


class CommandNotFoundError(ProcessError):
    """The requested executable is not on the PATH."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
        self.command = command


class ProcessExecutionError(ProcessError):
    """
    An external command ran but exited with a non-zero status.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if returncode is not None:
            ctx["returncode"] = returncode
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
        self.returncode = returncode
        self.command = command


class ComposeCommandError(ProcessExecutionError):
    """A compose step of an orchestration operation failed."""

    pass


# =============================================================================
# Network Errors
# =============================================================================


class NetworkError(BloodHoundCliError):
    """Base class for network-related errors."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if status_code:
            ctx["status_code"] = status_code
        if url:
            ctx["url"] = url
        super().__init__(message, context=ctx, cause=cause)
        self.url = url
        self.status_code = status_code


class DownloadError(NetworkError):
    """Downloading a service-definition file failed."""

    pass


class ReleaseLookupError(NetworkError):
    """The remote release metadata could not be fetched or understood."""

    pass


# =============================================================================
# Container Runtime Errors
# =============================================================================


class ContainerRuntimeError(BloodHoundCliError):
    """Error talking to the container runtime API (listing, logs)."""

    pass
