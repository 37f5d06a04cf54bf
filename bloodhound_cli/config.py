"""Configuration store for the BloodHound server settings.

The store keeps the settings the BloodHound containers read from
``<config-dir>/bloodhound.config.json``. Values resolve in this order:

1. Values set during this invocation (``ConfigStore.set``)
2. Environment variables (key upper-cased, dots replaced by underscores)
3. The JSON config file
4. Registered defaults

The file is rewritten after every load and every set so it always lists
every known key.
"""

from __future__ import annotations

import json
import os
import secrets
import stat
import string
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .core.exceptions import (
    ConfigFileError,
    ConfigPermissionError,
    ConflictingConfigKeyError,
    ProtectedConfigKeyError,
    UnknownConfigKeyError,
)
from .core.interfaces.logger import ILogger
from .core.models.config import ConfigEntry, ConfigValue
from .services.files import atomic_write_text
from .services.logging import NullLogger

CONFIG_FILE_NAME = "bloodhound.config.json"
CONFIG_DIRECTORY_KEY = "config_directory"
PASSWORD_KEY = "default_admin.password"

# Owner read + write; anything more permissive also passes.
MIN_DIRECTORY_PERMISSIONS = stat.S_IRUSR | stat.S_IWUSR

PASSWORD_LENGTH = 32
PASSWORD_SYMBOLS = "!@#$%^&*()-_=+[]{}<>?"

# Keys that cannot be changed with `config set`
PROTECTED_KEYS = {
    CONFIG_DIRECTORY_KEY: (
        "The config directory cannot be changed with `config set`. "
        "Use the `--file` flag to point container commands at a different YAML file, "
        "or set the CONFIG_DIRECTORY environment variable."
    ),
}

ALIASES = {
    "default_password": PASSWORD_KEY,
}

# Server settings and their descriptions; defaults come from default_values()
CONFIGURABLE_KEYS = {
    "version": "Config file format version",
    "default_admin.principal_name": "Name of the default administrator account",
    PASSWORD_KEY: "Password of the default administrator account (generated)",
    "bind_addr": "Address the BloodHound API binds to",
    "metrics_port": "Address the metrics endpoint binds to",
    "root_url": "Public root URL of the BloodHound UI",
    "work_dir": "Working directory inside the BloodHound container",
    "log_level": "BloodHound server log level",
    "log_path": "BloodHound server log file",
    "collectors_base_path": "Directory holding collector downloads",
    "tls.cert_file": "Path to the TLS certificate",
    "tls.key_file": "Path to the TLS private key",
    CONFIG_DIRECTORY_KEY: "Directory holding the JSON config and YAML files",
}


def generate_password(length: int = PASSWORD_LENGTH, symbols: bool = True) -> str:
    """Generate a random credential.

    The result always contains at least one lowercase letter, one uppercase
    letter and one digit (and one symbol when ``symbols`` is set).
    """
    alphabet = string.ascii_letters + string.digits
    required = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
    ]
    if symbols:
        alphabet += PASSWORD_SYMBOLS
        required.append(secrets.choice(PASSWORD_SYMBOLS))
    chars = required + [secrets.choice(alphabet) for _ in range(length - len(required))]
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


def default_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/bloodhound`` (``~/.config/bloodhound`` when unset)."""
    environ = os.environ if environ is None else environ
    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "bloodhound"


def env_var_name(key: str) -> str:
    """Environment variable that overrides ``key`` (``tls.cert_file`` -> ``TLS_CERT_FILE``)."""
    return key.upper().replace(".", "_")


def flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested objects into lowercase dot-delimited keys."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{str(key).lower()}"
        if isinstance(value, Mapping):
            flat.update(flatten(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


def conflicting_key(key: str, keys: Iterable[str]) -> str | None:
    """Return a key from ``keys`` that cannot sit beside ``key`` in nested JSON.

    ``tls`` and ``tls.cert_file`` conflict: ``tls`` would have to be both a
    value and an object.
    """
    for other in keys:
        if other.startswith(f"{key}.") or key.startswith(f"{other}."):
            return other
    return None


def nest(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Inverse of flatten(); keys are sorted so the file is stable.

    Raises:
        ConfigFileError: If one key is a dotted prefix of another
    """
    nested: dict[str, Any] = {}
    for key in sorted(flat):
        other = conflicting_key(key, flat)
        if other is not None:
            raise ConfigFileError(
                f"Config keys `{key}` and `{other}` conflict: a key cannot hold both a value and nested keys"
            )
        parts = key.split(".")
        d = nested
        for part in parts[:-1]:
            d = d.setdefault(part, {})
        d[parts[-1]] = flat[key]
    return nested


def check_directory_permissions(path: Path) -> bool:
    """Return True when the owner can read and write ``path``.

    Raises:
        OSError: If the directory cannot be inspected
    """
    mode = stat.S_IMODE(path.stat().st_mode)
    return mode & MIN_DIRECTORY_PERMISSIONS == MIN_DIRECTORY_PERMISSIONS


def coerce_value(value: str) -> ConfigValue:
    """Turn the literal tokens true/false into booleans; keep everything else as given."""
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return value


class ConfigStore:
    """
    File-backed key-value store with defaults, aliases and env overrides.

    Usage:
        store = ConfigStore()
        store.register_defaults()
        store.load()
        store.get("default_password")
        store.set("log_level", "DEBUG")
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize an empty store.

        Args:
            environ: Environment used for overrides (defaults to os.environ)
            logger: Diagnostics logger
        """
        self._environ = os.environ if environ is None else environ
        self._logger = logger or NullLogger()
        self._defaults: dict[str, ConfigValue] = {}
        self._aliases: dict[str, str] = {}
        self._file_values: dict[str, Any] = {}
        self._overrides: dict[str, ConfigValue] = {}
        self._config_dir: Path | None = None

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def default_values(self) -> dict[str, ConfigValue]:
        """Return the default table; the password is generated once per store."""
        password = self._defaults.get(PASSWORD_KEY) or generate_password()
        return {
            "version": "1",
            "default_admin.principal_name": "admin",
            PASSWORD_KEY: password,
            "bind_addr": "0.0.0.0:8080",
            "metrics_port": ":2112",
            "root_url": "http://127.0.0.1:8080/",
            "work_dir": "/opt/bloodhound/work",
            "log_level": "INFO",
            "log_path": "bloodhound.log",
            "collectors_base_path": "/etc/bloodhound/collectors",
            "tls.cert_file": "",
            "tls.key_file": "",
            CONFIG_DIRECTORY_KEY: str(default_config_dir(self._environ)),
        }

    def register_defaults(self) -> None:
        """Register the default table and aliases. Safe to call more than once."""
        self._defaults.update(self.default_values())
        for alias, target in ALIASES.items():
            self.register_alias(alias, target)

    def register_alias(self, alias: str, key: str) -> None:
        """Make ``alias`` read and write ``key``."""
        self._aliases[alias.lower()] = key.lower()

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    @property
    def config_dir(self) -> Path:
        """The directory the store lives in; fixed once the store is loaded."""
        if self._config_dir is not None:
            return self._config_dir
        return Path(self.get_string(CONFIG_DIRECTORY_KEY)).expanduser()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    # -------------------------------------------------------------------------
    # Load / persist
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """
        Read the JSON file over the defaults and write the merged result back.

        Creates the directory and an empty ``{}`` file on first use.

        Raises:
            ConfigPermissionError: If the directory lacks owner read/write access
            ConfigFileError: If the file cannot be created, read or parsed
        """
        config_dir = self.config_dir
        config_file = self.config_file

        if config_file.exists():
            try:
                allowed = check_directory_permissions(config_dir)
            except OSError as e:
                raise ConfigFileError(
                    "Could not inspect the config directory", file_path=str(config_dir), cause=e
                ) from e
            if not allowed:
                raise ConfigPermissionError(
                    f"The config directory {config_dir} must be readable and writable by its "
                    f"owner (at least 0600). Fix it with: chmod u+rw {config_dir}",
                    file_path=str(config_dir),
                )
        else:
            self._create_empty_file(config_dir, config_file)

        try:
            raw = config_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(
                "Error while reading the JSON config file", file_path=str(config_file), cause=e
            ) from e

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            raise ConfigFileError(
                f"Error while parsing the JSON config file: {e}",
                file_path=str(config_file),
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise ConfigFileError(
                "The JSON config file must contain an object", file_path=str(config_file)
            )

        file_values = flatten(data)
        # The file cannot relocate itself; the stored directory is informational.
        file_values.pop(CONFIG_DIRECTORY_KEY, None)
        for key in file_values:
            other = conflicting_key(key, set(self._defaults) | set(file_values))
            if other is not None:
                raise ConfigFileError(
                    f"The JSON config file sets `{key}`, which conflicts with `{other}`. "
                    "Remove one of them from the file.",
                    file_path=str(config_file),
                )

        self._file_values = file_values
        self._config_dir = config_dir
        self._overrides[CONFIG_DIRECTORY_KEY] = str(config_dir)
        self._logger.debug("Loaded %d keys from %s", len(self._file_values), config_file)
        self.persist()

    def _create_empty_file(self, config_dir: Path, config_file: Path) -> None:
        if not config_dir.is_dir():
            self._logger.info("Config directory %s is missing, creating it", config_dir)
            try:
                config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigFileError(
                    "The config directory doesn't exist and couldn't be created",
                    file_path=str(config_dir),
                    cause=e,
                ) from e
        try:
            config_file.write_text("{}\n", encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(
                "The JSON config file doesn't exist and couldn't be created",
                file_path=str(config_file),
                cause=e,
            ) from e

    def persisted_values(self) -> dict[str, Any]:
        """Values written to disk: defaults, then file, then explicit sets.

        Environment overrides are deliberately left out.
        """
        merged: dict[str, Any] = dict(self._defaults)
        merged.update(self._file_values)
        merged.update(self._overrides)
        return merged

    def persist(self) -> Path:
        """Write every known key to the JSON file.

        Raises:
            ConfigFileError: If the file cannot be written
        """
        config_file = self.config_file
        content = json.dumps(nest(self.persisted_values()), indent=2) + "\n"
        try:
            atomic_write_text(config_file, content)
        except OSError as e:
            raise ConfigFileError(
                "Error while writing the JSON config file", file_path=str(config_file), cause=e
            ) from e
        self._logger.debug("Wrote config file %s", config_file)
        return config_file

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    def resolve_key(self, key: str) -> str:
        """Lower-case ``key`` and follow aliases to the canonical key."""
        key = key.lower()
        return self._aliases.get(key, key)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the effective value for ``key`` (or ``default``)."""
        key = self.resolve_key(key)
        if key in self._overrides:
            return self._overrides[key]
        env_name = env_var_name(key)
        if env_name in self._environ:
            return coerce_value(self._environ[env_name])
        if key in self._file_values:
            return self._file_values[key]
        if key in self._defaults:
            return self._defaults[key]
        return default

    def get_string(self, key: str) -> str:
        """Return the value for ``key`` rendered as a string ('' when unset)."""
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def get_many(self, keys: Iterable[str]) -> list[ConfigEntry]:
        """
        Resolve several keys, sorted by key name.

        Raises:
            UnknownConfigKeyError: If any key is unset or empty
        """
        entries: list[ConfigEntry] = []
        for requested in keys:
            setting = requested.lower()
            value = self.get(setting)
            if value is None or value == "":
                raise UnknownConfigKeyError(f"Config variable `{setting}` not found", key=setting)
            if not isinstance(value, (str, bool, int)):
                value = json.dumps(value)
            entries.append(ConfigEntry(key=setting, val=value))
        return sorted(entries, key=lambda entry: entry.key)

    def known_keys(self) -> set[str]:
        """Every key with a default, a file value or a value set in this invocation."""
        return set(self._defaults) | set(self._file_values) | set(self._overrides)

    def all_settings(self) -> dict[str, Any]:
        """Every key with its effective value, nested by dot segment."""
        return nest({key: self.get(key) for key in self.known_keys()})

    def dump(self) -> str:
        """All settings as indented JSON for display."""
        return json.dumps(self.all_settings(), indent=2)

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def set(self, key: str, value: str) -> ConfigValue:
        """
        Set ``key`` and persist the store.

        Returns:
            The stored (possibly coerced) value

        Raises:
            ProtectedConfigKeyError: If the key cannot be changed
            ConflictingConfigKeyError: If the key is a dotted prefix or extension of a known key
            ConfigFileError: If the file cannot be written; the store is left unchanged
        """
        canonical = self.resolve_key(key)
        if canonical in PROTECTED_KEYS:
            raise ProtectedConfigKeyError(PROTECTED_KEYS[canonical], key=canonical)

        other = conflicting_key(canonical, self.known_keys())
        if other is not None:
            raise ConflictingConfigKeyError(
                f"Config variable `{canonical}` conflicts with `{other}`: "
                "a key cannot hold both a value and nested keys",
                key=canonical,
            )

        typed_value = coerce_value(value)
        previous = dict(self._overrides)
        self._overrides[canonical] = typed_value
        try:
            self.persist()
        except ConfigFileError:
            self._overrides = previous
            raise
        self._logger.info("Config %s updated", canonical)
        return typed_value

    def regenerate_password(self) -> str:
        """Replace the administrator password with a new random one and persist it."""
        password = generate_password()
        self._overrides[PASSWORD_KEY] = password
        self.persist()
        return password


def create_store(
    environ: Mapping[str, str] | None = None,
    logger: ILogger | None = None,
) -> ConfigStore:
    """Build a store with defaults registered and the file loaded."""
    store = ConfigStore(environ=environ, logger=logger)
    store.register_defaults()
    store.load()
    return store
