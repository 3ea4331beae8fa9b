"""Runtime configuration model for datatools.

This module owns all environment variable and config file parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from core.constants import (
    DEFAULT_COMMAND_TIMEOUT_SECONDS,
    DEFAULT_CONFIG_FILE,
    DEFAULT_DATA_DIR,
    DEFAULT_ZOXIDE_BIN,
    STORE_FILE_NAME,
)
from core.errors import ConfigError

_CONFIG_KEYS = ("data_dir", "zoxide_bin", "command_timeout")


@dataclass(frozen=True)
class DatatoolsConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory holding the zoxide database and its backups.
        zoxide_bin: Executable used to query and mutate the store.
        command_timeout: Seconds allowed for one store command.
    """

    data_dir: Path
    zoxide_bin: str
    command_timeout: float

    @property
    def store_file(self) -> Path:
        """Return the store backing file path."""
        return self.data_dir / STORE_FILE_NAME

    @classmethod
    def from_env(cls) -> "DatatoolsConfig":
        """Build config from the optional YAML file and environment.

        Environment variables take precedence over file values.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If file or environment values are invalid.
        """
        config_path = Path(
            os.getenv("ZDT_CONFIG_FILE", str(DEFAULT_CONFIG_FILE))
        ).expanduser()
        file_values = _read_config_file(config_path)
        data_dir_value = os.getenv("_ZO_DATA_DIR") or file_values.get(
            "data_dir", str(DEFAULT_DATA_DIR)
        )
        zoxide_bin = os.getenv("ZDT_ZOXIDE_BIN") or file_values.get(
            "zoxide_bin", DEFAULT_ZOXIDE_BIN
        )
        timeout_value = os.getenv("ZDT_COMMAND_TIMEOUT") or file_values.get(
            "command_timeout", DEFAULT_COMMAND_TIMEOUT_SECONDS
        )
        return cls(
            data_dir=Path(str(data_dir_value)).expanduser().resolve(),
            zoxide_bin=str(zoxide_bin),
            command_timeout=_parse_timeout(timeout_value),
        )


def _read_config_file(config_path: Path) -> Mapping[str, Any]:
    """Read optional YAML config values.

    Args:
        config_path: Config file location.

    Returns:
        Known config keys found in the file; empty when absent.

    Raises:
        ConfigError: If file is unreadable or not a mapping.
    """
    if not config_path.is_file():
        return {}
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as error:
        raise ConfigError(
            f"Failed to read config file {config_path}: {error}. "
            "Fix the YAML syntax or unset ZDT_CONFIG_FILE."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(
            f"Invalid config file {config_path}: expected a mapping at top level."
        )
    unknown_keys = sorted(set(payload) - set(_CONFIG_KEYS))
    if unknown_keys:
        raise ConfigError(
            f"Invalid config file {config_path}: unknown keys {unknown_keys}. "
            f"Supported keys: {', '.join(_CONFIG_KEYS)}."
        )
    return payload


def _parse_timeout(raw_value: object) -> float:
    """Parse the store command timeout.

    Args:
        raw_value: Raw value from environment or file.

    Returns:
        Positive timeout in seconds.

    Raises:
        ConfigError: If value is not a positive number.
    """
    try:
        timeout = float(str(raw_value))
    except ValueError as error:
        raise ConfigError(
            "Invalid ZDT_COMMAND_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set ZDT_COMMAND_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise ConfigError(
            f"Invalid ZDT_COMMAND_TIMEOUT value: expected positive number, got '{raw_value}'."
        )
    return timeout
