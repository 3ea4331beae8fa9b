"""Core constants used across datatools modules.

This module centralizes file names, defaults, and grammar limits.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("~/.local/share/zoxide")
DEFAULT_CONFIG_FILE = Path("~/.config/zoxide-datatools/config.yaml")
DEFAULT_ZOXIDE_BIN = "zoxide"
DEFAULT_COMMAND_TIMEOUT_SECONDS = 60.0
STORE_FILE_NAME = "db.zo"
BACKUP_SUFFIX = ".backup"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
DEFAULT_EXPORT_FILE_NAME = "zoxide-data.csv"
DETECTION_SAMPLE_LINES = 5
PATH_SEPARATOR = "/"
ROOT_PATH = "/"
Z_SCORE_SCALE = 4
Z_PLACEHOLDER_TIMESTAMP = 1
SCORE_DECIMALS = 1
