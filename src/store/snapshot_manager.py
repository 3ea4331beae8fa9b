"""Backup and restore of the store backing file.

This module keeps one current backup next to the store file. Taking a new
backup first renames the current one with a timestamp suffix, so older
backups accumulate instead of being overwritten.
"""

from __future__ import annotations

import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable

from core.config import DatatoolsConfig
from core.constants import BACKUP_SUFFIX, BACKUP_TIMESTAMP_FORMAT
from core.errors import BackupError, NotFoundError
from core.logging_config import get_logger
from core.types import Snapshot

_LOGGER = get_logger(__name__)


class SnapshotManager:
    """Filesystem snapshot manager for one store file."""

    def __init__(
        self,
        store_file: Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize manager for a store file.

        Args:
            store_file: Live store backing file.
            clock: Time source for snapshot and rotation timestamps.
        """
        self._store_file = store_file
        self._backup_file = store_file.with_name(store_file.name + BACKUP_SUFFIX)
        self._clock = clock

    @classmethod
    def from_config(cls, config: DatatoolsConfig) -> "SnapshotManager":
        """Build a manager for the configured store file."""
        return cls(config.store_file)

    @property
    def store_file(self) -> Path:
        """Return the live store file path."""
        return self._store_file

    @property
    def backup_file(self) -> Path:
        """Return the current backup file path."""
        return self._backup_file

    def backup(self) -> Snapshot:
        """Copy the store file to the current backup slot.

        Returns:
            Snapshot describing the new backup.

        Raises:
            NotFoundError: If the store file does not exist.
            BackupError: If rotating or copying fails.
        """
        if not self._store_file.is_file():
            raise NotFoundError(
                f"Store file not found at {self._store_file}. "
                "Check _ZO_DATA_DIR or --data-dir."
            )
        created_at = self._clock()
        rotated_path = None
        try:
            if self._backup_file.exists():
                rotated_path = self._rotate_current(created_at)
            shutil.copy2(self._store_file, self._backup_file)
        except OSError as error:
            raise BackupError(
                f"Failed to back up {self._store_file} to {self._backup_file}: {error}. "
                "Check free space and permissions in the data directory."
            ) from error
        _LOGGER.info(
            "backup_created",
            store_file=str(self._store_file),
            backup_file=str(self._backup_file),
            rotated_file=str(rotated_path) if rotated_path else None,
        )
        return Snapshot(
            store_path=self._store_file,
            backup_path=self._backup_file,
            created_at=created_at,
            rotated_path=rotated_path,
        )

    def restore(self) -> Path:
        """Copy the current backup over the live store file.

        Returns:
            Backup file that was restored.

        Raises:
            NotFoundError: If no current backup exists.
            BackupError: If copying fails.
        """
        if not self._backup_file.is_file():
            raise NotFoundError(
                f"Backup file not found at {self._backup_file}. "
                "Run 'backup' before restoring."
            )
        try:
            shutil.copyfile(self._backup_file, self._store_file)
        except OSError as error:
            raise BackupError(
                f"Failed to restore {self._backup_file} to {self._store_file}: {error}."
            ) from error
        _LOGGER.info(
            "backup_restored",
            store_file=str(self._store_file),
            backup_file=str(self._backup_file),
        )
        return self._backup_file

    def list_backups(self) -> list[Path]:
        """Return rotated backups oldest-first, then the current backup."""
        pattern = f"{self._backup_file.name}.*"
        backups = sorted(path for path in self._store_file.parent.glob(pattern) if path.is_file())
        if self._backup_file.is_file():
            backups.append(self._backup_file)
        return backups

    def discard(self) -> Path:
        """Delete the current backup; rotated backups are kept.

        Raises:
            NotFoundError: If no current backup exists.
        """
        if not self._backup_file.is_file():
            raise NotFoundError(f"Backup file not found at {self._backup_file}.")
        self._backup_file.unlink()
        _LOGGER.info("backup_discarded", backup_file=str(self._backup_file))
        return self._backup_file

    def _rotate_current(self, created_at: datetime) -> Path:
        suffix = created_at.strftime(BACKUP_TIMESTAMP_FORMAT)
        rotated_path = self._backup_file.with_name(f"{self._backup_file.name}.{suffix}")
        if rotated_path.exists():
            # Same-second collision: the older rotated copy is replaced.
            _LOGGER.warning("backup_rotation_collision", rotated_file=str(rotated_path))
        os.replace(self._backup_file, rotated_path)
        return rotated_path
