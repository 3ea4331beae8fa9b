"""Python SDK for frecency database operations.

This module exposes high-level APIs for import, export, conversion,
and backup management backed by the zoxide store adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.config import DatatoolsConfig
from core.types import ExportOptions, ExportResult, ImportOptions, ImportReport, Snapshot
from ingest.conversion import ConversionRequest, convert_file
from ingest.import_pipeline import ConfirmCallback, import_file
from store.export import export_store, write_records
from store.snapshot_manager import SnapshotManager
from store.zoxide_store import ZoxideStore


class DatatoolsClient:
    """Primary SDK entry point for datatools workflows."""

    def __init__(self, config: DatatoolsConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or DatatoolsConfig.from_env()
        self._store = ZoxideStore(self._config)
        self._snapshots = SnapshotManager.from_config(self._config)

    @property
    def config(self) -> DatatoolsConfig:
        """Return the client configuration."""
        return self._config

    @property
    def snapshots(self) -> SnapshotManager:
        """Return the snapshot manager for the configured store."""
        return self._snapshots

    def import_file(
        self,
        options: ImportOptions,
        confirm: ConfirmCallback | None = None,
    ) -> ImportReport:
        """Import a file of any supported format into the store.

        Args:
            options: Import options.
            confirm: Optional gate called before the store is mutated.

        Returns:
            Import report.
        """
        return import_file(options, self._store, self._snapshots, confirm)

    def export(self, options: ExportOptions) -> ExportResult:
        """Export the store to a CSV file."""
        return export_store(self._store, options)

    def dump(self, output_path: str, keywords: Sequence[str] = ()) -> int:
        """Write store entries as autojump lines, optionally keyword-filtered."""
        records = self._store.query(keywords)
        return write_records(Path(output_path).expanduser(), records, "autojump")

    def convert(self, request: ConversionRequest) -> int:
        """Convert a file between interchange formats."""
        return convert_file(request)

    def backup(self) -> Snapshot:
        """Back up the store file, rotating any previous backup."""
        return self._snapshots.backup()

    def restore(self) -> Path:
        """Restore the store file from the current backup."""
        return self._snapshots.restore()

    def list_backups(self) -> list[Path]:
        """List backups oldest-first."""
        return self._snapshots.list_backups()

    def discard_backup(self) -> Path:
        """Delete the current backup."""
        return self._snapshots.discard()
