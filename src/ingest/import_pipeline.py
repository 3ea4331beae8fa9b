"""Transactional import orchestration.

This module drives one import through detection, backup, decoding,
and store mutation. A failed mutation restores the pre-import backup
so the store is left exactly as it was before the attempt.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, cast

from core.errors import DatatoolsError, MutationError, RollbackError
from core.logging_config import get_logger
from core.types import (
    FormatName,
    ImportMode,
    ImportOptions,
    ImportReport,
    ImportSession,
    ImportState,
    Record,
    Snapshot,
)
from formats.autojump import AutojumpCodec
from formats.registry import get_codec
from formats.z_format import ZFormatCodec
from ingest.format_detection import require_format
from ingest.line_reader import DecodedLine, decode_lines, latest_by_path, read_source_lines
from store.snapshot_manager import SnapshotManager
from store.zoxide_store import FrecencyStore

_LOGGER = get_logger(__name__)

ALLOWED_IMPORT_TRANSITIONS: dict[ImportState, tuple[ImportState, ...]] = {
    "start": ("detected", "error"),
    "detected": ("backed_up", "dry_run_reported", "error"),
    "backed_up": ("converting", "error"),
    "converting": ("mutating", "cancelled"),
    "mutating": ("committed", "rolled_back", "error"),
    "committed": (),
    "rolled_back": (),
    "dry_run_reported": (),
    "cancelled": (),
    "error": (),
}

ConfirmCallback = Callable[[ImportSession], bool]


@dataclass(frozen=True)
class MutationPlan:
    """Store operations derived from decoded input.

    Attributes:
        clear_first: Remove every existing path before loading.
        bulk_format: Format of ``bulk_lines`` when a bulk load is used.
        bulk_lines: Pre-encoded lines for one bulk load.
        upserts: Records applied one by one when no bulk load is used.
    """

    clear_first: bool
    bulk_format: FormatName | None = None
    bulk_lines: tuple[str, ...] = ()
    upserts: tuple[Record, ...] = ()


def validate_import_transition(current: ImportState, next_state: ImportState) -> None:
    """Validate one import state transition against allowed edges."""
    allowed_states = ALLOWED_IMPORT_TRANSITIONS[current]
    if next_state not in allowed_states:
        raise DatatoolsError(
            f"Invalid import state transition {current!r} -> {next_state!r}. "
            f"Allowed: {', '.join(allowed_states) or 'none'}."
        )


def forces_full_clear(format_name: FormatName) -> bool:
    """Return whether imports of this format always clear the store.

    z ranks are scaled by four and the store accumulates imported ranks,
    so z-sourced data (and tabular data converted through z) must replace
    existing scores.
    """
    return format_name != "autojump"


def build_mutation_plan(
    format_name: FormatName,
    mode: ImportMode,
    decoded: list[DecodedLine],
) -> MutationPlan:
    """Build the store operations for decoded input.

    Args:
        format_name: Detected input format.
        mode: Requested import mode.
        decoded: Decoded lines, one per distinct path.

    Returns:
        Mutation plan for the store.
    """
    if format_name == "z":
        return MutationPlan(
            clear_first=True,
            bulk_format="z",
            bulk_lines=tuple(item.source.text.strip() for item in decoded),
        )
    if forces_full_clear(format_name):
        z_codec = ZFormatCodec()
        return MutationPlan(
            clear_first=True,
            bulk_format="z",
            bulk_lines=tuple(z_codec.encode(item.record) for item in decoded),
        )
    if mode == "replace":
        autojump_codec = AutojumpCodec()
        return MutationPlan(
            clear_first=True,
            bulk_format="autojump",
            bulk_lines=tuple(autojump_codec.encode(item.record) for item in decoded),
        )
    return MutationPlan(
        clear_first=False,
        upserts=tuple(item.record for item in decoded),
    )


class ImportPipelineRunner:
    """Stateful runner for one transactional import."""

    def __init__(
        self,
        options: ImportOptions,
        store: FrecencyStore,
        snapshots: SnapshotManager,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self._options = options
        self._store = store
        self._snapshots = snapshots
        self._confirm = confirm
        self._source_path = Path(options.source_path).expanduser()
        self._session = ImportSession(
            source_path=options.source_path,
            mode=options.mode,
            dry_run=options.dry_run,
        )
        self._snapshot: Snapshot | None = None

    @property
    def session(self) -> ImportSession:
        """Return the current session state."""
        return self._session

    def run(self) -> ImportReport:
        """Execute the import and return its report.

        Raises:
            NotFoundError: If the input or store file is missing.
            UnrecognizedFormatError: If the input format is unknown.
            BackupError: If the pre-import backup fails.
            DecodeError: If any input line is invalid; the store is untouched.
            MutationError: If the store rejected the import; the store was restored.
            RollbackError: If restoring the backup failed as well.
        """
        format_name = self._detect()
        if self._options.dry_run:
            return self._report_dry_run()
        self._backup()
        self._session = replace(self._session, pre_count=len(self._store.list_all()))
        decoded = self._decode(format_name)
        plan = build_mutation_plan(format_name, self._options.mode, decoded)
        self._transition("converting", import_count=len(decoded))
        if self._confirm is not None and not self._confirm(self._session):
            self._transition("cancelled")
            _LOGGER.info("import_cancelled", source_path=self._options.source_path)
            return self._build_report()
        self._transition("mutating")
        self._mutate(plan)
        self._transition("committed")
        _log_import_completion(self._build_report())
        return self._build_report()

    def _detect(self) -> FormatName:
        try:
            format_name = require_format(self._source_path)
        except DatatoolsError:
            self._transition("error")
            raise
        self._transition("detected", detected_format=format_name)
        return format_name

    def _report_dry_run(self) -> ImportReport:
        pre_count = len(self._store.list_all())
        import_count = len(read_source_lines(self._source_path))
        self._transition(
            "dry_run_reported",
            pre_count=pre_count,
            post_count=pre_count,
            import_count=import_count,
        )
        return self._build_report()

    def _backup(self) -> None:
        try:
            self._snapshot = self._snapshots.backup()
        except DatatoolsError:
            self._transition("error")
            raise
        self._transition("backed_up")

    def _decode(self, format_name: FormatName) -> list[DecodedLine]:
        codec = get_codec(format_name)
        decoded = decode_lines(self._source_path, read_source_lines(self._source_path), codec)
        return latest_by_path(decoded)

    def _mutate(self, plan: MutationPlan) -> None:
        try:
            if plan.clear_first:
                for record in self._store.list_all():
                    self._store.remove(record.path)
            if plan.bulk_format is not None:
                self._store.bulk_load(plan.bulk_format, plan.bulk_lines)
            for record in plan.upserts:
                self._store.upsert(record)
            self._session = replace(self._session, post_count=len(self._store.list_all()))
        except MutationError as error:
            self._rollback(error)

    def _rollback(self, error: MutationError) -> None:
        backup_file = self._snapshots.backup_file
        try:
            self._snapshots.restore()
        except DatatoolsError as restore_error:
            self._transition("error")
            _LOGGER.error(
                "import_rollback_failed",
                source_path=self._options.source_path,
                backup_file=str(backup_file),
                mutation_error=str(error),
                restore_error=str(restore_error),
            )
            raise RollbackError(
                f"Import of {self._options.source_path} failed ({error}) and restoring "
                f"the backup also failed ({restore_error}). Restore manually by copying "
                f"{backup_file} over {self._snapshots.store_file}."
            ) from restore_error
        self._transition("rolled_back")
        _LOGGER.warning(
            "import_rolled_back",
            source_path=self._options.source_path,
            backup_file=str(backup_file),
            mutation_error=str(error),
        )
        raise MutationError(
            f"Import of {self._options.source_path} failed: {error}. "
            f"The store was restored from {backup_file}."
        ) from error

    def _transition(self, next_state: ImportState, **fields: object) -> None:
        validate_import_transition(self._session.state, next_state)
        self._session = replace(self._session, state=next_state, **fields)

    def _build_report(self) -> ImportReport:
        session = self._session
        format_name = cast(FormatName, session.detected_format)
        return ImportReport(
            source_path=session.source_path,
            format_name=format_name,
            mode=session.mode,
            dry_run=session.dry_run,
            state=session.state,
            pre_count=session.pre_count,
            post_count=session.post_count,
            import_count=session.import_count,
            forced_clear=forces_full_clear(format_name) and session.mode == "merge",
            snapshot=self._snapshot,
        )


def import_file(
    options: ImportOptions,
    store: FrecencyStore,
    snapshots: SnapshotManager,
    confirm: ConfirmCallback | None = None,
) -> ImportReport:
    """Run one transactional import.

    Args:
        options: Import request options.
        store: Target frecency store.
        snapshots: Snapshot manager for the store's backing file.
        confirm: Optional gate called before mutation; False cancels.

    Returns:
        Import report.
    """
    runner = ImportPipelineRunner(options, store, snapshots, confirm)
    return runner.run()


def _log_import_completion(report: ImportReport) -> None:
    """Log import completion with contextual metadata."""
    _LOGGER.info(
        "import_committed",
        source_path=report.source_path,
        format_name=report.format_name,
        mode=report.mode,
        forced_clear=report.forced_clear,
        pre_count=report.pre_count,
        post_count=report.post_count,
        delta=report.delta,
        import_count=report.import_count,
    )
