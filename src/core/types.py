"""Shared typed models.

This module defines the immutable records, options, and session models
used by the codecs, the import pipeline, the store adapter, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Literal

FormatName = Literal["z", "autojump", "simplecsv", "fullcsv"]
SUPPORTED_FORMATS: tuple[FormatName, ...] = ("z", "autojump", "simplecsv", "fullcsv")
ImportMode = Literal["merge", "replace"]
ImportState = Literal[
    "start",
    "detected",
    "backed_up",
    "converting",
    "mutating",
    "committed",
    "rolled_back",
    "dry_run_reported",
    "cancelled",
    "error",
]


@dataclass(frozen=True)
class Record:
    """Canonical frecency entry.

    Attributes:
        score: Non-negative frecency score.
        path: Absolute directory path.
    """

    score: float
    path: str


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of the store backing file.

    Attributes:
        store_path: Live store file that was copied.
        backup_path: Current backup file written by the snapshot.
        created_at: Local creation timestamp.
        rotated_path: Previous backup renamed aside, when one existed.
    """

    store_path: Path
    backup_path: Path
    created_at: datetime
    rotated_path: Path | None = None


@dataclass(frozen=True)
class ImportOptions:
    """Import request options.

    Attributes:
        source_path: Input file in any supported format.
        mode: Merge keeps unrelated paths, replace makes the store equal the input.
        dry_run: Report detected format and counts without touching the store.
    """

    source_path: str
    mode: ImportMode = "merge"
    dry_run: bool = False


@dataclass(frozen=True)
class ImportSession:
    """Transient state for one import invocation."""

    source_path: str
    mode: ImportMode
    dry_run: bool
    state: ImportState = "start"
    detected_format: FormatName | None = None
    pre_count: int = 0
    post_count: int = 0
    import_count: int = 0


@dataclass(frozen=True)
class ImportReport:
    """Summary returned by a finished import.

    Attributes:
        source_path: Imported file.
        format_name: Detected input format.
        mode: Requested import mode.
        dry_run: Whether the store was left untouched on purpose.
        state: Terminal session state.
        pre_count: Store entries before import.
        post_count: Store entries after import.
        import_count: Entries found in the input file.
        forced_clear: Whether the store was cleared regardless of mode.
        snapshot: Backup taken before mutation, if any.
    """

    source_path: str
    format_name: FormatName
    mode: ImportMode
    dry_run: bool
    state: ImportState
    pre_count: int
    post_count: int
    import_count: int
    forced_clear: bool = False
    snapshot: Snapshot | None = None

    @property
    def delta(self) -> int:
        """Return net change in store entry count."""
        return self.post_count - self.pre_count


@dataclass(frozen=True)
class ExportOptions:
    """Export request options.

    Attributes:
        output_path: Destination file.
        simple: Write simple ``"score","path"`` rows instead of full rows.
        keep_uri: Keep the full path as second field of full rows.
        sort: Order entries hierarchically before writing.
    """

    output_path: str
    simple: bool = False
    keep_uri: bool = True
    sort: bool = False


@dataclass(frozen=True)
class ExportResult:
    """Summary returned by an export."""

    output_path: str
    format_name: FormatName
    record_count: int
    sorted: bool
