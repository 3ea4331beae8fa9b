"""zoxide-backed frecency store.

This module defines the store contract used by the import pipeline and
implements it by running the ``zoxide`` executable. Bulk loads go through
temporary files handed to ``zoxide import``.
"""

from __future__ import annotations

import os
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Protocol, Sequence

from core.config import DatatoolsConfig
from core.errors import DecodeError, MutationError
from core.logging_config import get_logger
from core.types import FormatName, Record
from formats.autojump import AutojumpCodec

_LOGGER = get_logger(__name__)

BULK_LOAD_FORMATS: tuple[FormatName, ...] = ("z", "autojump")
_NO_MATCH_MARKER = "no match found"
_NOT_IN_DATABASE_MARKER = "not found"

CommandRunner = Callable[..., "subprocess.CompletedProcess[str]"]


class FrecencyStore(Protocol):
    """Store operations required by import and export workflows."""

    @property
    def backing_file(self) -> Path: ...

    def list_all(self) -> list[Record]: ...

    def upsert(self, record: Record) -> None: ...

    def remove(self, path: str) -> None: ...

    def bulk_load(self, format_name: FormatName, lines: Sequence[str]) -> None: ...


class ZoxideStore:
    """Frecency store adapter over the zoxide command line."""

    def __init__(
        self,
        config: DatatoolsConfig,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        """Create adapter from config.

        Args:
            config: Runtime configuration with binary, data dir, and timeout.
            runner: ``subprocess.run`` compatible callable.
        """
        self._config = config
        self._runner = runner
        self._codec = AutojumpCodec()

    @property
    def backing_file(self) -> Path:
        """Return the zoxide database file."""
        return self._config.store_file

    def query(self, keywords: Sequence[str] = ()) -> list[Record]:
        """List scored entries, optionally filtered by zoxide keywords.

        Raises:
            MutationError: If zoxide fails or prints unparseable output.
        """
        result = self._run(["query", "--list", "--all", "--score", *keywords], check=False)
        if result.returncode != 0:
            if not result.stdout.strip() and _NO_MATCH_MARKER in result.stderr:
                return []
            raise _command_error(["query", *keywords], result)
        records: list[Record] = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            try:
                records.append(self._codec.decode(line))
            except DecodeError as error:
                raise MutationError(
                    f"Unexpected zoxide query output line {line!r}: {error}"
                ) from error
        return records

    def list_all(self) -> list[Record]:
        """List every scored entry in the store."""
        return self.query()

    def upsert(self, record: Record) -> None:
        """Add a path, or overwrite its score when already present."""
        result = self._run(["remove", record.path], check=False)
        if result.returncode != 0 and _NOT_IN_DATABASE_MARKER not in result.stderr:
            raise _command_error(["remove", record.path], result)
        self._import_lines("autojump", [self._codec.encode(record)])

    def remove(self, path: str) -> None:
        """Remove a path from the store."""
        self._run(["remove", path])

    def bulk_load(self, format_name: FormatName, lines: Sequence[str]) -> None:
        """Import pre-encoded lines in one zoxide import call.

        Raises:
            MutationError: If the format is not importable or zoxide fails.
        """
        if format_name not in BULK_LOAD_FORMATS:
            raise MutationError(
                f"zoxide cannot bulk load {format_name!r} data. "
                f"Supported: {', '.join(BULK_LOAD_FORMATS)}."
            )
        self._import_lines(format_name, lines)

    def _import_lines(self, format_name: FormatName, lines: Sequence[str]) -> None:
        if not lines:
            return
        suffix = ".z" if format_name == "z" else ".txt"
        try:
            handle, temp_name = tempfile.mkstemp(prefix="zoxide_import_", suffix=suffix)
        except OSError as error:
            raise MutationError(
                f"Failed to create a temporary import file: {error}. "
                "Check free space in the temporary directory."
            ) from error
        temp_path = Path(temp_name)
        try:
            _write_temp_lines(handle, temp_path, lines)
            self._run(["import", f"--from={format_name}", "--merge", temp_name])
        finally:
            _remove_temp_file(temp_path)
        _LOGGER.info("store_bulk_loaded", format_name=format_name, line_count=len(lines))

    def _run(
        self, arguments: list[str], check: bool = True
    ) -> "subprocess.CompletedProcess[str]":
        command = [self._config.zoxide_bin, *arguments]
        env = {**os.environ, "_ZO_DATA_DIR": str(self._config.data_dir)}
        try:
            result = self._runner(
                command,
                capture_output=True,
                text=True,
                timeout=self._config.command_timeout,
                env=env,
                check=False,
            )
        except FileNotFoundError as error:
            raise MutationError(
                f"zoxide executable not found: {self._config.zoxide_bin}. "
                "Install zoxide or set ZDT_ZOXIDE_BIN."
            ) from error
        except subprocess.TimeoutExpired as error:
            raise MutationError(
                f"zoxide command timed out after {self._config.command_timeout}s: "
                f"{' '.join(command)}."
            ) from error
        except OSError as error:
            raise MutationError(
                f"Failed to run zoxide command {' '.join(command)}: {error}."
            ) from error
        if check and result.returncode != 0:
            raise _command_error(arguments, result)
        return result


def _command_error(
    arguments: Sequence[str], result: "subprocess.CompletedProcess[str]"
) -> MutationError:
    detail = result.stderr.strip() or f"exit status {result.returncode}"
    return MutationError(f"zoxide {' '.join(arguments)} failed: {detail}")


def _write_temp_lines(handle: int, temp_path: Path, lines: Sequence[str]) -> None:
    """Write import lines to an open temporary file descriptor."""
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
            temp_file.writelines(f"{line}\n" for line in lines)
    except OSError as error:
        raise MutationError(
            f"Failed to write temporary import file {temp_path}: {error}. "
            "Check free space in the temporary directory."
        ) from error


def _remove_temp_file(temp_path: Path) -> None:
    """Best-effort temporary file cleanup."""
    try:
        temp_path.unlink()
    except OSError:
        pass
