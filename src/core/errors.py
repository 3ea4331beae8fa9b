"""Datatools exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class DatatoolsError(Exception):
    """Base exception for all datatools failures."""


class ConfigError(DatatoolsError):
    """Raised for invalid runtime configuration."""


class NotFoundError(DatatoolsError):
    """Raised when an input, store, or backup file is missing."""


class DecodeError(DatatoolsError):
    """Raised when a line violates its codec grammar.

    Attributes:
        line: Offending raw line.
        line_number: One-based line number when known.
        source: Source file path when known.
    """

    def __init__(
        self,
        message: str,
        line: str = "",
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.line_number = line_number
        self.source = source


class UnrecognizedFormatError(DatatoolsError):
    """Raised when no codec matches the sampled input lines."""


class MutationError(DatatoolsError):
    """Raised when an underlying store operation fails."""


class BackupError(DatatoolsError):
    """Raised for filesystem failures while snapshotting the store."""


class RollbackError(DatatoolsError):
    """Raised when restoring a backup after a failed mutation also fails."""
