"""Input format detection.

This module classifies a file by sampling its first non-blank lines and
testing each against an ordered list of grammar predicates. The first
line that matches any predicate decides the format.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

from core.constants import DETECTION_SAMPLE_LINES
from core.errors import UnrecognizedFormatError
from core.logging_config import get_logger
from core.types import SUPPORTED_FORMATS, FormatName
from formats.fields import QUOTED_FIELD_PATTERN
from ingest.line_reader import read_sample_lines

_LOGGER = get_logger(__name__)

_Z_LINE = re.compile(r"[^|]+\|\d+\|\d+")
_AUTOJUMP_LINE = re.compile(r"\d+(\.\d+)?\s+/.*")
_SIMPLE_CSV_LINE = re.compile(rf'{QUOTED_FIELD_PATTERN},"/(?:[^"]|"")*"')
# Two-field rows with an absolute second field are claimed by the simple rule first.
_FULL_CSV_LINE = re.compile(rf"{QUOTED_FIELD_PATTERN}(?:,{QUOTED_FIELD_PATTERN})+")

_DETECTION_RULES: tuple[tuple[FormatName, Callable[[str], object]], ...] = (
    ("z", _Z_LINE.fullmatch),
    ("autojump", _AUTOJUMP_LINE.fullmatch),
    ("simplecsv", _SIMPLE_CSV_LINE.fullmatch),
    ("fullcsv", _FULL_CSV_LINE.fullmatch),
)


def detect_line_format(line: str) -> FormatName | None:
    """Classify one line, or return None when no grammar matches."""
    text = line.strip()
    for format_name, predicate in _DETECTION_RULES:
        if predicate(text):
            return format_name
    return None


def detect_format(source_path: Path) -> FormatName | None:
    """Classify a file from its first non-blank lines.

    Args:
        source_path: Input file.

    Returns:
        Detected format, or None when no sampled line matches.

    Raises:
        NotFoundError: If the file does not exist.
    """
    for line in read_sample_lines(source_path, DETECTION_SAMPLE_LINES):
        format_name = detect_line_format(line.text)
        if format_name is not None:
            return format_name
    return None


def require_format(source_path: Path) -> FormatName:
    """Detect a file format or fail.

    Raises:
        NotFoundError: If the file does not exist.
        UnrecognizedFormatError: If no sampled line matches a known grammar.
    """
    format_name = detect_format(source_path)
    if format_name is None:
        raise UnrecognizedFormatError(
            f"Unsupported file format in {source_path}: none of the first "
            f"{DETECTION_SAMPLE_LINES} non-blank lines match a known grammar. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}."
        )
    _LOGGER.info("format_detected", source_path=str(source_path), format_name=format_name)
    return format_name
