"""Field-level parsing shared by the line codecs.

This module handles score text, quoted CSV fields, and path checks
so each codec only describes the shape of its own grammar.
"""

from __future__ import annotations

import math
import re

from core.constants import PATH_SEPARATOR, SCORE_DECIMALS
from core.errors import DecodeError

QUOTED_FIELD_PATTERN = r'"(?:[^"]|"")*"'
_QUOTED_ROW = re.compile(rf"{QUOTED_FIELD_PATTERN}(?:,{QUOTED_FIELD_PATTERN})*")
_QUOTED_FIELD_BODY = re.compile(r'"((?:[^"]|"")*)"')


def parse_score(raw_score: str, line: str) -> float:
    """Parse a non-negative decimal score.

    Args:
        raw_score: Score text, already trimmed.
        line: Full source line for error context.

    Returns:
        Parsed score.

    Raises:
        DecodeError: If text is not a finite non-negative number.
    """
    try:
        score = float(raw_score)
    except ValueError as error:
        raise DecodeError(
            f"Invalid score {raw_score!r}: expected a decimal number.", line=line
        ) from error
    if not math.isfinite(score) or score < 0:
        raise DecodeError(
            f"Invalid score {raw_score!r}: expected a finite non-negative number.",
            line=line,
        )
    return score


def format_score(score: float) -> str:
    """Render a score with one fractional digit."""
    return f"{score:.{SCORE_DECIMALS}f}"


def require_absolute_path(path: str, line: str) -> str:
    """Return path unchanged when it starts with the separator.

    Raises:
        DecodeError: If path is relative or empty.
    """
    if not path.startswith(PATH_SEPARATOR):
        raise DecodeError(
            f"Invalid path {path!r}: expected an absolute path starting with '/'.",
            line=line,
        )
    return path


def quote_field(value: str) -> str:
    """Quote one CSV field, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def split_quoted_fields(line: str) -> list[str] | None:
    """Split a row made only of quoted, comma-separated fields.

    Args:
        line: Row text without line terminator.

    Returns:
        Unescaped field values, or None when the row is not fully quoted.
    """
    if _QUOTED_ROW.fullmatch(line) is None:
        return None
    return [body.replace('""', '"') for body in _QUOTED_FIELD_BODY.findall(line)]


def require_quoted_fields(line: str, format_label: str) -> list[str]:
    """Split a quoted row or fail with a decode error.

    Raises:
        DecodeError: If the row contains unquoted or malformed fields.
    """
    fields = split_quoted_fields(line)
    if fields is None:
        raise DecodeError(
            f"Invalid {format_label} row: every field must be double-quoted "
            "and separated by commas.",
            line=line,
        )
    return fields
