"""Z line codec: ``path|score|timestamp``.

z keeps integer ranks that are four times the native frecency score.
Encoding scales by four; decoding keeps the raw integer, so imports of
z-sourced data must replace scores rather than accumulate them.
"""

from __future__ import annotations

import re

from core.constants import Z_PLACEHOLDER_TIMESTAMP, Z_SCORE_SCALE
from core.errors import DecodeError
from core.types import FormatName, Record
from formats.fields import require_absolute_path

Z_LINE_PATTERN = re.compile(r"([^|]+)\|(\d+)\|(\d+)")


class ZFormatCodec:
    """Encode and decode z database lines."""

    name: FormatName = "z"

    def __init__(self, timestamp: int = Z_PLACEHOLDER_TIMESTAMP) -> None:
        self._timestamp = timestamp

    def decode(self, line: str) -> Record:
        """Decode one z line, keeping the integer score unscaled.

        Raises:
            DecodeError: If the line is not ``path|digits|digits``.
        """
        match = Z_LINE_PATTERN.fullmatch(line.strip())
        if match is None:
            raise DecodeError(
                "Invalid z line: expected 'path|integer_score|timestamp'.", line=line
            )
        path = require_absolute_path(match.group(1), line)
        return Record(score=float(int(match.group(2))), path=path)

    def encode(self, record: Record) -> str:
        """Encode one record with its score scaled to z units."""
        z_score = round(record.score * Z_SCORE_SCALE)
        return f"{record.path}|{z_score}|{self._timestamp}"
