"""Autojump line codec.

Lines look like ``score<TAB>path``. zoxide's own ``query --score`` output
pads with spaces instead of a tab, so whitespace separation is accepted too.
"""

from __future__ import annotations

from core.errors import DecodeError
from core.types import FormatName, Record
from formats.fields import format_score, parse_score, require_absolute_path


class AutojumpCodec:
    """Encode and decode ``score<TAB>path`` lines."""

    name: FormatName = "autojump"

    def decode(self, line: str) -> Record:
        """Decode one autojump line.

        Args:
            line: Raw line without terminator.

        Returns:
            Parsed record.

        Raises:
            DecodeError: If score or path is invalid.
        """
        raw_score, raw_path = _split_line(line)
        score = parse_score(raw_score.strip(), line)
        path = require_absolute_path(raw_path.strip(), line)
        return Record(score=score, path=path)

    def encode(self, record: Record) -> str:
        """Encode one record as ``score<TAB>path``."""
        return f"{format_score(record.score)}\t{record.path}"


def _split_line(line: str) -> tuple[str, str]:
    if "\t" in line:
        raw_score, _, raw_path = line.partition("\t")
        return raw_score, raw_path
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        raise DecodeError(
            "Invalid autojump line: expected 'score<TAB>path'.", line=line
        )
    return parts[0], parts[1]
