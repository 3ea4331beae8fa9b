"""Simple CSV line codec: ``"score","path"``."""

from __future__ import annotations

from core.errors import DecodeError
from core.types import FormatName, Record
from formats.fields import (
    format_score,
    parse_score,
    quote_field,
    require_absolute_path,
    require_quoted_fields,
)


class SimpleTabularCodec:
    """Encode and decode two-field quoted CSV rows."""

    name: FormatName = "simplecsv"

    def decode(self, line: str) -> Record:
        """Decode one simple CSV row.

        Args:
            line: Raw row without terminator.

        Returns:
            Parsed record.

        Raises:
            DecodeError: If the row does not hold exactly two quoted fields.
        """
        text = line.strip()
        fields = require_quoted_fields(text, "simple CSV")
        if len(fields) != 2:
            raise DecodeError(
                f"Invalid simple CSV row: expected 2 fields, got {len(fields)}.",
                line=line,
            )
        score = parse_score(fields[0].strip(), line)
        path = require_absolute_path(fields[1], line)
        return Record(score=score, path=path)

    def encode(self, record: Record) -> str:
        """Encode one record as ``"score","path"``."""
        return f"{quote_field(format_score(record.score))},{quote_field(record.path)}"
