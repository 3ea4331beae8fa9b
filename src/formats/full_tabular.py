"""Full CSV line codec with one column per path segment.

Rows look like ``"score","seg1","seg2",...``. The URI-preserving variant
keeps the whole path as second field: ``"score","/seg1/seg2","seg1","seg2"``.
"""

from __future__ import annotations

from core.constants import PATH_SEPARATOR, ROOT_PATH
from core.types import FormatName, Record
from formats.fields import format_score, parse_score, quote_field, require_quoted_fields


class FullTabularCodec:
    """Encode and decode segment-per-column CSV rows."""

    name: FormatName = "fullcsv"

    def __init__(self, keep_uri: bool = False) -> None:
        self._keep_uri = keep_uri

    def decode(self, line: str) -> Record:
        """Decode one full CSV row.

        The second field is used verbatim when it is an absolute path;
        otherwise every remaining field is a segment.
        """
        fields = require_quoted_fields(line.strip(), "full CSV")
        score = parse_score(fields[0].strip(), line)
        trailing = fields[1:]
        if trailing and trailing[0].startswith(PATH_SEPARATOR):
            return Record(score=score, path=trailing[0])
        return Record(score=score, path=join_segments(trailing))

    def encode(self, record: Record) -> str:
        """Encode one record, with the URI column when configured."""
        fields = [format_score(record.score)]
        if self._keep_uri:
            fields.append(record.path)
        fields.extend(split_segments(record.path))
        return ",".join(quote_field(field) for field in fields)


def split_segments(path: str) -> list[str]:
    """Split a path into segments after dropping one leading separator."""
    relative = path[1:] if path.startswith(PATH_SEPARATOR) else path
    return relative.split(PATH_SEPARATOR)


def join_segments(segments: list[str]) -> str:
    """Join segments into an absolute path; no content means root."""
    if not any(segments):
        return ROOT_PATH
    return PATH_SEPARATOR + PATH_SEPARATOR.join(segments)
