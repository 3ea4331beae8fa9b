"""Input line readers for interchange files.

This module loads non-blank lines with their line numbers and decodes
them through a codec, attaching file and line context to failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator

from core.errors import DecodeError, NotFoundError
from core.types import Record
from formats.registry import LineCodec


@dataclass(frozen=True)
class SourceLine:
    """One non-blank input line.

    Attributes:
        line_number: One-based position in the source file.
        text: Line content without terminator.
    """

    line_number: int
    text: str


@dataclass(frozen=True)
class DecodedLine:
    """A source line paired with its decoded record."""

    source: SourceLine
    record: Record


def iter_source_lines(source_path: Path) -> Iterator[SourceLine]:
    """Yield non-blank lines from a text file.

    Args:
        source_path: Input file.

    Yields:
        Source lines in file order.

    Raises:
        NotFoundError: If the file does not exist.
        DecodeError: If a line is not valid UTF-8.
    """
    if not source_path.is_file():
        raise NotFoundError(
            f"Input file not found: {source_path}. "
            "Run 'export' first or pass an existing file."
        )
    with source_path.open("rb") as source_file:
        for line_number, raw_bytes in enumerate(source_file, 1):
            text = _decode_utf8(source_path, line_number, raw_bytes).rstrip("\r\n")
            if text.strip():
                yield SourceLine(line_number=line_number, text=text)


def _decode_utf8(source_path: Path, line_number: int, raw_bytes: bytes) -> str:
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError as error:
        raise DecodeError(
            f"Input file {source_path} is not valid UTF-8 at line {line_number}: {error}. "
            "Re-save the file as UTF-8 and retry.",
            line=raw_bytes.decode("utf-8", errors="replace").rstrip("\r\n"),
            line_number=line_number,
            source=str(source_path),
        ) from error


def read_sample_lines(source_path: Path, limit: int) -> list[SourceLine]:
    """Read at most ``limit`` non-blank lines from the start of a file."""
    return list(islice(iter_source_lines(source_path), limit))


def read_source_lines(source_path: Path) -> list[SourceLine]:
    """Read every non-blank line of a file."""
    return list(iter_source_lines(source_path))


def decode_lines(
    source_path: Path,
    lines: Iterable[SourceLine],
    codec: LineCodec,
) -> list[DecodedLine]:
    """Decode lines, failing on the first invalid one.

    Args:
        source_path: File the lines came from, for error context.
        lines: Source lines to decode.
        codec: Codec for the file format.

    Returns:
        Decoded lines in input order.

    Raises:
        DecodeError: With file path and line number of the first bad line.
    """
    decoded: list[DecodedLine] = []
    for line in lines:
        try:
            record = codec.decode(line.text)
        except DecodeError as error:
            raise DecodeError(
                f"Failed to decode {codec.name} line at {source_path}:{line.line_number}: "
                f"{error} Line: {line.text!r}. Fix the line and retry.",
                line=line.text,
                line_number=line.line_number,
                source=str(source_path),
            ) from error
        decoded.append(DecodedLine(source=line, record=record))
    return decoded


def latest_by_path(decoded: Iterable[DecodedLine]) -> list[DecodedLine]:
    """Keep the last occurrence of each path, in first-seen order."""
    by_path: dict[str, DecodedLine] = {}
    for item in decoded:
        by_path[item.record.path] = item
    return list(by_path.values())


def write_lines(output_path: Path, lines: Iterable[str]) -> int:
    """Write lines to a file, one per row.

    Returns:
        Number of lines written.
    """
    line_list = list(lines)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{line}\n" for line in line_list)
    output_path.write_text(body, encoding="utf-8")
    return len(line_list)
