"""Unit tests for input format detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import NotFoundError, UnrecognizedFormatError
from core.types import Record
from formats.registry import get_codec
from ingest.conversion import ConversionRequest, convert_file
from ingest.format_detection import detect_format, detect_line_format, require_format
from tests.fixture_paths import fixture_path


@pytest.mark.parametrize(
    ("fixture_name", "expected"),
    [
        ("sample-autojump.txt", "autojump"),
        ("sample-z.z", "z"),
        ("sample-simple.csv", "simplecsv"),
        ("sample-full.csv", "fullcsv"),
        ("sample-full-uri.csv", "fullcsv"),
    ],
)
def test_detect_format_classifies_fixtures(fixture_name: str, expected: str) -> None:
    """Detector should classify each sample fixture."""
    assert detect_format(fixture_path(fixture_name)) == expected


def test_detect_format_returns_none_for_unknown_content() -> None:
    """Detector should return None when no grammar matches."""
    assert detect_format(fixture_path("unrecognized.txt")) is None


def test_detect_line_prefers_z_grammar() -> None:
    """z grammar should be tested before autojump."""
    assert detect_line_format("/home/alice|10|1700000000") == "z"


def test_detect_line_two_quoted_fields_is_simple() -> None:
    """Two quoted fields with an absolute path should be simple CSV."""
    assert detect_line_format('"2.0","/home/alice"') == "simplecsv"


def test_detect_line_single_segment_row_is_full() -> None:
    """A one-segment full row should not be mistaken for simple CSV."""
    assert detect_line_format('"1.0","tmp"') == "fullcsv"


def test_detect_format_uses_later_line_when_first_is_unknown(tmp_path: Path) -> None:
    """Detector should keep sampling until a line matches."""
    source = tmp_path / "mixed.csv"
    source.write_text('score,path\n"3.0","home","alice"\n', encoding="utf-8")

    assert detect_format(source) == "fullcsv"


def test_detect_format_skips_blank_lines(tmp_path: Path) -> None:
    """Detector should ignore blank lines before data."""
    source = tmp_path / "padded.txt"
    source.write_text("\n\n   \n4.0\t/srv\n", encoding="utf-8")

    assert detect_format(source) == "autojump"


def test_detect_format_only_samples_first_five_lines(tmp_path: Path) -> None:
    """Detector should not look past the first five non-blank lines."""
    source = tmp_path / "late.txt"
    source.write_text("junk\n" * 5 + "4.0\t/srv\n", encoding="utf-8")

    assert detect_format(source) is None


def test_require_format_raises_for_unknown_content() -> None:
    """Strict detection should fail for unrecognized files."""
    with pytest.raises(UnrecognizedFormatError):
        require_format(fixture_path("unrecognized.txt"))


def test_detect_format_raises_for_missing_file(tmp_path: Path) -> None:
    """Detector should fail for a missing input file."""
    with pytest.raises(NotFoundError):
        detect_format(tmp_path / "missing.txt")


_ENCODED_RECORDS = [
    Record(score=26.0, path="/home/alice"),
    Record(score=1.0, path="/tmp"),
    Record(score=0.5, path="/"),
    Record(score=3.0, path='/data/"quoted",dir'),
]


@pytest.mark.parametrize(
    ("format_name", "keep_uri"),
    [
        ("autojump", False),
        ("z", False),
        ("simplecsv", False),
        ("fullcsv", False),
        ("fullcsv", True),
    ],
)
def test_detect_format_recognizes_encoder_output(
    tmp_path: Path, format_name: str, keep_uri: bool
) -> None:
    """A file written by any codec should be detected as that codec."""
    codec = get_codec(format_name, keep_uri=keep_uri)  # type: ignore[arg-type]
    source = tmp_path / "encoded"
    source.write_text(
        "".join(f"{codec.encode(record)}\n" for record in _ENCODED_RECORDS), encoding="utf-8"
    )

    assert detect_format(source) == format_name


def test_detect_format_recognizes_single_segment_tocsv_output(tmp_path: Path) -> None:
    """tocsv output holding only top-level paths should detect as full CSV."""
    source = tmp_path / "top.txt"
    source.write_text("4.0\t/tmp\n1.0\t/\n", encoding="utf-8")
    output = tmp_path / "top.csv"
    convert_file(ConversionRequest(conversion="tocsv", input_path=str(source), output_path=str(output)))

    assert detect_format(output) == "fullcsv"
