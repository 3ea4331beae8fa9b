"""Unit tests for the full CSV codec."""

from __future__ import annotations

import pytest

from core.errors import DecodeError
from core.types import Record
from formats.full_tabular import FullTabularCodec, join_segments, split_segments

_ROUND_TRIP_RECORDS = [
    Record(score=26.0, path="/home/alice"),
    Record(score=1.0, path="/"),
    Record(score=2.5, path="/a/b/c"),
    Record(score=4.0, path='/x/"q"/y,z'),
    Record(score=8.0, path="/trailing/"),
]


@pytest.mark.parametrize("keep_uri", [False, True])
@pytest.mark.parametrize("record", _ROUND_TRIP_RECORDS)
def test_decode_inverts_encode(record: Record, keep_uri: bool) -> None:
    """Decoding an encoded record should return the same record."""
    codec = FullTabularCodec(keep_uri=keep_uri)

    assert codec.decode(codec.encode(record)) == record


def test_encode_splits_segments() -> None:
    """Encoder should write one column per path segment."""
    line = FullTabularCodec().encode(Record(score=12.5, path="/home/alice/projects"))

    assert line == '"12.5","home","alice","projects"'


def test_encode_with_uri_keeps_full_path() -> None:
    """URI variant should put the full path in the second column."""
    line = FullTabularCodec(keep_uri=True).encode(Record(score=1.0, path="/a/b"))

    assert line == '"1.0","/a/b","a","b"'


def test_decode_prefers_uri_field() -> None:
    """Decoder should use the URI column verbatim when present."""
    record = FullTabularCodec().decode('"3.0","/real/path","edited","segments"')

    assert record.path == "/real/path"


def test_decode_joins_segments_without_uri() -> None:
    """Decoder should rebuild the path from segment columns."""
    record = FullTabularCodec().decode('"3.0","usr","local","bin"')

    assert record == Record(score=3.0, path="/usr/local/bin")


def test_decode_empty_segments_is_root() -> None:
    """An all-empty segment list should decode to the root path."""
    record = FullTabularCodec().decode('"9.0","",""')

    assert record.path == "/"


def test_decode_rejects_bad_score() -> None:
    """Decoder should fail for a non-numeric score column."""
    with pytest.raises(DecodeError):
        FullTabularCodec().decode('"many","home"')


def test_split_and_join_segments_are_inverse() -> None:
    """Segment helpers should invert each other for absolute paths."""
    assert join_segments(split_segments("/a/b")) == "/a/b"
