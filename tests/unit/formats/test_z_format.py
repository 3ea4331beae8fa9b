"""Unit tests for the z codec."""

from __future__ import annotations

import pytest

from core.errors import DecodeError
from core.types import Record
from formats.registry import get_codec
from formats.z_format import ZFormatCodec


def test_encode_scales_score_by_four() -> None:
    """Encoder should write rounded score times four as integer."""
    line = ZFormatCodec().encode(Record(score=12.5, path="/home/alice"))

    assert line == "/home/alice|50|1"


def test_encode_uses_configured_timestamp() -> None:
    """Encoder should write the configured timestamp field."""
    line = ZFormatCodec(timestamp=1700000000).encode(Record(score=1.0, path="/tmp"))

    assert line.endswith("|1700000000")


def test_decode_keeps_raw_integer_score() -> None:
    """Decoder should not divide the z rank back."""
    record = ZFormatCodec().decode("/home/alice|104|1700000000")

    assert record == Record(score=104.0, path="/home/alice")


def test_decode_requires_numeric_timestamp() -> None:
    """Decoder should fail when the timestamp is missing or not numeric."""
    with pytest.raises(DecodeError):
        ZFormatCodec().decode("/home/alice|104|yesterday")


def test_decode_rejects_fractional_score() -> None:
    """Decoder should fail for non-integer z ranks."""
    with pytest.raises(DecodeError):
        ZFormatCodec().decode("/home/alice|10.5|1")


def test_registry_returns_codec_by_name() -> None:
    """Registry should map format names to codecs."""
    assert get_codec("z").name == "z"


def test_registry_rejects_unknown_format() -> None:
    """Registry should fail for unknown format names."""
    with pytest.raises(ValueError):
        get_codec("json")  # type: ignore[arg-type]
