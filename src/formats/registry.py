"""Codec lookup by format name."""

from __future__ import annotations

from typing import Protocol

from core.types import SUPPORTED_FORMATS, FormatName, Record
from formats.autojump import AutojumpCodec
from formats.full_tabular import FullTabularCodec
from formats.simple_tabular import SimpleTabularCodec
from formats.z_format import ZFormatCodec


class LineCodec(Protocol):
    """Encode/decode contract shared by all line codecs."""

    name: FormatName

    def decode(self, line: str) -> Record: ...

    def encode(self, record: Record) -> str: ...


def get_codec(format_name: FormatName, keep_uri: bool = False) -> LineCodec:
    """Return a codec instance for a format.

    Args:
        format_name: One of the supported format names.
        keep_uri: Full CSV only, write the URI column on encode.

    Returns:
        Codec instance.

    Raises:
        ValueError: If format name is unknown.
    """
    if format_name == "autojump":
        return AutojumpCodec()
    if format_name == "simplecsv":
        return SimpleTabularCodec()
    if format_name == "fullcsv":
        return FullTabularCodec(keep_uri=keep_uri)
    if format_name == "z":
        return ZFormatCodec()
    raise ValueError(
        f"Unsupported format {format_name!r}. Supported: {', '.join(SUPPORTED_FORMATS)}."
    )
