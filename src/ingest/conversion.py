"""Raw file conversions between interchange formats.

Each named conversion decodes every line of the input with one codec and
re-encodes it with another. Sorting reuses the autojump codec both ways.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.logging_config import get_logger
from core.types import FormatName
from formats.registry import get_codec
from ingest.line_reader import decode_lines, read_source_lines, write_lines
from transforms.hierarchical_sort import sort_hierarchically

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ConversionSpec:
    """Source and target formats of one named conversion."""

    source_format: FormatName
    target_format: FormatName
    sort: bool = False


CONVERSIONS: dict[str, ConversionSpec] = {
    "tocsv": ConversionSpec("autojump", "fullcsv"),
    "tosimplecsv": ConversionSpec("autojump", "simplecsv"),
    "totext": ConversionSpec("fullcsv", "autojump"),
    "fromsimplecsv": ConversionSpec("simplecsv", "autojump"),
    "toz": ConversionSpec("autojump", "z"),
    "fromz": ConversionSpec("z", "autojump"),
    "sort": ConversionSpec("autojump", "autojump", sort=True),
}


@dataclass(frozen=True)
class ConversionRequest:
    """Request payload for a file conversion.

    Attributes:
        conversion: Name of a registered conversion.
        input_path: Source file.
        output_path: Destination file, overwritten.
        keep_uri: Full CSV output only, include the URI column.
    """

    conversion: str
    input_path: str
    output_path: str
    keep_uri: bool = False


def convert_file(request: ConversionRequest) -> int:
    """Convert one file and return the number of records written.

    Raises:
        ValueError: If the conversion name is unknown.
        NotFoundError: If the input file is missing.
        DecodeError: If an input line does not match the source format.
    """
    spec = CONVERSIONS.get(request.conversion)
    if spec is None:
        raise ValueError(
            f"Unknown conversion {request.conversion!r}. "
            f"Supported: {', '.join(sorted(CONVERSIONS))}."
        )
    input_path = Path(request.input_path).expanduser()
    source_codec = get_codec(spec.source_format)
    target_codec = get_codec(spec.target_format, keep_uri=request.keep_uri)
    decoded = decode_lines(input_path, read_source_lines(input_path), source_codec)
    records = [item.record for item in decoded]
    if spec.sort:
        records = sort_hierarchically(records)
    written = write_lines(
        Path(request.output_path).expanduser(),
        (target_codec.encode(record) for record in records),
    )
    _LOGGER.info(
        "file_converted",
        conversion=request.conversion,
        input_path=request.input_path,
        output_path=request.output_path,
        record_count=written,
    )
    return written
