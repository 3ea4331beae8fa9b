"""Store export to editable interchange files.

This module dumps the store through the CSV codecs, or as raw autojump
lines, optionally in hierarchical order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.logging_config import get_logger
from core.types import ExportOptions, ExportResult, FormatName, Record
from formats.registry import get_codec
from ingest.line_reader import write_lines
from store.zoxide_store import FrecencyStore
from transforms.hierarchical_sort import sort_hierarchically

_LOGGER = get_logger(__name__)


def export_store(store: FrecencyStore, options: ExportOptions) -> ExportResult:
    """Export every store entry to a CSV file.

    Args:
        store: Source frecency store.
        options: Export options.

    Returns:
        Export summary.

    Raises:
        MutationError: If the store cannot be listed.
    """
    format_name: FormatName = "simplecsv" if options.simple else "fullcsv"
    records = store.list_all()
    count = write_records(
        Path(options.output_path).expanduser(),
        records,
        format_name,
        keep_uri=options.keep_uri,
        sort=options.sort,
    )
    _LOGGER.info(
        "store_exported",
        output_path=options.output_path,
        format_name=format_name,
        record_count=count,
        sorted=options.sort,
    )
    return ExportResult(
        output_path=options.output_path,
        format_name=format_name,
        record_count=count,
        sorted=options.sort,
    )


def write_records(
    output_path: Path,
    records: Sequence[Record],
    format_name: FormatName,
    keep_uri: bool = False,
    sort: bool = False,
) -> int:
    """Encode records with one codec and write them to a file.

    Returns:
        Number of records written.
    """
    codec = get_codec(format_name, keep_uri=keep_uri)
    ordered = sort_hierarchically(records) if sort else list(records)
    return write_lines(output_path, (codec.encode(record) for record in ordered))
