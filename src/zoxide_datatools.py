"""Public SDK surface for zoxide-datatools.

This module provides a stable import path for library users.
It re-exports the primary client and typed option models.
"""

from __future__ import annotations

from core.config import DatatoolsConfig
from core.types import (
    ExportOptions,
    ExportResult,
    ImportOptions,
    ImportReport,
    Record,
    Snapshot,
)
from formats.registry import get_codec
from ingest.conversion import CONVERSIONS, ConversionRequest
from ingest.format_detection import detect_format
from store.datatools_sdk import DatatoolsClient
from transforms.hierarchical_sort import sort_hierarchically

__all__ = [
    "CONVERSIONS",
    "ConversionRequest",
    "DatatoolsClient",
    "DatatoolsConfig",
    "ExportOptions",
    "ExportResult",
    "ImportOptions",
    "ImportReport",
    "Record",
    "Snapshot",
    "detect_format",
    "get_codec",
    "sort_hierarchically",
]
