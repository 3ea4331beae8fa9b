"""Hierarchical ordering of frecency records.

This module sorts records parent-first: shallower paths come before
deeper ones, ties broken by plain string order of the path.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import PATH_SEPARATOR
from core.types import Record


def path_depth(path: str) -> int:
    """Return the number of separator-delimited segments minus one.

    Args:
        path: Absolute path.

    Returns:
        Depth where ``/a`` is 1 and ``/a/b`` is 2.
    """
    return len(path.split(PATH_SEPARATOR)) - 1


def sort_hierarchically(records: Iterable[Record]) -> list[Record]:
    """Order records by path depth, then path.

    Args:
        records: Records in any order.

    Returns:
        New list sorted stably by ``(depth, path)``.
    """
    return sorted(records, key=lambda record: (path_depth(record.path), record.path))
