"""Export command wiring for the datatools CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import DEFAULT_EXPORT_FILE_NAME
from core.types import ExportOptions
from store.datatools_sdk import DatatoolsClient


def add_export_commands(subparsers: Any) -> None:
    """Register export and getzoxide subcommands."""
    parser = subparsers.add_parser("export", help="Export the database to CSV for editing")
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "--simple",
        action="store_true",
        help="Write simple rows: score,path",
    )
    layout.add_argument(
        "--keep-uri",
        "-k",
        action="store_true",
        help="Write full rows with the path as second column (default)",
    )
    parser.add_argument(
        "--sort",
        "-s",
        action="store_true",
        help="Sort entries hierarchically",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_EXPORT_FILE_NAME,
        help=f"Output file (default: {DEFAULT_EXPORT_FILE_NAME})",
    )
    dump_parser = subparsers.add_parser("getzoxide", help="Dump raw score<TAB>path lines")
    dump_parser.add_argument("output", help="Output file")
    dump_parser.add_argument("keywords", nargs="*", help="Optional zoxide query keywords")


def run_export_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle export command."""
    options = ExportOptions(
        output_path=args.filename,
        simple=args.simple,
        keep_uri=not args.simple,
        sort=args.sort,
    )
    result = client.export(options)
    layout = "simple CSV" if options.simple else "full CSV with URIs"
    sorted_note = ", sorted" if result.sorted else ""
    print(f"Exported {result.record_count} entries to {result.output_path} ({layout}{sorted_note})")
    print()
    print("Next steps:")
    print(f"  1. Edit {result.output_path} in your favorite spreadsheet application")
    print(f"  2. Run: zoxide-datatools import {result.output_path} to import your changes")
    return 0


def run_getzoxide_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle getzoxide command."""
    count = client.dump(args.output, args.keywords)
    print(f"Wrote {count} entries to {args.output}")
    return 0
