"""Raw conversion command wiring for the datatools CLI."""

from __future__ import annotations

import argparse
from typing import Any

from ingest.conversion import CONVERSIONS, ConversionRequest
from store.datatools_sdk import DatatoolsClient

_CONVERSION_HELP = {
    "tocsv": "Convert score<TAB>path lines to full CSV",
    "tosimplecsv": "Convert score<TAB>path lines to simple CSV",
    "totext": "Convert full CSV back to score<TAB>path lines",
    "fromsimplecsv": "Convert simple CSV back to score<TAB>path lines",
    "toz": "Convert score<TAB>path lines to z format",
    "fromz": "Convert z format to score<TAB>path lines (scores stay in z units)",
    "sort": "Sort score<TAB>path lines hierarchically",
}


def add_convert_commands(subparsers: Any) -> None:
    """Register one subcommand per named conversion."""
    for name in CONVERSIONS:
        parser = subparsers.add_parser(name, help=_CONVERSION_HELP[name])
        if CONVERSIONS[name].target_format == "fullcsv":
            parser.add_argument(
                "--keep-uri",
                "-k",
                action="store_true",
                help="Keep the full path as second column",
            )
        parser.add_argument("input", help="Input file")
        parser.add_argument("output", help="Output file")


def run_convert_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle any conversion command."""
    request = ConversionRequest(
        conversion=args.command,
        input_path=args.input,
        output_path=args.output,
        keep_uri=getattr(args, "keep_uri", False),
    )
    count = client.convert(request)
    print(f"Converted {count} entries from {args.input} to {args.output}")
    return 0
