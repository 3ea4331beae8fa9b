"""zoxide-datatools CLI entry points.

This module exposes export, import, conversion, and backup commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.backup_command import (
    add_backup_commands,
    run_backup_command,
    run_backups_command,
    run_restore_command,
)
from cli.convert_command import add_convert_commands, run_convert_command
from cli.export_command import add_export_commands, run_export_command, run_getzoxide_command
from cli.import_command import add_import_command, run_import_command
from core.config import DatatoolsConfig
from core.errors import DatatoolsError
from ingest.conversion import CONVERSIONS
from store.datatools_sdk import DatatoolsClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="zoxide-datatools",
        description="Export, edit, convert, and re-import the zoxide database",
    )
    parser.add_argument("--data-dir", help="Override _ZO_DATA_DIR for this command")
    parser.add_argument("--zoxide-bin", help="Override ZDT_ZOXIDE_BIN for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_export_commands(subparsers)
    add_import_command(subparsers)
    add_convert_commands(subparsers)
    add_backup_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the zoxide-datatools CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_dir, args.zoxide_bin)
        return _dispatch(parser, client, args)
    except DatatoolsError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: DatatoolsClient,
    args: argparse.Namespace,
) -> int:
    """Route parsed arguments to a command handler."""
    if args.command == "export":
        return run_export_command(client, args)
    if args.command == "getzoxide":
        return run_getzoxide_command(client, args)
    if args.command == "import":
        return run_import_command(client, args)
    if args.command in CONVERSIONS:
        return run_convert_command(client, args)
    if args.command == "backup":
        return run_backup_command(client, args)
    if args.command == "restore":
        return run_restore_command(client, args)
    if args.command == "backups":
        return run_backups_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_dir: str | None, zoxide_bin: str | None) -> DatatoolsClient:
    """Build SDK client with optional overrides.

    Args:
        data_dir: Optional zoxide data directory override.
        zoxide_bin: Optional zoxide executable override.

    Returns:
        Configured SDK client.
    """
    config = DatatoolsConfig.from_env()
    if data_dir:
        config = replace(config, data_dir=Path(data_dir).expanduser().resolve())
    if zoxide_bin:
        config = replace(config, zoxide_bin=zoxide_bin)
    return DatatoolsClient(config)
