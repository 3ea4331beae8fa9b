"""Import command wiring for the datatools CLI.

The interactive prompts live here: mode selection when neither
``--merge`` nor ``--replace`` is given, the confirmation gate before the
store is mutated, and the optional backup cleanup afterwards.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import DEFAULT_EXPORT_FILE_NAME
from core.types import ImportMode, ImportOptions, ImportReport, ImportSession
from ingest.import_pipeline import ConfirmCallback, forces_full_clear
from store.datatools_sdk import DatatoolsClient


def add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Import a file of any supported format")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--merge",
        dest="mode",
        action="store_const",
        const="merge",
        help="Add or update entries, keep existing ones",
    )
    mode.add_argument(
        "--replace",
        dest="mode",
        action="store_const",
        const="replace",
        help="Make the database contain exactly the imported entries",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show detected format and counts without importing",
    )
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Skip prompts: merge unless told otherwise, keep the backup",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_EXPORT_FILE_NAME,
        help=f"Import file (default: {DEFAULT_EXPORT_FILE_NAME})",
    )


def run_import_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle import command."""
    print(f"Importing from {args.filename}...")
    mode = _resolve_mode(args.mode, interactive=not (args.yes or args.dry_run))
    options = ImportOptions(source_path=args.filename, mode=mode, dry_run=args.dry_run)
    report = client.import_file(options, confirm=_build_confirm(args.yes))
    if report.state == "dry_run_reported":
        _print_summary(report.format_name, report.import_count, report.pre_count, report.mode)
        print()
        print("DRY RUN - No changes will be made")
        return 0
    if report.state == "cancelled":
        print("Import cancelled")
        return 0
    _print_completion(report)
    if not args.yes:
        _offer_backup_cleanup(client)
    return 0


def _resolve_mode(requested: ImportMode | None, interactive: bool) -> ImportMode:
    """Return the requested mode, asking the user when none was given."""
    if requested is not None:
        return requested
    if not interactive:
        return "merge"
    print()
    print("Choose import mode:")
    print("  [M]erge - Add/update entries, keep existing data (safer)")
    print("  [R]eplace - Replace entire database with import data")
    print()
    reply = _ask("Import mode (M/r): ")
    if reply.startswith("r"):
        print("Replace mode selected - will remove paths not in import file")
        return "replace"
    print("Merge mode selected - will add/update entries")
    return "merge"


def _build_confirm(assume_yes: bool) -> ConfirmCallback:
    """Build the confirmation gate shown before mutation."""

    def confirm(session: ImportSession) -> bool:
        format_name = session.detected_format or "unknown"
        _print_summary(format_name, session.import_count, session.pre_count, session.mode)
        if session.detected_format and forces_full_clear(session.detected_format):
            print("  Note: this format always clears the database before loading")
        if assume_yes:
            return True
        print()
        reply = _ask("Continue with import? [y/N]: ")
        return reply.startswith("y")

    return confirm


def _print_summary(format_name: str, import_count: int, current_count: int, mode: str) -> None:
    print()
    print("Import Summary:")
    print(f"  Import file: {import_count} entries ({format_name} format)")
    print(f"  Current database: {current_count} entries")
    print(f"  Mode: {mode}")
    if mode == "replace":
        print("  Warning: Replace mode will remove paths not in import file")


def _print_completion(report: ImportReport) -> None:
    print()
    print("Import completed successfully!")
    print(f"Final database: {report.post_count} entries")
    if report.delta > 0:
        print(f"Added: {report.delta} entries")
    elif report.delta < 0:
        print(f"Removed: {-report.delta} entries")
    else:
        print("Updated existing entries")


def _offer_backup_cleanup(client: DatatoolsClient) -> None:
    print()
    reply = _ask("Remove the backup file created during import? [y/N]: ")
    if reply.startswith("y"):
        client.discard_backup()
        print("Backup removed")
    else:
        print("Backup preserved for safety")


def _ask(prompt: str) -> str:
    """Read one normalized reply; closed stdin counts as the default answer."""
    try:
        return input(prompt).strip().lower()
    except EOFError:
        print()
        return ""
