"""Backup command wiring for the datatools CLI."""

from __future__ import annotations

import argparse
from typing import Any

from store.datatools_sdk import DatatoolsClient


def add_backup_commands(subparsers: Any) -> None:
    """Register backup, restore, and backups subcommands."""
    subparsers.add_parser("backup", help="Back up the database, keeping older backups")
    subparsers.add_parser("restore", help="Restore the database from the current backup")
    subparsers.add_parser("backups", help="List backups oldest-first")


def run_backup_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle backup command."""
    snapshot = client.backup()
    if snapshot.rotated_path is not None:
        print(f"Existing backup moved to {snapshot.rotated_path}")
    print(f"Backed up {snapshot.store_path} to {snapshot.backup_path}")
    return 0


def run_restore_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle restore command."""
    backup_path = client.restore()
    print(f"Restored {backup_path} to {client.snapshots.store_file}")
    return 0


def run_backups_command(client: DatatoolsClient, args: argparse.Namespace) -> int:
    """Handle backups command."""
    for backup_path in client.list_backups():
        print(backup_path)
    return 0
