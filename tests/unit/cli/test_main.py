"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

from cli.main import main
from tests.fake_store import FakeFrecencyStore
from tests.fixture_paths import fixture_path


def test_cli_export_writes_file(data_dir: Path, tmp_path: Path, capsys) -> None:
    """CLI export should write the store and print the count."""
    output = tmp_path / "out.csv"

    exit_code = main(["--data-dir", str(data_dir), "export", "--simple", str(output)])

    assert exit_code == 0
    assert "Exported 2 entries" in capsys.readouterr().out
    assert output.read_text(encoding="utf-8").splitlines()[0] == '"3.0","/keep"'


def test_cli_export_sorted_full_rows(data_dir: Path, tmp_path: Path) -> None:
    """Sorted full export should keep the URI column by default."""
    output = tmp_path / "out.csv"

    main(["--data-dir", str(data_dir), "export", "-s", str(output)])

    assert output.read_text(encoding="utf-8").splitlines() == [
        '"3.0","/keep","keep"',
        '"2.0","/a/b","a","b"',
    ]


def test_cli_getzoxide_filters_by_keyword(data_dir: Path, tmp_path: Path) -> None:
    """getzoxide should dump matching entries as autojump lines."""
    output = tmp_path / "dump.txt"

    main(["--data-dir", str(data_dir), "getzoxide", str(output), "a"])

    assert output.read_text(encoding="utf-8") == "2.0\t/a/b\n"


def test_cli_convert_tosimplecsv(data_dir: Path, tmp_path: Path, capsys) -> None:
    """Conversion commands should write the target format."""
    output = tmp_path / "out.csv"

    exit_code = main(
        ["--data-dir", str(data_dir), "tosimplecsv", str(fixture_path("sample-autojump.txt")), str(output)]
    )

    assert exit_code == 0
    assert "Converted 4 entries" in capsys.readouterr().out


def test_cli_backup_then_restore(data_dir: Path) -> None:
    """backup and restore should round the store file through the backup."""
    store_file = data_dir / "db.zo"
    before = store_file.read_bytes()
    main(["--data-dir", str(data_dir), "backup"])
    store_file.write_text("", encoding="utf-8")

    exit_code = main(["--data-dir", str(data_dir), "restore"])

    assert exit_code == 0
    assert store_file.read_bytes() == before


def test_cli_backups_lists_current_backup(data_dir: Path, capsys) -> None:
    """backups should print the current backup path."""
    main(["--data-dir", str(data_dir), "backup"])
    capsys.readouterr()

    main(["--data-dir", str(data_dir), "backups"])

    assert capsys.readouterr().out.strip().endswith("db.zo.backup")


def test_cli_reports_missing_input_as_error(data_dir: Path, tmp_path: Path, capsys) -> None:
    """Domain errors should print to stderr and exit non-zero."""
    exit_code = main(["--data-dir", str(data_dir), "import", "-y", str(tmp_path / "nope.csv")])

    assert exit_code == 1
    assert "error: " in capsys.readouterr().err


def test_cli_restore_without_backup_fails(data_dir: Path) -> None:
    """restore should fail when no backup exists."""
    assert main(["--data-dir", str(data_dir), "restore"]) == 1


def test_fake_store_is_used(data_dir: Path) -> None:
    """CLI fixtures should run against the file-backed fake store."""
    store = FakeFrecencyStore(data_dir / "db.zo")

    assert store.scores() == {"/keep": 3.0, "/a/b": 2.0}
