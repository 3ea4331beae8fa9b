"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fake_store import FakeFrecencyStore, fake_store_factory


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Data directory holding a small fake store, wired into the SDK."""
    monkeypatch.setenv("ZDT_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    monkeypatch.setattr("store.datatools_sdk.ZoxideStore", fake_store_factory)
    directory = tmp_path / "zoxide"
    directory.mkdir()
    FakeFrecencyStore.with_records(directory / "db.zo", {"/keep": 3.0, "/a/b": 2.0})
    return directory
