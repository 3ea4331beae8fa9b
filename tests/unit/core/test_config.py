"""Unit tests for core config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import DatatoolsConfig
from core.errors import ConfigError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ZDT_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    for name in ("_ZO_DATA_DIR", "ZDT_ZOXIDE_BIN", "ZDT_COMMAND_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def _write_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, body: str) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(body, encoding="utf-8")
    monkeypatch.setenv("ZDT_CONFIG_FILE", str(config_file))


def test_from_env_reads_data_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the data dir from the zoxide variable."""
    monkeypatch.setenv("_ZO_DATA_DIR", "./.tmp-zoxide")

    config = DatatoolsConfig.from_env()

    assert config.store_file.parent.name == ".tmp-zoxide"


def test_from_env_uses_defaults() -> None:
    """Config should fall back to the zoxide binary on PATH."""
    config = DatatoolsConfig.from_env()

    assert (config.zoxide_bin, config.command_timeout) == ("zoxide", 60.0)


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric command timeout."""
    monkeypatch.setenv("ZDT_COMMAND_TIMEOUT", "not-a-number")

    with pytest.raises(ConfigError):
        DatatoolsConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for zero timeout."""
    monkeypatch.setenv("ZDT_COMMAND_TIMEOUT", "0")

    with pytest.raises(ConfigError):
        DatatoolsConfig.from_env()


def test_from_env_reads_yaml_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Config should read values from the YAML file."""
    _write_config(monkeypatch, tmp_path, "zoxide_bin: /opt/bin/zoxide\ncommand_timeout: 5\n")

    config = DatatoolsConfig.from_env()

    assert (config.zoxide_bin, config.command_timeout) == ("/opt/bin/zoxide", 5.0)


def test_environment_overrides_yaml_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables should take precedence over the file."""
    _write_config(monkeypatch, tmp_path, "zoxide_bin: /opt/bin/zoxide\n")
    monkeypatch.setenv("ZDT_ZOXIDE_BIN", "/usr/bin/zoxide")

    config = DatatoolsConfig.from_env()

    assert config.zoxide_bin == "/usr/bin/zoxide"


def test_from_env_rejects_unknown_file_keys(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Config should fail for keys it does not understand."""
    _write_config(monkeypatch, tmp_path, "colour: blue\n")

    with pytest.raises(ConfigError):
        DatatoolsConfig.from_env()


def test_from_env_rejects_non_mapping_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Config should fail when the YAML document is a list."""
    _write_config(monkeypatch, tmp_path, "- zoxide\n")

    with pytest.raises(ConfigError):
        DatatoolsConfig.from_env()
