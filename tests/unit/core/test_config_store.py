"""Tests for config loading and saving."""

from pathlib import Path

import pytest

from cicfacts.core.config_store import (
    CONFIG_PATH_ENV,
    CicfactsConfig,
    FilesystemConfigStore,
    InMemoryConfigStore,
)


def test_defaults_when_config_missing(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")

    assert store.exists() is False
    assert store.load_or_default() == CicfactsConfig(
        vendor="Interactive Intelligence", hive="HKEY_LOCAL_MACHINE"
    )


def test_load_missing_raises(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")

    with pytest.raises(FileNotFoundError, match="Config not found"):
        store.load()


def test_load_reads_values(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('vendor = "Genesys"\nhive = "HKEY_CURRENT_USER"\n', encoding="utf-8")

    config = FilesystemConfigStore(path).load()

    assert config == CicfactsConfig(vendor="Genesys", hive="HKEY_CURRENT_USER")


def test_load_partial_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('vendor = "Genesys"\n', encoding="utf-8")

    config = FilesystemConfigStore(path).load()

    assert config.hive == "HKEY_LOCAL_MACHINE"


def test_load_rejects_unknown_hive(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('hive = "HKEY_NOWHERE"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown registry hive"):
        FilesystemConfigStore(path).load()


def test_load_rejects_non_string_vendor(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("vendor = 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="'vendor' must be a non-empty string"):
        FilesystemConfigStore(path).load()


def test_load_rejects_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("vendor = \n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        FilesystemConfigStore(path).load()


def test_save_then_load(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "nested" / "config.toml")

    store.save(CicfactsConfig(vendor="Genesys"))

    assert store.load() == CicfactsConfig(vendor="Genesys")


def test_save_preserves_comments_and_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('# site notes\nvendor = "Old"\nextra = 1\n', encoding="utf-8")

    FilesystemConfigStore(path).save(CicfactsConfig(vendor="New"))

    content = path.read_text(encoding="utf-8")
    assert "# site notes" in content
    assert "extra = 1" in content
    assert 'vendor = "New"' in content


def test_env_var_overrides_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.toml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert FilesystemConfigStore().path() == path


def test_in_memory_store_round_trip() -> None:
    store = InMemoryConfigStore()
    assert store.exists() is False

    store.save(CicfactsConfig(vendor="Genesys"))

    assert store.exists() is True
    assert store.load().vendor == "Genesys"
