from __future__ import annotations

from pathlib import Path

import pytest

from envchain.core.config import LoaderSettings, load_settings, load_settings_dict
from envchain.core.schemas import SchemaValidationError, load_schema
from helpers.env_files import write_env_tree


def test_bundled_defaults() -> None:
    assert load_settings(environ={}) == LoaderSettings(encoding="utf-8", public=True)


def test_settings_file_overrides_defaults(tmp_path: Path) -> None:
    write_env_tree(tmp_path, {"envchain.yaml": "loader:\n  public: false\n"})

    settings = load_settings(tmp_path / "envchain.yaml", environ={})

    assert settings == LoaderSettings(encoding="utf-8", public=False)


def test_missing_settings_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml", environ={})


def test_env_overrides_win_over_file(tmp_path: Path) -> None:
    write_env_tree(tmp_path, {"envchain.yaml": "loader:\n  public: false\n"})
    environ = {"ENVCHAIN_LOADER__PUBLIC": "true", "ENVCHAIN_loader__encoding": "latin-1", "OTHER": "x"}

    settings = load_settings(tmp_path / "envchain.yaml", environ=environ)

    assert settings == LoaderSettings(encoding="latin-1", public=True)


def test_env_overrides_read_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVCHAIN_loader__public", "false")

    assert load_settings().public is False


def test_malformed_env_key_is_ignored() -> None:
    cfg = load_settings_dict(environ={"ENVCHAIN_": "x", "ENVCHAIN_loader____public": "false"})

    assert cfg["loader"]["public"] is True


def test_invalid_value_fails_validation() -> None:
    with pytest.raises(SchemaValidationError):
        load_settings(environ={"ENVCHAIN_loader__public": "sometimes"})


def test_unknown_section_fails_validation(tmp_path: Path) -> None:
    write_env_tree(tmp_path, {"envchain.yaml": "unknown:\n  key: 1\n"})

    with pytest.raises(SchemaValidationError):
        load_settings(tmp_path / "envchain.yaml", environ={})


def test_non_mapping_settings_file_raises(tmp_path: Path) -> None:
    write_env_tree(tmp_path, {"envchain.yaml": "- just\n- a list\n"})

    with pytest.raises(ValueError):
        load_settings(tmp_path / "envchain.yaml", environ={})


def test_schema_is_bundled() -> None:
    schema = load_schema("settings.schema")

    assert schema["properties"]["loader"]["required"] == ["encoding", "public"]


def test_unrelated_prefixed_keys_are_ignored() -> None:
    environ = {"ENVCHAIN_HOME": "/opt/envchain", "ENVCHAIN_cache__dir": "/tmp", "ENVCHAIN_loader__public": "false"}

    cfg = load_settings_dict(environ=environ)

    assert set(cfg) == {"loader"}
    assert cfg["loader"]["public"] is False
