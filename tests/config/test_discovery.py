"""Tests for nulluuid.toml walk-up discovery."""

from pathlib import Path

import pytest

from nulluuid.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


def test_finds_in_start_dir(tmp_path: Path) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    assert find_config(tmp_path) == cfg.resolve()


def test_finds_in_parent(tmp_path: Path) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    child = tmp_path / "child"
    child.mkdir()
    assert find_config(child) == cfg.resolve()


def test_not_found(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None


def test_env_var_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_cfg = tmp_path / "elsewhere.toml"
    env_cfg.write_text("")
    (tmp_path / CONFIG_FILENAME).write_text("")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(env_cfg))
    assert find_config(tmp_path) == env_cfg


def test_env_var_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
    assert find_config(tmp_path) is None


def test_env_var_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "home.toml"
    cfg.write_text("")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(CONFIG_ENV_VAR, "~/home.toml")
    assert find_config() == cfg


def test_empty_env_var_falls_back_to_search(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    monkeypatch.setenv(CONFIG_ENV_VAR, "")
    assert find_config(tmp_path) == cfg.resolve()
