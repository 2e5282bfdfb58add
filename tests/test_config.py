from __future__ import annotations

from pathlib import Path

import pytest

import nirman.config.settings as settings_mod
from nirman.config import (
    DEFAULT_SETTINGS,
    discover_settings_path,
    get_settings,
    load_settings,
    resolve_editor,
)
from nirman.errors import ConfigError


def test_defaults_without_settings_file() -> None:
    assert discover_settings_path() is None
    assert get_settings() == DEFAULT_SETTINGS
    assert resolve_editor() == "nano"


def test_discovers_settings_in_parent_directory(isolated_env: Path) -> None:
    (isolated_env / ".nirman.yml").write_text(
        "editor: code --wait\ndefault_version: '*'\n"
    )
    nested = isolated_env / "a" / "b"
    nested.mkdir(parents=True)

    path = discover_settings_path(nested)
    assert path == (isolated_env / ".nirman.yml").resolve()

    settings = load_settings(path)
    assert settings["editor"] == "code --wait"
    assert settings["default_version"] == "*"
    assert settings["manifest"] == "package.json"


def test_user_settings_fallback(monkeypatch, tmp_path: Path) -> None:
    xdg = tmp_path / "xdg"
    (xdg / "nirman").mkdir(parents=True)
    (xdg / "nirman" / "config.yml").write_text("scratch_file: template.txt\n")
    assert discover_settings_path() == xdg / "nirman" / "config.yml"
    assert get_settings()["scratch_file"] == "template.txt"


def test_editor_precedence(monkeypatch, isolated_env: Path) -> None:
    (isolated_env / ".nirman.yml").write_text("editor: vim\n")
    settings_mod.get_settings.cache_clear()
    assert resolve_editor() == "vim"

    monkeypatch.setenv("EDITOR", "emacs")
    assert resolve_editor() == "emacs"
    assert resolve_editor("micro") == "micro"


def test_non_mapping_settings_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_settings(path)


def test_wrong_value_type_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("manifest: 3\n")
    with pytest.raises(ConfigError, match="'manifest'"):
        load_settings(path)


def test_malformed_yaml_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("editor: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid settings file"):
        load_settings(path)
