from __future__ import annotations

from pathlib import Path

import pytest

import nirman.config.settings as settings_mod


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Run each test in an empty cwd with no user settings or $EDITOR."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("EDITOR", raising=False)
    settings_mod.get_settings.cache_clear()
    yield workdir
    settings_mod.get_settings.cache_clear()
