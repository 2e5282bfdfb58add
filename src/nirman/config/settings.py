"""User settings for nirman.

Non-configurable settings discovery:
- Walk up from the current directory looking for `.nirman.yml`.
- Otherwise use `$XDG_CONFIG_HOME/nirman/config.yml`
  (`~/.config/nirman/config.yml` when the variable is unset).
- If neither exists, fall back to built-in defaults.
- Expose a memoized getter so callers can treat it like a constant.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TypedDict

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".nirman.yml"
DEFAULT_EDITOR = "nano"


class NirmanSettings(TypedDict):
    """Settings that shape a `create` run."""

    editor: Optional[str]  # code --wait
    manifest: str  # package.json
    default_version: str  # latest
    scratch_file: str  # project_structure.txt


DEFAULT_SETTINGS = NirmanSettings(
    editor=None,
    manifest="package.json",
    default_version="latest",
    scratch_file="project_structure.txt",
)


def _parse_settings_dict(data: Dict[str, Any]) -> NirmanSettings:
    out = NirmanSettings(**DEFAULT_SETTINGS)
    editor = data.get("editor")
    if editor is not None and not isinstance(editor, str):
        raise ConfigError("'editor' must be a string")
    out["editor"] = editor or None
    for key in ("manifest", "default_version", "scratch_file"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'{key}' must be a non-empty string")
        out[key] = value.strip()  # type: ignore[literal-required]
    return out


def load_settings(path: Path) -> NirmanSettings:
    """Load settings from a YAML file path."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return _parse_settings_dict(data)


def user_settings_path() -> Path:
    """Return the per-user settings file location."""
    base = os.getenv("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "nirman" / "config.yml"


def discover_settings_path(start: Optional[Path] = None) -> Optional[Path]:
    """Find the settings file that applies to ``start`` (default: cwd).

    Returns None when no settings file exists.
    """
    here = (start or Path.cwd()).resolve()
    for parent in (here, *here.parents):
        candidate = parent / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    user_path = user_settings_path()
    if user_path.is_file():
        return user_path
    return None


@lru_cache(maxsize=1)
def get_settings() -> NirmanSettings:
    """Return discovered settings, or the defaults (memoized)."""
    path = discover_settings_path()
    if path is None:
        return NirmanSettings(**DEFAULT_SETTINGS)
    logger.debug("Using settings from %s", path)
    return load_settings(path)


def resolve_editor(override: Optional[str] = None) -> str:
    """Pick the editor: explicit override, then $EDITOR, then settings, then nano."""
    return (
        override
        or os.getenv("EDITOR")
        or get_settings()["editor"]
        or DEFAULT_EDITOR
    )
