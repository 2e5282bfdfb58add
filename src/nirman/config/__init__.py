"""Configuration management for nirman."""

from .settings import (
    DEFAULT_EDITOR,
    DEFAULT_SETTINGS,
    NirmanSettings,
    discover_settings_path,
    get_settings,
    load_settings,
    resolve_editor,
)

__all__ = [
    "DEFAULT_EDITOR",
    "DEFAULT_SETTINGS",
    "NirmanSettings",
    "discover_settings_path",
    "get_settings",
    "load_settings",
    "resolve_editor",
]
