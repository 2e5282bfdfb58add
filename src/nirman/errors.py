"""Exceptions raised by nirman."""

from __future__ import annotations

from typing import Optional


class NirmanError(Exception):
    """Base class for errors surfaced to the CLI."""


class EditorError(NirmanError):
    """The interactive editor could not be launched or exited with an error."""

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ClipboardError(NirmanError):
    """No usable clipboard tool, or the tool failed."""


class ConfigError(NirmanError):
    """The settings file could not be understood."""
