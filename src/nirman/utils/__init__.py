"""Utility modules for nirman."""

from .console import console, err_console
from .subprocess_utils import copy_to_clipboard, editor_command, run_editor

__all__ = ["console", "err_console", "copy_to_clipboard", "editor_command", "run_editor"]
