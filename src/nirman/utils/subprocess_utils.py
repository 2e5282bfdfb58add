"""Subprocess utilities for the editor and the clipboard."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from ..errors import ClipboardError, EditorError

logger = logging.getLogger(__name__)


def editor_command(editor: str, path: Path) -> List[str]:
    """Build the argv for opening ``path`` in ``editor``.

    The editor string is split with shell rules so values like
    ``code --wait`` keep their arguments.
    """
    argv = shlex.split(editor, posix=sys.platform != "win32")
    if not argv:
        raise EditorError("No editor configured")
    return [*argv, str(path)]


def run_editor(editor: str, path: Path, cwd: Optional[Path] = None) -> None:
    """Open ``path`` in ``editor`` and block until the editor exits.

    The editor inherits the terminal. A missing executable or a non-zero
    exit status raises ``EditorError``.
    """
    command = editor_command(editor, path)
    logger.debug("Launching editor: %s", command)
    try:
        result = subprocess.run(command, cwd=str(cwd) if cwd else None)
    except FileNotFoundError as e:
        raise EditorError(f"Editor not found: {command[0]}") from e
    if result.returncode:
        raise EditorError(
            f"Editor {command[0]} exited with code {result.returncode}",
            returncode=result.returncode,
        )


def clipboard_command() -> List[str]:
    """Return the argv of a clipboard tool for this platform."""
    if sys.platform == "darwin":
        return ["pbcopy"]
    if sys.platform == "win32":
        return ["clip"]
    for candidate in (
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ):
        if shutil.which(candidate[0]):
            return candidate
    raise ClipboardError("No clipboard tool found (install wl-copy, xclip or xsel)")


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` on the system clipboard.

    xclip and xsel leave a background process holding the selection, so the
    tool's output must not be a pipe or the call waits for that process.
    """
    command = clipboard_command()
    # clip.exe reads UTF-16 from stdin
    encoding = "utf-16" if command[0] == "clip" else "utf-8"
    with tempfile.TemporaryFile() as err:
        try:
            subprocess.run(
                command,
                input=text.encode(encoding),
                stdout=subprocess.DEVNULL,
                stderr=err,
                check=True,
            )
        except FileNotFoundError as e:
            raise ClipboardError(f"Clipboard tool not found: {command[0]}") from e
        except subprocess.CalledProcessError as e:
            err.seek(0)
            stderr = err.read().decode(errors="replace").strip()
            raise ClipboardError(
                f"{command[0]} exited with code {e.returncode}"
                + (f": {stderr}" if stderr else "")
            ) from e
