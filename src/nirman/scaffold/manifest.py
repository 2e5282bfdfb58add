"""Patch the project manifest (package.json) with name and dependencies."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from rich.markup import escape

from ..utils import console

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"
DEFAULT_VERSION = "latest"


def read_manifest(path: Path) -> Dict[str, Any]:
    """Return the manifest at ``path``, or an empty mapping if it is unusable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.debug("Starting from an empty manifest (%s): %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.debug("Manifest %s is not a JSON object; ignoring it", path)
        return {}
    return data


def merge_manifest(
    manifest: Dict[str, Any],
    name: Optional[str],
    dependencies: Iterable[str],
    default_version: str = DEFAULT_VERSION,
) -> Dict[str, Any]:
    """Set ``name`` and add missing ``dependencies`` in place.

    Existing dependency versions are never changed.
    """
    if name:
        manifest["name"] = name

    dependencies = list(dependencies)
    if dependencies:
        current = manifest.get("dependencies")
        if not isinstance(current, dict):
            current = {}
            manifest["dependencies"] = current
        for lib in dependencies:
            current.setdefault(lib, default_version)
    return manifest


def update_manifest(
    root: Path,
    name: Optional[str],
    dependencies: Iterable[str],
    *,
    default_version: str = DEFAULT_VERSION,
    filename: str = MANIFEST_FILE,
) -> Dict[str, Any]:
    """Read, patch and rewrite ``root/filename``. Returns the written mapping."""
    path = root / filename
    manifest = merge_manifest(read_manifest(path), name, dependencies, default_version)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
        f.write("\n")

    console.print(f"[green]Updated:[/green] [blue]{escape(filename)}[/blue]")
    return manifest
