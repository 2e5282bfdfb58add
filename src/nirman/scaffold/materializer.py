"""Write parsed file records to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from rich.markup import escape

from ..template import FileRecord, normalize_content
from ..utils import console, err_console

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    path: str
    target: Path
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_target(root: Path, relative_path: str) -> Path:
    """Join ``relative_path`` onto ``root``.

    Leading separators are dropped so `/src/app.js` lands at `root/src/app.js`
    instead of the filesystem root.
    """
    return root / relative_path.lstrip("/\\")


def write_record(root: Path, record: FileRecord) -> Path:
    """Create parent directories and write one record, overwriting."""
    target = resolve_target(root, record.path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(normalize_content(record.content), encoding="utf-8")
    return target


def materialize(root: Path, records: Iterable[FileRecord]) -> List[WriteResult]:
    """Write every record under ``root`` in order.

    A failure on one file is reported and does not stop the remaining files.
    """
    results: List[WriteResult] = []
    for record in records:
        target = resolve_target(root, record.path)
        try:
            write_record(root, record)
        except OSError as e:
            logger.debug("Failed to write %s", target, exc_info=True)
            err_console.print(
                f"Error creating {escape(record.path)}: {escape(str(e))}",
                style="red",
            )
            results.append(WriteResult(record.path, target, error=str(e)))
            continue
        console.print(
            f"[green]Created:[/green] "
            f"[blue]{escape(target.relative_to(root).as_posix())}[/blue]"
        )
        results.append(WriteResult(record.path, target))
    return results
