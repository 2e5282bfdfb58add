"""The `create` pipeline: editor, parse, write files, patch manifest."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from rich.markup import escape

from ..config import NirmanSettings, get_settings
from ..template import ProjectMetadata, parse_template
from ..utils import console, run_editor
from .manifest import update_manifest
from .materializer import WriteResult, materialize

logger = logging.getLogger(__name__)

SCRATCH_HEADER = (
    "// Paste your project structure here, following the prompt guidelines.\n\n"
)

EditorRunner = Callable[[str, Path, Optional[Path]], None]


@dataclass
class CreateResult:
    project_dir: Path
    metadata: ProjectMetadata
    files: List[WriteResult] = field(default_factory=list)
    manifest_updated: bool = False

    @property
    def failed(self) -> List[WriteResult]:
        return [r for r in self.files if not r.ok]


def scaffold_from_text(
    text: str,
    project_dir: Path,
    settings: Optional[NirmanSettings] = None,
) -> CreateResult:
    """Parse ``text`` and materialize it into ``project_dir``."""
    settings = settings or get_settings()
    metadata, records = parse_template(text)
    logger.debug(
        "Parsed template: name=%r, %d dependencies, %d files",
        metadata.name,
        len(metadata.dependencies),
        len(records),
    )

    result = CreateResult(project_dir=project_dir, metadata=metadata)
    result.files = materialize(project_dir, records)

    if not metadata.is_empty():
        update_manifest(
            project_dir,
            metadata.name,
            metadata.dependencies,
            default_version=settings["default_version"],
            filename=settings["manifest"],
        )
        result.manifest_updated = True
    return result


def create_project(
    project_name: str,
    editor: str,
    base_dir: Optional[Path] = None,
    settings: Optional[NirmanSettings] = None,
    editor_runner: Optional[EditorRunner] = None,
) -> CreateResult:
    """Create ``base_dir/project_name`` and fill it from an edited template.

    Steps run strictly in order: make the directory, write the scratch file,
    wait for the editor, scaffold from the edited text, remove the scratch
    file. Errors propagate; files already written are left in place. The
    scratch file survives an editor failure so the text is not lost.
    """
    settings = settings or get_settings()
    project_dir = (base_dir or Path.cwd()) / project_name
    project_dir.mkdir(parents=True, exist_ok=True)

    console.print(
        f"Creating project in [yellow]{escape(str(project_dir))}[/yellow]",
        style="cyan",
    )

    scratch = project_dir / settings["scratch_file"]
    scratch.write_text(SCRATCH_HEADER, encoding="utf-8")

    console.print(
        f"Opening [yellow]{escape(editor)}[/yellow] "
        "for you to input the project structure...",
        style="cyan",
    )
    console.print(
        'Tip: Use the "nirman prompt" command to get a structure guide.',
        style="yellow",
    )
    (editor_runner or run_editor)(editor, scratch, project_dir)

    try:
        text = scratch.read_text(encoding="utf-8")
        result = scaffold_from_text(text, project_dir, settings)
    finally:
        scratch.unlink(missing_ok=True)

    return result
