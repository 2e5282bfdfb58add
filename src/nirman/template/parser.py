"""Parse a structure template into project metadata and file records.

A template is plain text. Three kinds of lines are recognized at column 0:

    // Project: my-app
    // Libraries: react, react-dom
    // File: src/index.js

Lines after a `// File:` declaration belong to that file until the next
declaration or the end of the text. Anything before the first file
declaration that is not a metadata line is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

PROJECT_PREFIX = "// Project:"
LIBRARIES_PREFIX = "// Libraries:"
FILE_PREFIX = "// File:"


@dataclass
class ProjectMetadata:
    name: Optional[str] = None
    dependencies: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.name and not self.dependencies


@dataclass
class FileRecord:
    path: str
    content: str


def normalize_content(text: str) -> str:
    """Trim surrounding whitespace and end with exactly one newline."""
    return text.strip() + "\n"


def parse_libraries(value: str) -> List[str]:
    """Split a comma-separated library list, dropping empty entries."""
    return [piece.strip() for piece in value.split(",") if piece.strip()]


def parse_template(text: str) -> Tuple[ProjectMetadata, List[FileRecord]]:
    """Parse template text into metadata and ordered file records."""
    metadata = ProjectMetadata()
    records: List[FileRecord] = []
    current: Optional[str] = None
    buffer: List[str] = []

    def flush() -> None:
        assert current is not None
        records.append(
            FileRecord(path=current, content=normalize_content("".join(buffer)))
        )

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.startswith(PROJECT_PREFIX):
            metadata.name = line[len(PROJECT_PREFIX) :].strip() or None
        elif line.startswith(LIBRARIES_PREFIX):
            metadata.dependencies = parse_libraries(line[len(LIBRARIES_PREFIX) :])
        elif line.startswith(FILE_PREFIX):
            if current is not None:
                flush()
            current = line[len(FILE_PREFIX) :].strip()
            buffer = []
        elif current is not None:
            buffer.append(line + "\n")

    if current is not None:
        flush()

    return metadata, records
