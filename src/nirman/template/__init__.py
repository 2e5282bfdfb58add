"""Structure template parsing."""

from .parser import FileRecord, ProjectMetadata, normalize_content, parse_template

__all__ = ["FileRecord", "ProjectMetadata", "normalize_content", "parse_template"]
