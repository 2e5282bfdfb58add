"""Writing files and manifests for a new project."""

from .manifest import merge_manifest, read_manifest, update_manifest
from .materializer import WriteResult, materialize, resolve_target
from .project import CreateResult, create_project, scaffold_from_text

__all__ = [
    "CreateResult",
    "WriteResult",
    "create_project",
    "materialize",
    "merge_manifest",
    "read_manifest",
    "resolve_target",
    "scaffold_from_text",
    "update_manifest",
]
