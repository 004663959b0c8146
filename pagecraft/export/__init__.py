"""Archive export of generated sites."""

from .archive import (
    ArchiveExporter,
    DirectorySink,
    ExportResult,
    archive_filename,
    build_archive,
)
from .scaffolding import DEPLOY_TARGETS, DeployTarget, ScaffoldFile, project_files, project_slug

__all__ = [
    "ArchiveExporter",
    "DEPLOY_TARGETS",
    "DeployTarget",
    "DirectorySink",
    "ExportResult",
    "ScaffoldFile",
    "archive_filename",
    "build_archive",
    "project_files",
    "project_slug",
]
