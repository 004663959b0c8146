"""
Archive packaging of a generated site.

:class:`ArchiveExporter` is the only stage that reads the theme and
editor stores and the only one whose failures reach the caller, always
as a single :class:`~pagecraft.errors.ExportError`.
"""

from __future__ import annotations

import asyncio
import io
import logging
import time
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence, Union

from pagecraft.codegen import ExportOptions, generate_project
from pagecraft.errors import ExportError
from pagecraft.formatting import FormattingOptions
from pagecraft.stores import EditorStateProvider, ThemeProvider
from pagecraft.tree import Component

from .scaffolding import project_files, project_slug

logger = logging.getLogger(__name__)

ARCHIVE_TIMESTAMP = (1980, 1, 1, 0, 0, 0)
COMPRESS_LEVEL = 6

SaveAs = Callable[[str, bytes], Union[Any, Awaitable[Any]]]


def archive_filename(project_name: str) -> str:
    return f"{project_slug(project_name)}.zip"


def build_archive(files: Mapping[str, str]) -> bytes:
    """Serialize ``files`` (archive path to text) into deterministic ZIP bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=COMPRESS_LEVEL) as archive:
        for path, content in files.items():
            info = zipfile.ZipInfo(path, date_time=ARCHIVE_TIMESTAMP)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            archive.writestr(info, content.encode("utf-8"), compresslevel=COMPRESS_LEVEL)
    return buffer.getvalue()


class DirectorySink:
    """Default ``save_as``: writes the archive into a directory."""

    def __init__(self, directory: Union[str, Path] = "."):
        self.directory = Path(directory)

    def __call__(self, filename: str, data: bytes) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / filename
        target.write_bytes(data)
        return target


@dataclass(frozen=True)
class ExportResult:
    """What an export produced and where the sink put it."""

    filename: str
    data: bytes
    location: Any = None


class ArchiveExporter:
    """
    Packages a generated site, plus optional scaffolding, into a ZIP archive.

    Example:
        >>> exporter = ArchiveExporter(ThemeStore(), EditorState(), save_as=DirectorySink("dist"))
        >>> await exporter.export_project(tree, "My Site", ExportOptions(include_config=True))
    """

    def __init__(
        self,
        theme_provider: Optional[ThemeProvider] = None,
        editor_provider: Optional[EditorStateProvider] = None,
        save_as: Optional[SaveAs] = None,
        formatting: Optional[FormattingOptions] = None,
    ):
        self.theme_provider = theme_provider
        self.editor_provider = editor_provider
        self.save_as = save_as or DirectorySink()
        self.formatting = formatting

    def resolve_options(self, options: ExportOptions) -> ExportOptions:
        """Fill theme variables and global code from the stores where the options leave them out."""
        updates = {}
        if options.include_theme and options.theme_variables is None and self.theme_provider is not None:
            updates["theme_variables"] = dict(self.theme_provider.css_variables)
        if options.global_custom_code is None and self.editor_provider is not None:
            updates["global_custom_code"] = self.editor_provider.global_custom_code
        return options.model_copy(update=updates) if updates else options

    async def export_project(
        self,
        tree: Sequence[Component],
        project_name: str,
        options: Optional[ExportOptions] = None,
    ) -> ExportResult:
        """
        Generate the site for ``tree`` and hand the archive to ``save_as``.

        Raises:
            ExportError: If any step fails; the original exception is the cause.
        """
        started = time.perf_counter()
        try:
            resolved = self.resolve_options(options or ExportOptions())
            site = await generate_project(tree, project_name, resolved, formatting=self.formatting)

            files = {"index.html": site.full_page, "styles.css": site.css}
            if resolved.include_config:
                for scaffold in project_files(project_name, resolved.platform):
                    files[scaffold.path] = scaffold.content

            data = await asyncio.to_thread(build_archive, files)
            filename = archive_filename(project_name)
            location = self.save_as(filename, data)
            if asyncio.iscoroutine(location):
                location = await location
        except Exception as exc:
            logger.error("Export of '%s' failed: %s", project_name, exc)
            raise ExportError(f"Failed to export project: {exc}") from exc

        logger.info(
            "Exported %s (%d files, %d bytes) in %.1fms",
            filename,
            len(files),
            len(data),
            (time.perf_counter() - started) * 1000,
        )
        return ExportResult(filename=filename, data=data, location=location)
