"""
Pagecraft: compiles declarative component trees into static sites.

A tree of component nodes becomes one HTML document, one stylesheet,
an optional behaviour script and, on export, a deployable ZIP archive.
"""

__version__ = "0.1.0"

from .codegen import ExportOptions, GeneratedSite, GenerationOptions, generate_project
from .errors import ConfigError, ExportError, FormattingError, PagecraftError, TreeLoadError
from .export import ArchiveExporter, build_archive
from .formatting import format_code, format_text
from .stores import EditorState, ThemeStore
from .tree import Component, load_tree

__all__ = [
    "__version__",
    "ArchiveExporter",
    "Component",
    "ConfigError",
    "EditorState",
    "ExportError",
    "ExportOptions",
    "FormattingError",
    "GeneratedSite",
    "GenerationOptions",
    "PagecraftError",
    "ThemeStore",
    "TreeLoadError",
    "build_archive",
    "format_code",
    "format_text",
    "generate_project",
    "load_tree",
]
