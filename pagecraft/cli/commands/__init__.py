"""Command handlers for the Pagecraft CLI."""

from .build import cmd_build
from .export import cmd_export
from .format import cmd_format
from .themes import cmd_themes

__all__ = ["cmd_build", "cmd_export", "cmd_format", "cmd_themes"]
