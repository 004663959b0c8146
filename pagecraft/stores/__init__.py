"""Theme and editor state providers read at export time."""

from .base import EditorStateProvider, ThemeProvider
from .editor import EditorState
from .theme import PRESET_THEMES, DesignTokens, ThemeStore, preset_names

__all__ = [
    "DesignTokens",
    "EditorState",
    "EditorStateProvider",
    "PRESET_THEMES",
    "ThemeProvider",
    "ThemeStore",
    "preset_names",
]
