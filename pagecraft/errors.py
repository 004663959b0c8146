"""Unified error model for Pagecraft."""

from __future__ import annotations

from typing import Optional


class PagecraftError(Exception):
    """Base class for all errors surfaced to callers of the generator."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        if self.code:
            components[-1] = f"{components[-1]} ({self.code})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class TreeLoadError(PagecraftError):
    """Raised when component tree data cannot be loaded into the model."""

    code = "TREE_INVALID"


class FormattingError(PagecraftError):
    """Raised by the formatters on malformed input; never leaves format_text."""

    code = "FORMAT_FAILED"


class ExportError(PagecraftError):
    """Raised when packaging or writing the project archive fails."""

    code = "EXPORT_FAILED"


class ConfigError(PagecraftError):
    """Raised when workspace configuration or store settings are invalid."""

    code = "CONFIG_INVALID"


__all__ = [
    "PagecraftError",
    "TreeLoadError",
    "FormattingError",
    "ExportError",
    "ConfigError",
]
