"""Core formatting infrastructure shared by the markup and stylesheet formatters."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional

from pagecraft.errors import FormattingError

logger = logging.getLogger(__name__)

Kind = Literal["markup", "stylesheet"]


class IndentStyle(Enum):
    """Supported indentation styles."""
    SPACES = "spaces"
    TABS = "tabs"


@dataclass
class FormattingOptions:
    """Configuration options for formatting generated output."""

    indent_style: IndentStyle = IndentStyle.SPACES
    indent_size: int = 2
    print_width: int = 100

    def indent_unit(self) -> str:
        if self.indent_style == IndentStyle.TABS:
            return "\t"
        return " " * self.indent_size


@dataclass
class FormattedResult:
    """Result of a formatting operation."""

    formatted_text: str
    is_changed: bool
    errors: List[str] = field(default_factory=list)

    def success(self) -> bool:
        return len(self.errors) == 0


class Formatter:
    """
    Canonicalizes whitespace and indentation of generated markup and stylesheets.

    Formatting is cosmetic: when the input cannot be formatted the original
    text is returned untouched and the failure is recorded on the result.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()

    def format_document(self, text: str, kind: Kind) -> FormattedResult:
        # Imported here: the markup formatter reuses this module's options.
        from .css import StylesheetFormatter
        from .html import MarkupFormatter

        try:
            if kind == "markup":
                formatted = MarkupFormatter(self.options).format(text)
            elif kind == "stylesheet":
                formatted = StylesheetFormatter(self.options).format(text)
            else:
                raise FormattingError(f"Unknown formatting kind: {kind!r}")
        except FormattingError as e:
            return FormattedResult(formatted_text=text, is_changed=False, errors=[f"Parse error: {e.message}"])
        except Exception as e:
            return FormattedResult(formatted_text=text, is_changed=False, errors=[f"Formatting error: {e}"])
        return FormattedResult(formatted_text=formatted, is_changed=formatted != text)


def format_text(text: str, kind: Kind, options: Optional[FormattingOptions] = None) -> str:
    """Format ``text``; on failure log a warning and return it unchanged."""
    result = Formatter(options).format_document(text, kind)
    if not result.success():
        logger.warning("%s formatting failed, keeping unformatted output: %s", kind, "; ".join(result.errors))
    return result.formatted_text


async def format_code(text: str, kind: Kind, options: Optional[FormattingOptions] = None) -> str:
    """Awaitable :func:`format_text`, run in a worker thread."""
    return await asyncio.to_thread(format_text, text, kind, options)
