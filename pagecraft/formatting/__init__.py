"""
Formatting of generated markup and stylesheets.

Both formatters are idempotent and failure tolerant: malformed input is
returned unchanged by :func:`format_text` and :func:`format_code`.
"""

from __future__ import annotations

__all__ = [
    "Formatter",
    "FormattingOptions",
    "FormattedResult",
    "IndentStyle",
    "DefaultFormattingRules",
    "MarkupFormatter",
    "StylesheetFormatter",
    "format_text",
    "format_code",
]

from .core import FormattedResult, Formatter, FormattingOptions, IndentStyle, format_code, format_text
from .css import StylesheetFormatter
from .html import MarkupFormatter
from .rules import DefaultFormattingRules
