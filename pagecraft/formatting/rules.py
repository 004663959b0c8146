"""Default formatting rules for generated output."""

from __future__ import annotations

from .core import FormattingOptions, IndentStyle


class DefaultFormattingRules:
    """Named formatting presets."""

    @classmethod
    def standard(cls) -> FormattingOptions:
        """Two-space indentation, 100 column print width."""
        return FormattingOptions(indent_style=IndentStyle.SPACES, indent_size=2, print_width=100)

    @classmethod
    def expanded(cls) -> FormattingOptions:
        return FormattingOptions(indent_style=IndentStyle.SPACES, indent_size=4, print_width=80)

    @classmethod
    def tabs(cls) -> FormattingOptions:
        return FormattingOptions(indent_style=IndentStyle.TABS, indent_size=1, print_width=100)
