"""
Design tokens and the preset themes.

A theme is exported to the page as a ``:root`` block of CSS custom
properties; :attr:`ThemeStore.css_variables` derives that map.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union

from pagecraft.codegen.values import format_number
from pagecraft.errors import ConfigError

TokenValue = Union[str, int, float]

SYSTEM_FONT_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
)
INTER_FONT_STACK = '"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif'
HELVETICA_FONT_STACK = '"Helvetica Neue", Helvetica, Arial, sans-serif'


@dataclass
class DesignTokens:
    """Token groups of one theme, keyed the way the editor names them."""

    colors: Dict[str, str] = field(default_factory=dict)
    typography: Dict[str, TokenValue] = field(default_factory=dict)
    spacing: Dict[str, TokenValue] = field(default_factory=dict)
    border_radius: Dict[str, str] = field(default_factory=dict)
    shadows: Dict[str, str] = field(default_factory=dict)

    def merged(self, **groups: Optional[Mapping[str, TokenValue]]) -> "DesignTokens":
        """Copy with each given group merged key by key over this one."""
        tokens = copy.deepcopy(self)
        for name, values in groups.items():
            if not hasattr(tokens, name):
                raise ConfigError(f"Unknown design token group '{name}'")
            if values:
                getattr(tokens, name).update(values)
        return tokens


DEFAULT_TOKENS = DesignTokens(
    colors={
        "primary": "#3b82f6",
        "secondary": "#8b5cf6",
        "accent": "#f59e0b",
        "background": "#ffffff",
        "surface": "#f9fafb",
        "text": "#111827",
        "textSecondary": "#6b7280",
        "border": "#e5e7eb",
        "error": "#ef4444",
        "warning": "#f59e0b",
        "success": "#10b981",
    },
    typography={
        "fontFamily": SYSTEM_FONT_STACK,
        "fontFamilyHeading": SYSTEM_FONT_STACK,
        "baseFontSize": "16px",
        "lineHeight": 1.5,
        "headingLineHeight": 1.2,
        "fontWeightNormal": 400,
        "fontWeightMedium": 500,
        "fontWeightBold": 700,
    },
    spacing={
        "unit": 8,
        "xs": "0.5rem",
        "sm": "1rem",
        "md": "1.5rem",
        "lg": "2rem",
        "xl": "3rem",
        "xxl": "4rem",
    },
    border_radius={
        "none": "0",
        "sm": "0.25rem",
        "md": "0.5rem",
        "lg": "0.75rem",
        "xl": "1rem",
        "full": "9999px",
    },
    shadows={
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)",
        "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)",
        "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)",
    },
)

PRESET_THEMES: Dict[str, DesignTokens] = {
    "default": DEFAULT_TOKENS,
    "dark": DEFAULT_TOKENS.merged(colors={
        "primary": "#60a5fa",
        "secondary": "#a78bfa",
        "accent": "#fbbf24",
        "background": "#0f172a",
        "surface": "#1e293b",
        "text": "#f1f5f9",
        "textSecondary": "#94a3b8",
        "border": "#334155",
        "error": "#f87171",
        "warning": "#fbbf24",
        "success": "#34d399",
    }),
    "corporate": DEFAULT_TOKENS.merged(
        colors={
            "primary": "#1e40af",
            "secondary": "#7c3aed",
            "accent": "#dc2626",
            "background": "#ffffff",
            "surface": "#f8fafc",
            "text": "#0f172a",
            "textSecondary": "#475569",
            "border": "#e2e8f0",
            "error": "#dc2626",
            "warning": "#d97706",
            "success": "#059669",
        },
        typography={"fontFamily": INTER_FONT_STACK, "fontFamilyHeading": INTER_FONT_STACK},
    ),
    "playful": DEFAULT_TOKENS.merged(
        colors={
            "primary": "#ec4899",
            "secondary": "#8b5cf6",
            "accent": "#10b981",
            "background": "#fef3c7",
            "surface": "#fde68a",
            "text": "#78350f",
            "textSecondary": "#92400e",
            "border": "#f59e0b",
            "error": "#dc2626",
            "warning": "#f59e0b",
            "success": "#10b981",
        },
        typography={
            "fontFamily": '"Comic Neue", cursive, sans-serif',
            "fontFamilyHeading": '"Fredoka", cursive, sans-serif',
        },
        border_radius={"sm": "0.5rem", "md": "1rem", "lg": "1.5rem", "xl": "2rem"},
    ),
    "minimal": DEFAULT_TOKENS.merged(
        colors={
            "primary": "#000000",
            "secondary": "#404040",
            "accent": "#000000",
            "background": "#ffffff",
            "surface": "#fafafa",
            "text": "#000000",
            "textSecondary": "#666666",
            "border": "#e0e0e0",
            "error": "#ff0000",
            "warning": "#ff9800",
            "success": "#4caf50",
        },
        typography={
            "fontFamily": HELVETICA_FONT_STACK,
            "fontFamilyHeading": HELVETICA_FONT_STACK,
            "fontWeightNormal": 300,
            "fontWeightMedium": 400,
            "fontWeightBold": 500,
        },
        border_radius={"none": "0", "sm": "0", "md": "0", "lg": "0", "xl": "0", "full": "0"},
    ),
}

_TYPOGRAPHY_VARIABLES = (
    ("--font-family", "fontFamily"),
    ("--font-family-heading", "fontFamilyHeading"),
    ("--font-size-base", "baseFontSize"),
    ("--line-height", "lineHeight"),
    ("--line-height-heading", "headingLineHeight"),
    ("--font-weight-normal", "fontWeightNormal"),
    ("--font-weight-medium", "fontWeightMedium"),
    ("--font-weight-bold", "fontWeightBold"),
)


def _token_text(value: TokenValue) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def preset_names() -> List[str]:
    return list(PRESET_THEMES)


class ThemeStore:
    """The active theme, switchable between presets or customised token by token."""

    def __init__(self, theme_name: str = "default"):
        self.theme_name = "default"
        self.tokens = copy.deepcopy(DEFAULT_TOKENS)
        if theme_name != "default":
            self.set_theme(theme_name)

    def set_theme(self, name: str) -> None:
        preset = PRESET_THEMES.get(name)
        if preset is None:
            raise ConfigError(
                f"Unknown theme '{name}'",
                hint=f"Available themes: {', '.join(preset_names())}",
            )
        self.tokens = copy.deepcopy(preset)
        self.theme_name = name

    def update_tokens(
        self,
        *,
        colors: Optional[Mapping[str, str]] = None,
        typography: Optional[Mapping[str, TokenValue]] = None,
        spacing: Optional[Mapping[str, TokenValue]] = None,
        border_radius: Optional[Mapping[str, str]] = None,
        shadows: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Merge token overrides into the active theme, which becomes ``custom``."""
        self.tokens = self.tokens.merged(
            colors=colors,
            typography=typography,
            spacing=spacing,
            border_radius=border_radius,
            shadows=shadows,
        )
        self.theme_name = "custom"

    def get_value(self, path: str) -> TokenValue:
        """Look up a token by dotted path such as ``colors.primary``; ``""`` if absent."""
        group_name, _, key = path.partition(".")
        group = getattr(self.tokens, group_name, None)
        if not isinstance(group, dict) or key not in group:
            return ""
        return group[key]

    @property
    def css_variables(self) -> Dict[str, str]:
        tokens = self.tokens
        variables: Dict[str, str] = {}
        for key, value in tokens.colors.items():
            variables[f"--color-{key}"] = value
        for name, key in _TYPOGRAPHY_VARIABLES:
            if key in tokens.typography:
                variables[name] = _token_text(tokens.typography[key])
        for key, value in tokens.spacing.items():
            if key != "unit":
                variables[f"--spacing-{key}"] = _token_text(value)
        for key, value in tokens.border_radius.items():
            variables[f"--radius-{key}"] = value
        for key, value in tokens.shadows.items():
            variables[f"--shadow-{key}"] = value
        return variables
