"""Helpers for printing property names and values into generated CSS."""

from __future__ import annotations

import re
from typing import Union

_LOWER_UPPER_RE = re.compile(r"([a-z])([A-Z])")
_UPPER_RE = re.compile(r"[A-Z]")


def format_number(value: Union[int, float]) -> str:
    """Print a number the way a JavaScript engine would (``1.0`` -> ``1``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_value(value: Union[str, int, float]) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def style_property_name(name: str) -> str:
    """Kebab-case a style-map key at lower/upper boundaries (``fontSize`` -> ``font-size``)."""
    return _LOWER_UPPER_RE.sub(r"\1-\2", name).lower()


def keyframe_property_name(name: str) -> str:
    """Kebab-case a timeline property by prefixing every capital with a dash."""
    return _UPPER_RE.sub(lambda match: f"-{match.group(0).lower()}", name)
