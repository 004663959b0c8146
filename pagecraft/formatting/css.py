"""Stylesheet formatter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from pagecraft.errors import FormattingError

from .core import FormattingOptions

_WS_RE = re.compile(r"\s+")

# Token kinds
OPEN = "open"
CLOSE = "close"
DECLARATION = "declaration"
COMMENT = "comment"


@dataclass
class _Buffer:
    """Pending text; literal segments (strings, comments) keep their whitespace."""

    segments: List[Tuple[str, bool]]

    def add(self, text: str, literal: bool = False) -> None:
        if not literal and self.segments and not self.segments[-1][1]:
            self.segments[-1] = (self.segments[-1][0] + text, False)
        else:
            self.segments.append((text, literal))

    def is_blank(self) -> bool:
        return all(literal is False and not text.strip() for text, literal in self.segments)

    def take(self) -> str:
        text = "".join(
            segment if literal else _WS_RE.sub(" ", segment) for segment, literal in self.segments
        ).strip()
        self.segments = []
        return text


def tokenize(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    buffer = _Buffer([])
    parens = 0
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise FormattingError("Unterminated comment")
            comment = text[i:end + 2]
            if buffer.is_blank():
                buffer.take()
                yield COMMENT, comment
            else:
                buffer.add(comment, literal=True)
            i = end + 2
            continue
        if ch in "\"'":
            end = i + 1
            while end < length and text[end] != ch:
                end += 2 if text[end] == "\\" else 1
            if end >= length:
                raise FormattingError("Unterminated string")
            buffer.add(text[i:end + 1], literal=True)
            i = end + 1
            continue
        if ch == "(":
            parens += 1
        elif ch == ")":
            parens = max(parens - 1, 0)
        elif ch == "{":
            prelude = buffer.take()
            if not prelude:
                raise FormattingError("Block without a selector")
            yield OPEN, prelude
            i += 1
            continue
        elif ch == "}":
            if not buffer.is_blank():
                yield DECLARATION, buffer.take()
            else:
                buffer.take()
            yield CLOSE, None
            i += 1
            continue
        elif ch == ";" and parens == 0:
            if not buffer.is_blank():
                yield DECLARATION, buffer.take()
            else:
                buffer.take()
            i += 1
            continue
        buffer.add(ch)
        i += 1
    if not buffer.is_blank():
        raise FormattingError("Unexpected content after the last rule")


def split_selectors(prelude: str) -> List[str]:
    """Split a selector list on commas outside strings, comments and brackets."""
    selectors = []
    depth = 0
    quote = None
    start = 0
    i = 0
    while i < len(prelude):
        ch = prelude[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif prelude.startswith("/*", i):
            end = prelude.find("*/", i + 2)
            i = len(prelude) if end == -1 else end + 1
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            selectors.append(prelude[start:i].strip())
            start = i + 1
        i += 1
    selectors.append(prelude[start:].strip())
    return selectors


def _declaration(text: str) -> str:
    if text.startswith("@") or ":" not in text:
        return f"{text};"
    name, _, value = text.partition(":")
    return f"{name.strip()}: {value.strip()};"


class StylesheetFormatter:
    """One declaration per line, nested blocks indented, blank line between top-level rules.

    A selector list whose opening line would exceed ``print_width`` is
    written one selector per line.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()
        self._unit = self.options.indent_unit()

    def format(self, text: str) -> str:
        lines: List[str] = []
        depth = 0
        previous_top_level: Optional[str] = None
        for kind, value in tokenize(text):
            if kind == CLOSE:
                depth -= 1
                if depth < 0:
                    raise FormattingError("Unbalanced closing brace")
                lines.append(f"{self._unit * depth}}}")
                continue
            if depth == 0:
                if previous_top_level is not None and previous_top_level != COMMENT:
                    lines.append("")
                previous_top_level = kind
            indent = self._unit * depth
            if kind == OPEN:
                lines.extend(self._prelude_lines(value, indent))
                depth += 1
            elif kind == COMMENT:
                lines.append(f"{indent}{value}")
            else:
                lines.append(f"{indent}{_declaration(value)}")
        if depth != 0:
            raise FormattingError("Unclosed block")
        return "\n".join(lines) + "\n" if lines else ""

    def _prelude_lines(self, prelude: str, indent: str) -> List[str]:
        if prelude.startswith("@"):
            return [f"{indent}{prelude} {{"]
        selectors = split_selectors(prelude)
        single = f"{indent}{', '.join(selectors)} {{"
        if len(selectors) < 2 or len(single) <= self.options.print_width:
            return [single]
        return [f"{indent}{selector}," for selector in selectors[:-1]] + [f"{indent}{selectors[-1]} {{"]
