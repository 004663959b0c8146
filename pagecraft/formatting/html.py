"""
Markup formatter.

The element tree comes from BeautifulSoup's ``html.parser`` builder; the
emitter on top of it only moves whitespace the browser does not render.
Content with visible text or adjacent inline elements stays on one line,
``pre`` and ``textarea`` bodies are kept verbatim and scripts holding
template literals are never re-indented.
"""

from __future__ import annotations

import re
import textwrap
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Comment, Doctype, NavigableString, PageElement, PreformattedString, Tag

from pagecraft.errors import FormattingError

from .core import FormattingOptions
from .css import StylesheetFormatter

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})
INLINE_ELEMENTS = frozenset({
    "a", "abbr", "b", "bdi", "bdo", "br", "button", "cite", "code", "data",
    "dfn", "em", "i", "img", "input", "kbd", "label", "mark", "q", "s",
    "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
})
VERBATIM_ELEMENTS = frozenset({"pre", "textarea"})
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# HTML whitespace only; a non-breaking space is content.
_WS_RE = re.compile(r"[ \t\n\r\f]+")
_DOCTYPE_PREFIX_RE = re.compile(r"^doctype\s+", re.IGNORECASE)


class _CheckedSoup(BeautifulSoup):
    """BeautifulSoup that rejects end tags not matching the open element."""

    def __init__(self, markup: str):
        self.closed_ids = set()
        super().__init__(markup, "html.parser", multi_valued_attributes=None)

    def handle_endtag(self, name, nsprefix=None):
        if self.currentTag is None or self.currentTag.name != name:
            raise FormattingError(f"Unexpected closing tag </{name}>")
        self.closed_ids.add(id(self.currentTag))
        super().handle_endtag(name, nsprefix)


def parse(text: str) -> List[PageElement]:
    """Parse markup into top-level nodes; raises on unbalanced tags."""
    soup = _CheckedSoup(text)
    for tag in soup.find_all(True):
        if id(tag) not in soup.closed_ids:
            raise FormattingError(f"Unclosed <{tag.name}> element")
    return list(soup.contents)


def _collapse(value: str) -> str:
    return _WS_RE.sub(" ", value)


def _is_text(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _is_blank(node: PageElement) -> bool:
    return _is_text(node) and not _collapse(node).strip(" ")


def _is_inline_tag(node: PageElement) -> bool:
    return isinstance(node, Tag) and node.name in INLINE_ELEMENTS


def keeps_inline(name: Optional[str], children: Sequence[PageElement]) -> bool:
    """Whether line breaks between ``children`` would change rendered text."""
    if name in INLINE_ELEMENTS:
        return True
    if any(_is_text(child) and not _is_blank(child) for child in children):
        return True
    return any(_is_inline_tag(left) and _is_inline_tag(right) for left, right in zip(children, children[1:]))


def _attributes(tag: Tag) -> List[str]:
    parts = []
    for name, value in tag.attrs.items():
        if value is None or value == "":
            parts.append(name)
        else:
            parts.append(f"{name}={EntitySubstitution.substitute_xml(str(value), make_quoted_attribute=True)}")
    return parts


def _raw_body(tag: Tag) -> str:
    return "".join(str(child) for child in tag.contents)


def _trim_blank_lines(lines: List[str]) -> List[str]:
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


class MarkupFormatter:
    """One block element or comment per line, indented by nesting depth.

    Opening tags longer than ``print_width`` put one attribute per line.
    Style bodies go through the stylesheet formatter and script bodies are
    re-indented unless they contain a template literal.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()
        self._unit = self.options.indent_unit()

    def format(self, text: str) -> str:
        nodes = parse(text)
        lines: List[str] = []
        if keeps_inline(None, nodes):
            content = "".join(self._inline(node) for node in nodes).strip(" ")
            if content:
                lines.append(content)
        else:
            for node in nodes:
                self._emit(node, 0, lines)
        return "\n".join(lines) + "\n" if lines else ""

    def _emit(self, node: PageElement, depth: int, lines: List[str]) -> None:
        indent = self._unit * depth
        if isinstance(node, Tag):
            self._emit_element(node, depth, lines)
        elif isinstance(node, Comment):
            lines.append(f"{indent}{self._comment(node)}")
        elif isinstance(node, Doctype):
            lines.append(f"{indent}{self._doctype(node)}")
        elif isinstance(node, PreformattedString):
            lines.append(f"{indent}{node.output_ready()}")
        elif not _is_blank(node):
            lines.append(f"{indent}{self._inline(node).strip(' ')}")

    def _comment(self, node: Comment) -> str:
        inner = node.strip()
        return f"<!-- {inner} -->" if inner else "<!---->"

    def _doctype(self, node: Doctype) -> str:
        return f"<!DOCTYPE {_DOCTYPE_PREFIX_RE.sub('', _collapse(node).strip())}>"

    def _open_tag_lines(self, tag: Tag, indent: str, suffix: str) -> List[str]:
        attributes = _attributes(tag)
        single = f"{indent}<{tag.name}{''.join(' ' + attribute for attribute in attributes)}{suffix}"
        if not attributes or len(single) <= self.options.print_width:
            return [single]
        inner = indent + self._unit
        return [f"{indent}<{tag.name}", *(inner + attribute for attribute in attributes), indent + suffix.strip()]

    def _emit_element(self, tag: Tag, depth: int, lines: List[str]) -> None:
        indent = self._unit * depth
        if tag.name in VOID_ELEMENTS:
            lines.extend(self._open_tag_lines(tag, indent, " />"))
            return
        opening = self._open_tag_lines(tag, indent, ">")
        close_tag = f"</{tag.name}>"
        if tag.name in VERBATIM_ELEMENTS:
            opening[-1] += tag.decode_contents() + close_tag
            lines.extend(opening)
            return
        if tag.name in RAW_TEXT_ELEMENTS:
            self._emit_raw(tag, opening, close_tag, depth, lines)
            return
        children = tag.contents
        if keeps_inline(tag.name, children):
            opening[-1] += "".join(self._inline(child) for child in children).strip(" ") + close_tag
            lines.extend(opening)
            return
        blocks = [child for child in children if not _is_blank(child)]
        if not blocks:
            opening[-1] += close_tag
            lines.extend(opening)
            return
        lines.extend(opening)
        for child in blocks:
            self._emit(child, depth + 1, lines)
        lines.append(f"{indent}{close_tag}")

    def _emit_raw(self, tag: Tag, opening: List[str], close_tag: str, depth: int, lines: List[str]) -> None:
        indent = self._unit * depth
        body = _raw_body(tag)
        if not body.strip():
            opening[-1] += close_tag
            lines.extend(opening)
            return
        lines.extend(opening)
        if tag.name == "script" and "`" in body:
            # Template literals span lines; their text is kept as written.
            lines.extend(_trim_blank_lines(body.split("\n")))
        else:
            if tag.name == "style":
                body = StylesheetFormatter(self.options).format(body)
            inner = _trim_blank_lines([line.rstrip() for line in body.split("\n")])
            inner_indent = self._unit * (depth + 1)
            for line in textwrap.dedent("\n".join(inner)).split("\n"):
                lines.append(f"{inner_indent}{line}" if line else "")
        lines.append(f"{indent}{close_tag}")

    def _inline(self, node: PageElement) -> str:
        """Serialize ``node`` on one line, collapsing but never adding whitespace."""
        if isinstance(node, Comment):
            return self._comment(node)
        if isinstance(node, Doctype):
            return self._doctype(node)
        if isinstance(node, PreformattedString):
            return node.output_ready()
        if not isinstance(node, Tag):
            return EntitySubstitution.substitute_xml(_collapse(node))
        attributes = "".join(f" {attribute}" for attribute in _attributes(node))
        if node.name in VOID_ELEMENTS:
            return f"<{node.name}{attributes} />"
        if node.name in VERBATIM_ELEMENTS:
            body = node.decode_contents()
        elif node.name in RAW_TEXT_ELEMENTS:
            body = _raw_body(node)
        else:
            body = "".join(self._inline(child) for child in node.contents)
        return f"<{node.name}{attributes}>{body}</{node.name}>"
