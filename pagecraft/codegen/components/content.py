"""Content components: text, headings, buttons, links and images."""

from __future__ import annotations

from typing import List

from pagecraft.tree import Component

from .base import ComponentDefinition, MarkupContext, element, open_tag, selector, text_content

_HEADING_LEVELS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})


class HeadingDefinition(ComponentDefinition):
    type = "heading"
    display_name = "Heading"
    category = "content"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        level = str(node.props.attributes.get("level", "h2")).lower()
        if level not in _HEADING_LEVELS:
            level = "h2"
        return element(node, level, text_content(node, "Heading"))


class TextDefinition(ComponentDefinition):
    type = "text"
    display_name = "Text"
    category = "content"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return element(node, "p", text_content(node, "Text content"))


class ButtonDefinition(ComponentDefinition):
    type = "button"
    display_name = "Button"
    category = "content"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        button_type = node.props.attributes.get("type", "button")
        return element(node, "button", text_content(node, "Button"), [("type", button_type)])

    def decoration_rules(self, node: Component) -> List[str]:
        return [f"{selector(node)}:hover {{\n  opacity: 0.9;\n  transform: translateY(-1px);\n}}"]


class LinkDefinition(ComponentDefinition):
    type = "link"
    display_name = "Link"
    category = "content"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        attributes = node.props.attributes
        return element(
            node,
            "a",
            text_content(node, "Link"),
            [("href", attributes.get("href", "#")), ("target", attributes.get("target", "_self"))],
        )

    def decoration_rules(self, node: Component) -> List[str]:
        return [f"{selector(node)}:hover {{\n  opacity: 0.8;\n}}"]


class ImageDefinition(ComponentDefinition):
    type = "image"
    display_name = "Image"
    category = "media"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        attributes = node.props.attributes
        return open_tag(
            node,
            "img",
            [
                ("src", attributes.get("src", "https://via.placeholder.com/600x400")),
                ("alt", attributes.get("alt", "Image")),
            ],
            void=True,
        )


DEFINITIONS = (
    HeadingDefinition(),
    TextDefinition(),
    ButtonDefinition(),
    LinkDefinition(),
    ImageDefinition(),
)
