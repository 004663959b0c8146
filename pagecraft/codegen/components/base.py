"""Base class, registry and shared helpers for component definitions."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from pagecraft.tree import AnimationTrigger, Component, PropertyMap

from ..values import format_value, style_property_name

Attribute = Tuple[str, Optional[str]]

BREAKPOINTS: Tuple[Tuple[str, str], ...] = (
    ("sm", "640px"),
    ("md", "768px"),
    ("lg", "1024px"),
    ("xl", "1280px"),
)


@dataclass(frozen=True)
class MarkupContext:
    """Callbacks handed to definitions while rendering markup."""

    render_children: Callable[[Component], str]


class ComponentDefinition(ABC):
    """Markup and style generator for one component type."""

    type: str = ""
    display_name: str = ""
    category: str = ""
    accepts_children: bool = False

    @abstractmethod
    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        """Return the markup for ``node`` (including its children if it accepts them)."""

    def render_styles(self, node: Component) -> str:
        """Return the base and responsive rules plus any decoration rules."""
        rules = [responsive_rules(node)]
        rules.extend(self.decoration_rules(node))
        return "\n".join(rule for rule in rules if rule)

    def decoration_rules(self, node: Component) -> List[str]:
        """Fixed rules scoped under the node selector (hover states, block internals)."""
        return []


class ComponentRegistry:
    """Registry of component definitions keyed by type tag."""

    def __init__(self) -> None:
        self._definitions: Dict[str, ComponentDefinition] = {}

    def register(self, definition: ComponentDefinition) -> None:
        if definition.type in self._definitions:
            raise ValueError(f"Component type '{definition.type}' already registered")
        self._definitions[definition.type] = definition

    def get(self, component_type: str) -> Optional[ComponentDefinition]:
        return self._definitions.get(component_type)


def selector(node: Component) -> str:
    return f"#{node.id}"


def animation_attributes(node: Component) -> List[Attribute]:
    """Runtime flags read by the shared scroll and click helpers."""
    attrs: List[Attribute] = []
    animations = node.animations
    if any(a.trigger == AnimationTrigger.ON_SCROLL.value for a in animations):
        attrs.append(("data-scroll-animation", "true"))
    click = next((a for a in animations if a.trigger == AnimationTrigger.ON_CLICK.value), None)
    if click is not None:
        attrs.append(("data-click-animation", "true"))
        attrs.append(("data-animation-duration", format_value(click.options.duration)))
    return attrs


def render_attributes(attributes: Iterable[Attribute]) -> str:
    parts = []
    for name, value in attributes:
        if value is None:
            parts.append(name)
        else:
            parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return " ".join(parts)


def open_tag(
    node: Component,
    tag: str,
    attributes: Sequence[Attribute] = (),
    *,
    classes: Sequence[str] = (),
    void: bool = False,
) -> str:
    class_names = " ".join([f"c-{node.id}", *classes])
    attrs: List[Attribute] = [("class", class_names), ("id", node.id)]
    attrs.extend(animation_attributes(node))
    attrs.extend(attributes)
    rendered = render_attributes(attrs)
    return f"<{tag} {rendered} />" if void else f"<{tag} {rendered}>"


def element(
    node: Component,
    tag: str,
    inner: str,
    attributes: Sequence[Attribute] = (),
    *,
    classes: Sequence[str] = (),
) -> str:
    return f"{open_tag(node, tag, attributes, classes=classes)}{inner}</{tag}>"


def wrapper(
    node: Component,
    tag: str,
    ctx: MarkupContext,
    attributes: Sequence[Attribute] = (),
    *,
    classes: Sequence[str] = (),
    prefix: str = "",
) -> str:
    """Element whose body is ``prefix`` followed by the rendered children."""
    body = "\n".join(part for part in (prefix, ctx.render_children(node)) if part)
    return f"{open_tag(node, tag, attributes, classes=classes)}\n{body}\n</{tag}>"


def declarations(properties: PropertyMap, indent: str = "  ") -> str:
    return "\n".join(
        f"{indent}{style_property_name(name)}: {format_value(value)};"
        for name, value in properties.items()
    )


def responsive_rules(node: Component) -> str:
    """Base rule plus one media query per responsive variant present."""
    rules: List[str] = []
    if node.styles.base:
        rules.append(f"{selector(node)} {{\n{declarations(node.styles.base)}\n}}")
    for variant, min_width in BREAKPOINTS:
        properties = node.styles.variant(variant)
        if properties:
            rules.append(
                f"@media (min-width: {min_width}) {{\n"
                f"  {selector(node)} {{\n{declarations(properties, '    ')}\n  }}\n}}"
            )
    return "\n".join(rules)


def text_content(node: Component, default: str) -> str:
    content = node.props.content
    if isinstance(content, str) and content:
        return content
    return default
