"""Markup rendering for component trees."""

from __future__ import annotations

import logging
from typing import Sequence

from pagecraft.tree import Component

from .components import MarkupContext, get_definition

logger = logging.getLogger(__name__)

ROOT_SEPARATOR = "\n\n"
CHILD_SEPARATOR = "\n"


def render_markup(tree: Sequence[Component]) -> str:
    """Render the root components in document order, separated by blank lines."""
    ctx = MarkupContext(render_children=_render_children)
    parts = [_render_node(node, ctx) for node in tree]
    return ROOT_SEPARATOR.join(part for part in parts if part)


def _render_children(node: Component) -> str:
    ctx = MarkupContext(render_children=_render_children)
    parts = [_render_node(child, ctx) for child in node.children]
    return CHILD_SEPARATOR.join(part for part in parts if part)


def _render_node(node: Component, ctx: MarkupContext) -> str:
    definition = get_definition(node.type)
    if definition is None:
        # Unknown wrapper: emit nothing for it and hoist its children in place.
        logger.debug("Skipping markup for component %s of unknown type %r", node.id, node.type)
        return ctx.render_children(node)
    if node.children and not definition.accepts_children:
        logger.debug("Component %s (%s) does not render children", node.id, node.type)
    return definition.render_markup(node, ctx)

