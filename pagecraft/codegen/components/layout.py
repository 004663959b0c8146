"""Layout components: containers that hold other components."""

from __future__ import annotations

from pagecraft.tree import Component

from .base import ComponentDefinition, MarkupContext, open_tag, wrapper


class ContainerDefinition(ComponentDefinition):
    type = "container"
    display_name = "Container"
    category = "layout"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return wrapper(node, "div", ctx)


class SectionDefinition(ComponentDefinition):
    type = "section"
    display_name = "Section"
    category = "layout"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return wrapper(node, "section", ctx)


class GridDefinition(ComponentDefinition):
    type = "grid"
    display_name = "Grid"
    category = "layout"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return wrapper(node, "div", ctx, classes=("grid",))


class FlexDefinition(ComponentDefinition):
    type = "flex"
    display_name = "Flex Container"
    category = "layout"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return wrapper(node, "div", ctx, classes=("flex",))


class SpacerDefinition(ComponentDefinition):
    type = "spacer"
    display_name = "Spacer"
    category = "layout"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return f"{open_tag(node, 'div', classes=('spacer',))}</div>"


DEFINITIONS = (
    ContainerDefinition(),
    SectionDefinition(),
    GridDefinition(),
    FlexDefinition(),
    SpacerDefinition(),
)
