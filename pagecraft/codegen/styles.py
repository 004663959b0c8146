"""
Stylesheet compiler.

The stylesheet is assembled from fixed sections, in order:

1. CSS reset
2. ``:root`` theme variables (only when theme inclusion is requested)
3. animation keyframes and trigger rules
4. per-component rules, one pass over the tree in document order
5. per-component custom CSS, naively scoped to the component id
6. global custom CSS, unscoped

Empty sections are dropped; the rest are separated by a blank line.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from pagecraft.tree import Component, walk

from .animations import compile_animations
from .components import get_definition
from .options import GenerationOptions

logger = logging.getLogger(__name__)

CSS_RESET = """/* CSS Reset */
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
  line-height: 1.5;
  color: #1F2937;
  background: white;
}

img {
  max-width: 100%;
  height: auto;
}

a {
  color: inherit;
  text-decoration: none;
}

button {
  font-family: inherit;
  font-size: inherit;
}

/* Gradient Animations */
@keyframes gradient {
  0% { background-position: 0% 50%; }
  50% { background-position: 100% 50%; }
  100% { background-position: 0% 50%; }
}

@keyframes float {
  0%, 100% { transform: translateY(0) rotate(0deg); }
  50% { transform: translateY(-20px) rotate(10deg); }
}"""

SECTION_SEPARATOR = "\n\n"


def generate_theme_css(variables: Mapping[str, str]) -> str:
    declarations = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return f":root {{\n{declarations}\n}}"


def compile_component_styles(tree: Sequence[Component]) -> str:
    """Rules of every known component, each node visited exactly once."""
    rules = []
    for node in walk(tree):
        definition = get_definition(node.type)
        if definition is None:
            logger.debug("Skipping styles for component %s of unknown type %r", node.id, node.type)
            continue
        css = definition.render_styles(node)
        if css:
            rules.append(css)
    return SECTION_SEPARATOR.join(rules)


def scope_custom_css(component_id: str, css: str) -> str:
    """Prefix every selector line of ``css`` with ``#<component_id>``.

    Line based, not a parser: a line is treated as a selector when it
    contains ``{`` and is not blank or a comment line.
    """
    scoped = []
    for line in css.split("\n"):
        stripped = line.strip()
        if stripped and not stripped.startswith("/*") and not stripped.startswith("*") and "{" in line:
            scoped.append(f"#{component_id} {line}")
        else:
            scoped.append(line)
    return "\n".join(scoped)


def compile_custom_css(tree: Sequence[Component]) -> str:
    blocks = []
    for node in walk(tree):
        custom = node.custom_code
        if custom is None or not custom.css or not custom.css.strip():
            continue
        blocks.append(f"/* Custom CSS for #{node.id} */\n{scope_custom_css(node.id, custom.css)}")
    if not blocks:
        return ""
    return "/* Custom Component Styles */\n" + SECTION_SEPARATOR.join(blocks)


def compile_stylesheet(
    tree: Sequence[Component],
    options: Optional[GenerationOptions] = None,
) -> str:
    """Compile the complete stylesheet for ``tree``."""
    options = options or GenerationOptions()
    sections = [CSS_RESET]
    if options.include_theme and options.theme_variables:
        sections.append(generate_theme_css(options.theme_variables))
    sections.append(compile_animations(tree))
    sections.append(compile_component_styles(tree))
    sections.append(compile_custom_css(tree))
    global_code = options.global_custom_code
    if global_code is not None and global_code.css:
        sections.append(f"/* Global Custom CSS */\n{global_code.css}")
    return SECTION_SEPARATOR.join(section for section in sections if section)
