"""
End-to-end generation: tree snapshot in, formatted site out.

The stages are pure functions of the tree and the options; the only
awaited steps are the formatter passes, run one after another.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from pagecraft.formatting import FormattingOptions, format_code
from pagecraft.tree import Component

from .document import DEFAULT_DESCRIPTION, assemble_document
from .markup import render_markup
from .options import GenerationOptions
from .scripts import generate_script
from .styles import compile_stylesheet


@dataclass(frozen=True)
class GeneratedSite:
    """Formatted output of one generation call."""

    html: str
    css: str
    full_page: str

    def to_dict(self) -> Dict[str, str]:
        return {"html": self.html, "css": self.css, "fullPage": self.full_page}


async def generate_project(
    tree: Sequence[Component],
    project_name: str,
    options: Optional[GenerationOptions] = None,
    *,
    description: str = DEFAULT_DESCRIPTION,
    formatting: Optional[FormattingOptions] = None,
) -> GeneratedSite:
    """
    Run every generation stage over ``tree``.

    Args:
        tree: Root components of the page.
        project_name: Used as the document title.
        options: Theme and global custom code inputs.
        description: Content of the description meta tag.
        formatting: Formatter settings for all three outputs.

    Returns:
        The formatted markup fragment, stylesheet and full document.
    """
    options = options or GenerationOptions()
    global_code = options.global_custom_code

    markup = render_markup(tree)
    stylesheet = compile_stylesheet(tree, options)

    formatted_markup = await format_code(markup, "markup", formatting)
    formatted_stylesheet = await format_code(stylesheet, "stylesheet", formatting)

    script = generate_script(tree, global_code.javascript if global_code else None)
    document = assemble_document(
        formatted_markup,
        formatted_stylesheet,
        script,
        global_code.head_html if global_code else None,
        title=project_name,
        description=description,
    )
    full_page = await format_code(document, "markup", formatting)

    return GeneratedSite(html=formatted_markup, css=formatted_stylesheet, full_page=full_page)
