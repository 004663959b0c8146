"""Full document assembly."""

from __future__ import annotations

from typing import Optional

from jinja2 import BaseLoader, Environment
from markupsafe import Markup

DEFAULT_DESCRIPTION = "Built with Pagecraft"

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <meta name="description" content="{{ description }}">
    <style>
{{ css }}
    </style>
{% if head_html %}
{{ head_html }}
{% endif %}
</head>
<body>
{{ html }}
{% if js %}
<script>
{{ js }}
</script>
{% endif %}
</body>
</html>
"""

_environment = Environment(
    loader=BaseLoader(),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_template = _environment.from_string(DOCUMENT_TEMPLATE)


def assemble_document(
    markup: str,
    stylesheet: str,
    script: Optional[str] = None,
    head_html: Optional[str] = None,
    *,
    title: str,
    description: str = DEFAULT_DESCRIPTION,
) -> str:
    """Merge the generated fragments into the single supported document shape.

    ``title`` and ``description`` are escaped. Every other fragment is
    inserted verbatim at column zero, so whitespace inside ``pre``,
    ``textarea`` and script template literals is kept.
    """
    return _template.render(
        title=title,
        description=description,
        css=Markup(stylesheet.strip()),
        html=Markup(markup.strip()),
        js=Markup(script.strip()) if script and script.strip() else None,
        head_html=Markup(head_html.strip()) if head_html and head_html.strip() else None,
    )
