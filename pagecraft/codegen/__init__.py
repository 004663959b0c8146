"""
Static site generation from a component tree.

The markup renderer, style compiler, animation compiler and script
synthesizer each read the same immutable tree; :func:`generate_project`
joins their output into a formatted document.
"""

from __future__ import annotations

__all__ = [
    "GeneratedSite",
    "GenerationOptions",
    "ExportOptions",
    "DEFAULT_DESCRIPTION",
    "assemble_document",
    "compile_animations",
    "compile_stylesheet",
    "generate_keyframes",
    "generate_project",
    "generate_script",
    "generate_trigger_rules",
    "render_markup",
]

from .animations import compile_animations, generate_keyframes, generate_trigger_rules
from .document import DEFAULT_DESCRIPTION, assemble_document
from .markup import render_markup
from .options import ExportOptions, GenerationOptions
from .pipeline import GeneratedSite, generate_project
from .scripts import generate_script
from .styles import compile_stylesheet
