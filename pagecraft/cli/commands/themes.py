"""Themes command implementation."""

import argparse

from pagecraft.stores import preset_names

from ..context import get_cli_context
from ..output import print_listing


def cmd_themes(args: argparse.Namespace) -> None:
    """List the preset themes, marking the workspace default."""
    ctx = get_cli_context(args)
    print_listing("Available themes:", preset_names(), marked=ctx.config.defaults.theme)
