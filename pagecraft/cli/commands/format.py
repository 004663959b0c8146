"""
Format command implementation.

Rewrites a markup or stylesheet file in canonical form, or with
``--check`` only reports whether it would change.
"""

import argparse
import sys
from pathlib import Path

from pagecraft.formatting import Formatter

from ..context import get_cli_context
from ..errors import CLIFileNotFoundError, CLIRuntimeError, handle_cli_exception
from ..output import print_success, print_warning

STYLESHEET_SUFFIXES = {".css"}


def detect_kind(path: Path) -> str:
    return "stylesheet" if path.suffix.lower() in STYLESHEET_SUFFIXES else "markup"


def cmd_format(args: argparse.Namespace) -> None:
    """Handle the 'format' subcommand; exits 1 when ``--check`` finds changes."""
    try:
        ctx = get_cli_context(args)
        path = Path(args.file).resolve()
        if not path.is_file():
            raise CLIFileNotFoundError(f"File not found: {path}")
        kind = args.kind or detect_kind(path)
        text = path.read_text(encoding="utf-8")

        result = Formatter(ctx.formatting_options()).format_document(text, kind)
        if not result.success():
            raise CLIRuntimeError(
                f"Could not format {path.name}",
                hint="; ".join(result.errors),
                code="CLI_FORMAT_ERROR",
            )

        if args.check:
            if result.is_changed:
                print_warning(f"{path.name} is not formatted")
                sys.exit(1)
            print_success(f"{path.name} is formatted")
            return

        if result.is_changed:
            path.write_text(result.formatted_text, encoding="utf-8")
            print_success(f"Formatted {path.name}")
        else:
            print_success(f"{path.name} already formatted")
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
