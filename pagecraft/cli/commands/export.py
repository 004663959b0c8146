"""
Export command implementation.

Packages the generated site, and optionally project scaffolding, into
``<slug>.zip`` in the output directory.
"""

import argparse
import asyncio
from pathlib import Path

from pagecraft.codegen import ExportOptions
from pagecraft.export import ArchiveExporter, DirectorySink
from pagecraft.stores import EditorState

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..loading import load_tree_source
from ..output import print_success
from ._options import resolve_flag, resolve_out_dir, resolve_theme


def cmd_export(args: argparse.Namespace) -> None:
    """Handle the 'export' subcommand."""
    try:
        ctx = get_cli_context(args)
        defaults = ctx.config.defaults
        source_path = Path(args.tree).resolve()
        tree = load_tree_source(source_path)
        project_name = args.name or source_path.stem

        options = ExportOptions(
            include_theme=resolve_flag(args, "include_theme", defaults.include_theme),
            include_config=resolve_flag(args, "include_config", defaults.include_config),
            platform=args.platform or defaults.platform,
        )
        exporter = ArchiveExporter(
            theme_provider=resolve_theme(args, ctx),
            editor_provider=EditorState(ctx.config.global_code),
            save_as=DirectorySink(resolve_out_dir(args, ctx)),
            formatting=ctx.formatting_options(),
        )
        result = asyncio.run(exporter.export_project(tree, project_name, options))
        print_success(f"Project exported to {result.location}")
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
