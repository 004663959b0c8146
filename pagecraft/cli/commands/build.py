"""
Build command implementation.

Generates ``index.html`` and ``styles.css`` from a component tree file.
"""

import argparse
import asyncio
from pathlib import Path

from pagecraft.codegen import GenerationOptions, generate_project

from ..context import get_cli_context
from ..errors import handle_cli_exception, wrap_exception, CLIBuildError
from ..loading import load_tree_source
from ..output import print_success
from ._options import resolve_out_dir, theme_variables


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the 'build' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - tree: Path to the component tree JSON file
            - out: Output directory (optional, workspace default otherwise)
            - name: Document title (optional, file stem otherwise)
            - include_theme / theme: Theme variable block settings (optional)

    Raises:
        SystemExit: On any error during the build
    """
    try:
        ctx = get_cli_context(args)
        source_path = Path(args.tree).resolve()
        tree = load_tree_source(source_path)
        project_name = args.name or source_path.stem

        variables = theme_variables(args, ctx)
        options = GenerationOptions(
            include_theme=variables is not None,
            theme_variables=variables,
            global_custom_code=ctx.config.global_code,
        )
        site = asyncio.run(
            generate_project(tree, project_name, options, formatting=ctx.formatting_options())
        )

        out_dir = resolve_out_dir(args, ctx)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            (out_dir / "index.html").write_text(site.full_page, encoding="utf-8")
            (out_dir / "styles.css").write_text(site.css, encoding="utf-8")
        except OSError as exc:
            raise wrap_exception(
                exc,
                message=f"Could not write site to {out_dir}",
                error_class=CLIBuildError,
            ) from exc
        print_success(f"Static site generated in {out_dir}")
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
