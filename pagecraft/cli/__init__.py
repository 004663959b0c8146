"""
Pagecraft CLI entry point.

Dispatches the ``build``, ``export``, ``format`` and ``themes`` subcommands
to their command modules after resolving the workspace configuration.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pagecraft import __version__
from pagecraft.config import load_workspace_config
from pagecraft.errors import ConfigError

from .commands import cmd_build, cmd_export, cmd_format, cmd_themes
from .context import CLIContext
from .errors import CLIConfigError, handle_cli_exception

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _configure_runtime_logging(args, env_level: Optional[str] = None) -> None:
    """Configure the ``pagecraft`` logger from ``--log-level`` or PAGECRAFT_LOG_LEVEL."""
    log_level = (getattr(args, 'log_level', None) or env_level or 'info').lower()
    numeric_level = LOG_LEVELS.get(log_level, logging.INFO)

    package_logger = logging.getLogger('pagecraft')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def _add_generation_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('tree', help='Path to the component tree JSON file')
    parser.add_argument(
        '--out', '-o', default=None,
        help='Output directory (defaults to the workspace out_dir)'
    )
    parser.add_argument(
        '--name', default=None,
        help='Project name used as page title (defaults to the tree file name)'
    )
    parser.add_argument(
        '--include-theme', action='store_true', default=None,
        help='Emit the theme as CSS custom properties'
    )
    parser.add_argument(
        '--theme', default=None,
        help='Preset theme to emit (see `pagecraft themes`)'
    )


def build_parser(workspace_root: Path, config_path: Optional[Path]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pagecraft - compile component trees into static sites",
        prog="pagecraft"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=str(config_path) if config_path else None,
        help='Path to a pagecraft.toml configuration file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set PAGECRAFT_VERBOSE=1)'
    )
    parser.add_argument(
        '--workspace',
        default=str(workspace_root),
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set PAGECRAFT_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    build_cmd = subparsers.add_parser('build', help='Generate index.html and styles.css')
    _add_generation_arguments(build_cmd)
    build_cmd.set_defaults(func=cmd_build)

    export_cmd = subparsers.add_parser('export', help='Package the generated site as a ZIP archive')
    _add_generation_arguments(export_cmd)
    export_cmd.add_argument(
        '--include-config', action='store_true', default=None,
        help='Add package.json, README.md, .gitignore and the deploy descriptor'
    )
    export_cmd.add_argument(
        '--platform',
        choices=['vercel', 'netlify', 'static'],
        default=None,
        help='Deploy target whose descriptor is added with --include-config'
    )
    export_cmd.set_defaults(func=cmd_export)

    format_cmd = subparsers.add_parser('format', help='Format a markup or stylesheet file in place')
    format_cmd.add_argument('file', help='File to format')
    format_cmd.add_argument(
        '--kind',
        choices=['markup', 'stylesheet'],
        default=None,
        help='Input kind (default: from the file extension)'
    )
    format_cmd.add_argument(
        '--check', action='store_true',
        help='Exit with status 1 instead of rewriting when the file would change'
    )
    format_cmd.set_defaults(func=cmd_format)

    themes_cmd = subparsers.add_parser('themes', help='List preset themes')
    themes_cmd.set_defaults(func=cmd_themes)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['build', 'page.json', '--out', 'site'])  # doctest: +SKIP
        ✓ Static site generated in /abs/site
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pre-parse to locate the workspace before building the full parser
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('--config')
    pre_parser.add_argument('--workspace')
    pre_args, _ = pre_parser.parse_known_args(argv)

    workspace_root = Path(pre_args.workspace).resolve() if pre_args.workspace else Path.cwd()
    config_path = Path(pre_args.config).resolve() if pre_args.config else None

    parser = build_parser(workspace_root, config_path)
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_workspace_config(workspace_root, config_path)
    except ConfigError as exc:
        handle_cli_exception(
            CLIConfigError(exc.message, hint=exc.hint),
            verbose=args.verbose,
        )

    args.cli_context = CLIContext(workspace_root=workspace_root, config=config)
    _configure_runtime_logging(args, config.log_level)

    args.func(args)


__all__ = ["main", "build_parser"]


if __name__ == '__main__':  # pragma: no cover
    main()
