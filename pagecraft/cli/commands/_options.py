"""Option resolution shared by the build and export commands."""

import argparse
from pathlib import Path
from typing import Dict, Optional

from pagecraft.errors import ConfigError
from pagecraft.stores import ThemeStore

from ..context import CLIContext
from ..errors import CLIConfigError


def resolve_out_dir(args: argparse.Namespace, ctx: CLIContext) -> Path:
    override = getattr(args, "out", None)
    if not override:
        return ctx.config.defaults.out_dir
    out_dir = Path(override)
    if not out_dir.is_absolute():
        out_dir = (Path.cwd() / out_dir).resolve()
    return out_dir


def resolve_flag(args: argparse.Namespace, name: str, default: bool) -> bool:
    value = getattr(args, name, None)
    return default if value is None else bool(value)


def resolve_theme(args: argparse.Namespace, ctx: CLIContext) -> ThemeStore:
    name = getattr(args, "theme", None) or ctx.config.defaults.theme
    try:
        return ThemeStore(name)
    except ConfigError as exc:
        raise CLIConfigError(exc.message, hint=exc.hint) from exc


def theme_variables(args: argparse.Namespace, ctx: CLIContext) -> Optional[Dict[str, str]]:
    if not resolve_flag(args, "include_theme", ctx.config.defaults.include_theme):
        return None
    return resolve_theme(args, ctx).css_variables
