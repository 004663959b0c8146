"""Workspace configuration support for the Pagecraft CLI."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, get_args

from pagecraft.codegen.options import Platform
from pagecraft.errors import ConfigError
from pagecraft.tree import GlobalCustomCode

CONFIG_FILENAMES = ("pagecraft.toml", ".pagecraftrc")
LOG_LEVEL_ENV = "PAGECRAFT_LOG_LEVEL"
PLATFORMS = get_args(Platform)


@dataclass
class WorkspaceDefaults:
    """Default output location and export flags applied when the CLI is not told otherwise."""

    out_dir: Path = Path("build")
    platform: str = "static"
    include_config: bool = False
    include_theme: bool = False
    theme: str = "default"
    indent_size: int = 2
    print_width: int = 100


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    defaults: WorkspaceDefaults = field(default_factory=WorkspaceDefaults)
    global_code: GlobalCustomCode = field(default_factory=GlobalCustomCode)
    log_level: Optional[str] = None
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(
            f"'{key}' must be true or false, got {value!r}",
            hint="Use a TOML boolean or a JSON true/false, not a string",
        )
    return value


def _parse_defaults(data: Dict[str, Any], root: Path) -> WorkspaceDefaults:
    section = _section(data, "defaults")
    out_dir = Path(section.get("out_dir") or WorkspaceDefaults.out_dir)
    if not out_dir.is_absolute():
        out_dir = (root / out_dir).resolve()
    platform = str(section.get("platform") or WorkspaceDefaults.platform)
    if platform not in PLATFORMS:
        raise ConfigError(
            f"Unsupported platform '{platform}'",
            hint=f"Use one of: {', '.join(PLATFORMS)}",
        )
    try:
        indent_size = int(section.get("indent_size", WorkspaceDefaults.indent_size))
        print_width = int(section.get("print_width", WorkspaceDefaults.print_width))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid formatting defaults: {exc}") from exc
    return WorkspaceDefaults(
        out_dir=out_dir,
        platform=platform,
        include_config=_flag(section, "include_config", WorkspaceDefaults.include_config),
        include_theme=_flag(section, "include_theme", WorkspaceDefaults.include_theme),
        theme=str(section.get("theme") or WorkspaceDefaults.theme),
        indent_size=indent_size,
        print_width=print_width,
    )


def _parse_global_code(data: Dict[str, Any], root: Path) -> GlobalCustomCode:
    section = _section(data, "global_code")
    values: Dict[str, Optional[str]] = {}
    for key in ("css", "javascript", "head_html"):
        inline = section.get(key)
        file_ref = section.get(f"{key}_file")
        if file_ref:
            path = Path(file_ref)
            if not path.is_absolute():
                path = root / path
            try:
                values[key] = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigError(f"Cannot read {key}_file '{file_ref}': {exc}") from exc
        elif inline is not None:
            values[key] = str(inline)
    return GlobalCustomCode(**values)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    env_level = os.environ.get(LOG_LEVEL_ENV) or None
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError(f"Config file not found: {explicit}")
        return WorkspaceConfig(
            root=root,
            defaults=WorkspaceDefaults(out_dir=(root / WorkspaceDefaults.out_dir).resolve()),
            log_level=env_level,
        )

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to read {config_path.name}: {exc}") from exc

    return WorkspaceConfig(
        root=root,
        defaults=_parse_defaults(data, root),
        global_code=_parse_global_code(data, root),
        log_level=env_level or data.get("log_level"),
        source=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_FILENAMES",
    "LOG_LEVEL_ENV",
    "WorkspaceConfig",
    "WorkspaceDefaults",
    "load_workspace_config",
    "locate_config_file",
]
