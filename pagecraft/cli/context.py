"""Per-invocation CLI context resolved from the workspace configuration."""

import argparse
from dataclasses import dataclass
from pathlib import Path

from pagecraft.config import WorkspaceConfig
from pagecraft.formatting import FormattingOptions

from .errors import CLIConfigError


@dataclass
class CLIContext:
    """
    Shared context for all commands of a single invocation.

    Attributes:
        workspace_root: Root directory of the workspace
        config: Parsed workspace configuration
    """

    workspace_root: Path
    config: WorkspaceConfig

    def formatting_options(self) -> FormattingOptions:
        defaults = self.config.defaults
        return FormattingOptions(indent_size=defaults.indent_size, print_width=defaults.print_width)


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """Context attached to ``args`` by :func:`pagecraft.cli.main`."""
    ctx = getattr(args, "cli_context", None)
    if ctx is None:
        raise CLIConfigError(
            "CLI context was not initialized before command execution",
            hint="This is an internal error - please report it",
            code="CLI_CONTEXT_NOT_INITIALIZED"
        )
    return ctx
