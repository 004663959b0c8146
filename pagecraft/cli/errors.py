"""
Error handling for the Pagecraft CLI.

Command handlers raise :class:`CLIError` subclasses (or let
:class:`~pagecraft.errors.PagecraftError` escape) and hand anything they
catch to :func:`handle_cli_exception`, which prints it and exits.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional


_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """Workspace configuration is missing or invalid."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """Invalid command arguments or input files."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Failures while a command is executing."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


class CLIBuildError(CLIRuntimeError):
    """Site generation or writing the output files failed."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_BUILD_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """A tree or source file named on the command line does not exist."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Format exception for CLI display with context and hints.

    Examples:
        >>> print(format_cli_error(CLIValidationError("Unknown kind", hint="Use markup or stylesheet")))
        Error [CLI_VALIDATION_ERROR]: Unknown kind
        Hint: Use markup or stylesheet
    """
    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        formatter = getattr(exc, "format", None)
        if callable(formatter):
            lines.append(f"Error: {formatter()}")
        else:
            lines.append(f"Error: {exc.__class__.__name__}: {exc}")
        cause = exc.__cause__
        if verbose and cause is not None:
            lines.append(f"Caused by: {cause.__class__.__name__}: {cause}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """Current exception traceback, truncated to a terminal-friendly size."""
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def wrap_exception(
    exc: BaseException,
    *,
    message: str,
    error_class: type = CLIRuntimeError,
    **kwargs
) -> CLIError:
    """Wrap a generic exception as a CLI error, keeping its type and text in the context."""
    context = kwargs.get('context', {})
    context['original_exception'] = str(exc)
    context['original_type'] = exc.__class__.__name__
    kwargs['context'] = context
    return error_class(message, **kwargs)


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """Verbose output is on with ``--verbose`` or PAGECRAFT_VERBOSE/PAGECRAFT_DEBUG."""
    return verbose_flag or _env_flag("PAGECRAFT_VERBOSE") or _env_flag("PAGECRAFT_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Print ``exc`` for the terminal and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)
    sys.exit(exit_code)
