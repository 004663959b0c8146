"""Terminal output helpers for CLI commands."""

from typing import Iterable


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Site generated in build/")
        ✓ Site generated in build/
    """
    print(f"✓ {message}")


def print_warning(message: str) -> None:
    print(f"! {message}")


def print_listing(title: str, entries: Iterable[str], *, marked: str = "") -> None:
    """Print ``title`` followed by one indented entry per line, starring ``marked``."""
    print(title)
    for entry in entries:
        marker = "*" if entry == marked else " "
        print(f"  {marker} {entry}")
