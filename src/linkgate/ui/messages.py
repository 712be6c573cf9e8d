"""Simple message printing helpers for linkgate output."""

from __future__ import annotations

from rich.markup import escape

from linkgate.ui.core import console, err_console


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"  [warning]![/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"  [info]→[/] {escape(message)}")


def fatal_error(message: str, hint: str | None = None) -> None:
    """Print a fatal error and an optional hint to stderr.

    Example:
        >>> fatal_error("Config not found", "Run 'linkgate config' to see the defaults")
    """
    err_console.print(f"\n[error]Error:[/] {escape(message)}")
    if hint:
        err_console.print(f"[dim]Hint: {escape(hint)}[/]")
