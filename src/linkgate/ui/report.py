"""Report output: rich tables, JSON, and GitHub Actions annotations."""

from __future__ import annotations

import json
from enum import Enum

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from linkgate.models import CheckReport, LinkError, LoadError, ResolveFailure
from linkgate.ui.core import console as default_console


class OutputFormat(str, Enum):
    """Report output format options."""

    table = "table"
    json = "json"
    github = "github"


# =============================================================================
# Tables
# =============================================================================


def print_link_error_table(errors: tuple[LinkError, ...], console: Console | None = None) -> None:
    """Print broken links as a table.

    Example:
        ┏━━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━┓
        ┃ Kind ┃ Href                      ┃ Source                ┃
        ┡━━━━━━╇━━━━━━━━━━━━━━━━━━━━━━━━━━━╇━━━━━━━━━━━━━━━━━━━━━━━┩
        │ hash │ /docs/api/example#nothing │ docs/guides/intro.mdx │
        └──────┴───────────────────────────┴───────────────────────┘
    """
    console = console or default_console
    if not errors:
        return

    table = Table(title=f"[error]Broken links ({len(errors)})[/]", header_style="bold")
    table.add_column("Kind", style="kind", width=6)
    table.add_column("Href", style="href", overflow="fold")
    table.add_column("Source", style="path", overflow="fold")
    for error in errors:
        table.add_row(error.kind.value, escape(error.href), escape(error.source_path.as_posix()))
    console.print(table)


def print_load_error_table(errors: tuple[LoadError, ...], console: Console | None = None) -> None:
    """Print documents that could not be loaded."""
    console = console or default_console
    if not errors:
        return

    table = Table(title=f"[error]Unreadable documents ({len(errors)})[/]", header_style="bold")
    table.add_column("Path", style="path", overflow="fold")
    table.add_column("Error Type", style="yellow")
    table.add_column("Message", style="red", overflow="fold")
    for error in errors:
        table.add_row(escape(error.path.as_posix()), error.error_type, escape(error.message))
    console.print(table)


def print_resolve_failure_table(
    failures: tuple[ResolveFailure, ...], console: Console | None = None
) -> None:
    """Print documents whose links could not all be checked."""
    console = console or default_console
    if not failures:
        return

    table = Table(title=f"[error]Unchecked documents ({len(failures)})[/]", header_style="bold")
    table.add_column("Key", style="key")
    table.add_column("Path", style="path", overflow="fold")
    table.add_column("Message", style="red", overflow="fold")
    for failure in failures:
        table.add_row(
            escape(failure.key), escape(failure.path.as_posix()), escape(failure.message)
        )
    console.print(table)


def print_summary(report: CheckReport, console: Console | None = None) -> None:
    """Print a one-line verdict for the run."""
    console = console or default_console
    counts = (
        f"{report.documents} documents, {len(report.link_errors)} broken links, "
        f"{len(report.load_errors)} load errors, {len(report.resolve_failures)} unchecked"
    )
    if report.failed:
        console.print(f"\n[error]✗ Link check failed[/] [dim]({counts})[/]")
    elif report.has_problems:
        console.print(f"\n[warning]! Link check passed with warnings[/] [dim]({counts})[/]")
    else:
        console.print(f"\n[success]✓ All links valid[/] [dim]({counts})[/]")


# =============================================================================
# Machine-readable formats
# =============================================================================


def render_json(report: CheckReport) -> str:
    """Serialize the report as a JSON document."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def render_github_annotations(report: CheckReport) -> list[str]:
    """Render problems as GitHub Actions ``::error`` workflow commands.

    Load errors and resolve failures are emitted as warnings when the
    report's failure policy does not count them.
    """
    lines: list[str] = []
    for error in report.link_errors:
        path = _escape_property(error.source_path.as_posix())
        lines.append(f"::error file={path},title=Broken link::{_escape_data(error.describe())}")

    load_level = "error" if report.fail_on_load_error else "warning"
    for load_error in report.load_errors:
        path = _escape_property(load_error.path.as_posix())
        message = _escape_data(load_error.message)
        lines.append(f"::{load_level} file={path},title=Unreadable document::{message}")

    resolve_level = "error" if report.fail_on_resolve_error else "warning"
    for failure in report.resolve_failures:
        path = _escape_property(failure.path.as_posix())
        message = _escape_data(failure.message)
        lines.append(f"::{resolve_level} file={path},title=Unchecked document::{message}")
    return lines


def print_report(
    report: CheckReport,
    output_format: OutputFormat = OutputFormat.table,
    console: Console | None = None,
) -> None:
    """Print a report in the requested format."""
    console = console or default_console
    # Machine-readable output is printed verbatim
    raw = {"markup": False, "highlight": False, "emoji": False, "soft_wrap": True}
    if output_format is OutputFormat.json:
        console.print(render_json(report), **raw)
    elif output_format is OutputFormat.github:
        for line in render_github_annotations(report):
            console.print(line, **raw)
    else:
        print_link_error_table(report.link_errors, console)
        print_load_error_table(report.load_errors, console)
        print_resolve_failure_table(report.resolve_failures, console)
        print_summary(report, console)
