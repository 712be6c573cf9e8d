"""Link checking and diagnostics commands.

Commands: check, headings, config
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from linkgate.cli._app import (
    CORE_COMMANDS,
    DIAG_COMMANDS,
    EXIT_FAILED,
    EXIT_USAGE,
    setup_logging,
)
from linkgate.cli._context import get_runtime_context
from linkgate.config import RootMapping, Settings
from linkgate.exceptions import ConfigurationError, DocumentLoadError, ScanError
from linkgate.ui import (
    OutputFormat,
    console,
    err_console,
    fatal_error,
    print_info,
    print_report,
    print_warning,
)


def _load_settings(ctx: typer.Context) -> Settings:
    """Load settings for a command, exiting with status 2 when invalid."""
    runtime = get_runtime_context(ctx.obj)
    try:
        settings = runtime.settings
    except ConfigurationError as e:
        fatal_error(str(e), hint="Run 'linkgate config' to see the effective settings")
        for key, value in e.details.items():
            err_console.print(f"  [dim]{key}:[/] {escape(str(value))}")
        raise typer.Exit(EXIT_USAGE) from e
    setup_logging(runtime.verbose, settings)
    return settings


def register_core_commands(app: typer.Typer) -> None:
    """Register link checking commands on the app."""

    @app.command(rich_help_panel=CORE_COMMANDS)
    def check(
        ctx: typer.Context,
        roots: Annotated[
            list[Path] | None,
            typer.Argument(
                help="Documentation directories to check (default: roots from linkgate.yaml).",
                show_default=False,
            ),
        ] = None,
        output_format: Annotated[
            OutputFormat,
            typer.Option("--format", "-f", help="Report format."),
        ] = OutputFormat.table,
        workers: Annotated[
            int | None,
            typer.Option("--workers", "-j", min=1, help="Worker threads (default: auto)."),
        ] = None,
        fail_on_load_error: Annotated[
            bool | None,
            typer.Option(
                "--fail-on-load-error/--no-fail-on-load-error",
                help="Fail when a document cannot be read or parsed.",
                show_default=False,
            ),
        ] = None,
        fail_on_resolve_error: Annotated[
            bool | None,
            typer.Option(
                "--fail-on-resolve-error/--no-fail-on-resolve-error",
                help="Fail when a document's links cannot all be checked.",
                show_default=False,
            ),
        ] = None,
    ) -> None:
        """Check every internal link and heading anchor.

        Absolute links ([cyan]/docs/...[/]) must point to an existing document
        (or its [cyan]index[/] page) and, with a [cyan]#hash[/], to one of its
        headings. Bare [cyan]#hash[/] links must match a heading of the same page.

        [bold]Examples:[/]
          linkgate check                     [dim]# Configured roots[/]
          linkgate check docs -f json        [dim]# JSON report[/]
          linkgate check --no-fail-on-load-error
        """
        from linkgate.checker import LinkChecker

        settings = _load_settings(ctx)
        if roots:
            settings = settings.with_overrides(roots=tuple(RootMapping(root) for root in roots))
        settings = settings.with_overrides(
            max_workers=workers,
            fail_on_load_error=fail_on_load_error,
            fail_on_resolve_error=fail_on_resolve_error,
        )

        checker = LinkChecker(settings)
        try:
            if output_format is OutputFormat.table:
                with err_console.status("Checking links..."):
                    report = checker.run()
            else:
                report = checker.run()
        except ScanError as e:
            fatal_error(str(e), hint="Check the roots in linkgate.yaml or on the command line")
            raise typer.Exit(EXIT_USAGE) from e

        if report.documents == 0 and output_format is OutputFormat.table:
            print_warning("No documents found under the configured roots")
        print_report(report, output_format)
        if report.failed:
            raise typer.Exit(EXIT_FAILED)

    @app.command(rich_help_panel=DIAG_COMMANDS)
    def headings(
        ctx: typer.Context,
        path: Annotated[
            Path,
            typer.Argument(help="Document to inspect.", exists=True, dir_okay=False),
        ],
    ) -> None:
        """Show the canonical key and heading anchors of one document.

        Use this to find the exact [cyan]#anchor[/] to link to.
        """
        from linkgate.loader import load_document
        from linkgate.markdown import MarkdownParser
        from linkgate.paths import PathNormalizer

        settings = _load_settings(ctx)
        normalizer = PathNormalizer(settings.roots, settings.extensions)
        try:
            document = load_document(path, normalizer=normalizer, parser=MarkdownParser())
        except DocumentLoadError as e:
            fatal_error(str(e))
            raise typer.Exit(EXIT_FAILED) from e

        console.print(f"[title]Key:[/] [key]{escape(document.key)}[/]")
        title = document.metadata.get("title")
        if title is not None:
            console.print(f"[title]Title:[/] {escape(str(title))}")
        if not document.headings:
            print_info("No headings found")
            return
        for slug in document.headings:
            console.print(f"  [info]#[/]{escape(slug)}")

    @app.command("config", rich_help_panel=DIAG_COMMANDS)
    def show_config(ctx: typer.Context) -> None:
        """Show the effective settings (file, environment and defaults combined)."""
        settings = _load_settings(ctx)

        table = Table(title="linkgate settings", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", overflow="fold")

        roots = ", ".join(
            f"{root.source.as_posix()} → {root.prefix or '/'}" for root in settings.roots
        )
        rows = [
            ("config_file", str(settings.config_file or "(defaults)")),
            ("roots", roots),
            ("docs_path", settings.docs_path or "(none)"),
            ("extensions", ", ".join(settings.extensions)),
            ("ignore_paths", ", ".join(sorted(settings.ignore_paths)) or "(none)"),
            ("excluded_hashes", ", ".join(sorted(settings.excluded_hashes)) or "(none)"),
            ("fail_on_load_error", str(settings.fail_on_load_error)),
            ("fail_on_resolve_error", str(settings.fail_on_resolve_error)),
            ("workers", str(settings.worker_count)),
            ("log_level", settings.log_level),
            ("log_file", str(settings.log_file or "(none)")),
        ]
        for name, value in rows:
            table.add_row(name, escape(value))
        console.print(table)
