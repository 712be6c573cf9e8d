"""App configuration, callbacks, and shared helpers for the CLI.

This module contains the Typer application factory, the main callback and
the logging helper used by every command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from linkgate.cli._context import RuntimeContext
from linkgate.ui import console

if TYPE_CHECKING:
    from linkgate.config import Settings

logger = logging.getLogger(__name__)

# =============================================================================
# Help Panel Names
# =============================================================================

CORE_COMMANDS = "Link Checking"
DIAG_COMMANDS = "Diagnostics"

# Exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


# =============================================================================
# Version Callback
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from linkgate import __version__

        console.print(f"[title]linkgate[/] {__version__}")
        raise typer.Exit()


# =============================================================================
# App Factory
# =============================================================================

MAIN_EPILOG = """
[bold cyan]Examples:[/]
  linkgate check                    [dim]# Check ./docs with linkgate.yaml[/]
  linkgate check site/docs          [dim]# Check another documentation root[/]
  linkgate check --format github    [dim]# Annotate a GitHub Actions run[/]
  linkgate headings docs/api.mdx    [dim]# Show the anchors of one page[/]

[dim]Exit status: 0 all links valid, 1 broken links, 2 configuration error.[/]
"""


def make_app() -> typer.Typer:
    """Create and configure the main Typer application."""
    return typer.Typer(
        name="linkgate",
        help="Check links and heading anchors across Markdown/MDX documentation",
        epilog=MAIN_EPILOG,
        rich_markup_mode="rich",
        pretty_exceptions_enable=True,
        pretty_exceptions_show_locals=False,
        no_args_is_help=True,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )


# =============================================================================
# Logging Setup Helper
# =============================================================================


def setup_logging(verbose: bool, settings: Settings | None = None) -> None:
    """Configure logging based on options and loaded settings."""
    from linkgate.logging_setup import setup_logging as _setup_logging

    log_level = "DEBUG" if verbose else (settings.log_level if settings else "INFO")
    _setup_logging(
        log_level=log_level,
        log_file=settings.log_file if settings else None,
        rich_console=True,
        quiet_console=not verbose,
    )


# =============================================================================
# Main Callback Factory
# =============================================================================


def create_main_callback(app: typer.Typer) -> None:
    """Register the main callback on the app."""

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                "-V",
                callback=version_callback,
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option(
                "--verbose",
                "-v",
                help="Enable verbose (DEBUG) logging.",
            ),
        ] = False,
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to linkgate.yaml (default: ./linkgate.yaml if present).",
                exists=False,  # Reported as a configuration error instead
            ),
        ] = None,
    ) -> None:
        """Offline link checker for documentation sites.

        Indexes every document and its heading anchors, then verifies each
        internal link and [cyan]#anchor[/] against that index.
        """
        ctx.obj = RuntimeContext(config_path=config, verbose=verbose)
        setup_logging(verbose)
