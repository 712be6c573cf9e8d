"""linkgate CLI - command-line interface built with Typer and Rich.

Commands:
- check: run the link check (CI entry point)
- headings: show the anchors computed for one document
- config: show the effective settings
"""

from __future__ import annotations

import sys

from linkgate.cli._app import (
    CORE_COMMANDS,
    DIAG_COMMANDS,
    EXIT_FAILED,
    EXIT_OK,
    EXIT_USAGE,
    create_main_callback,
    make_app,
)
from linkgate.cli._context import RuntimeContext, get_runtime_context

app = make_app()

# Register main callback (handles --version, --verbose, --config)
create_main_callback(app)

from linkgate.cli.core import register_core_commands  # noqa: E402

register_core_commands(app)


def main() -> int:
    """Main entry point for the CLI."""
    try:
        app()
        return EXIT_OK
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_OK


__all__ = [
    "app",
    "main",
    "RuntimeContext",
    "get_runtime_context",
    "CORE_COMMANDS",
    "DIAG_COMMANDS",
    "EXIT_OK",
    "EXIT_FAILED",
    "EXIT_USAGE",
]

if __name__ == "__main__":
    sys.exit(main())
