"""Core console configuration and theme for linkgate output.

Reports go to stdout; diagnostics and fatal errors go to stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

LINKGATE_THEME = Theme(
    {
        # Status colors
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        # Text styles
        "title": "bold white",
        "dim": "dim",
        "hint": "dim italic",
        # Report styles
        "path": "cyan",
        "href": "magenta",
        "kind": "yellow",
        "key": "bold blue",
    }
)

# Primary console for normal output
console = Console(theme=LINKGATE_THEME, stderr=False)

# Error console for stderr output
err_console = Console(theme=LINKGATE_THEME, stderr=True)
