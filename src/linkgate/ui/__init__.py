"""linkgate UI - Rich console output components.

Modules:
    core: Console instances and theme
    messages: Simple print helpers (warning, info, fatal error)
    report: Report rendering (tables, JSON, GitHub annotations)

Usage:
    from linkgate.ui import console, print_info
    from linkgate.ui.report import print_report
"""

from __future__ import annotations

from linkgate.ui.core import LINKGATE_THEME, console, err_console
from linkgate.ui.messages import (
    fatal_error,
    print_info,
    print_warning,
)
from linkgate.ui.report import (
    OutputFormat,
    print_link_error_table,
    print_load_error_table,
    print_report,
    print_resolve_failure_table,
    print_summary,
    render_github_annotations,
    render_json,
)

__all__ = [
    # Core
    "LINKGATE_THEME",
    "console",
    "err_console",
    # Messages
    "print_warning",
    "print_info",
    "fatal_error",
    # Report
    "OutputFormat",
    "print_report",
    "print_link_error_table",
    "print_load_error_table",
    "print_resolve_failure_table",
    "print_summary",
    "render_json",
    "render_github_annotations",
]
