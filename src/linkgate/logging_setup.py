"""Logging configuration for linkgate.

All modules log through children of the ``linkgate`` logger. The console
handler writes to stderr so machine-readable reports on stdout stay clean.
A log file, when configured, receives every record down to DEBUG regardless
of the console level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "linkgate"

FILE_FORMAT = "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(rich_console: bool) -> logging.Handler:
    if rich_console:
        return RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    return handler


def _file_handler(log_file: Path | str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | str | None = None,
    rich_console: bool = True,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure the ``linkgate`` logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives DEBUG and above
        rich_console: Use a rich handler for the console
        quiet_console: Only show WARNING and above on the console, so a
            report printed to the terminal is not interleaved with progress

    Returns:
        The ``linkgate`` logger
    """
    console_level = logging.getLevelName(log_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    if quiet_console:
        console_level = max(console_level, logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console = _console_handler(rich_console)
    console.setLevel(console_level)
    logger.addHandler(console)

    if log_file:
        logger.addHandler(_file_handler(log_file))
        # Let DEBUG records through to the file; the console handler filters
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    return logger
