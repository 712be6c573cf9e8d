"""Tests for logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from linkgate.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def reset_linkgate_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("linkgate")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_console_handler(self) -> None:
        logger = setup_logging("DEBUG")
        assert logger.name == "linkgate"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_console_handler(self) -> None:
        logger = setup_logging("INFO", rich_console=False)
        (handler,) = logger.handlers
        assert not isinstance(handler, RichHandler)
        assert isinstance(handler, logging.StreamHandler)

    def test_quiet_console(self) -> None:
        logger = setup_logging("DEBUG", quiet_console=True)
        assert logger.handlers[0].level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert setup_logging("NOISY").level == logging.INFO

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "linkgate.log"
        logger = setup_logging("DEBUG", log_file=log_file, quiet_console=True)
        assert len(logger.handlers) == 2

        logging.getLogger("linkgate.checker").debug("checked %d documents", 3)
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "| DEBUG | [linkgate.checker] checked 3 documents" in content


    def test_file_receives_debug_below_console_level(self, tmp_path: Path) -> None:
        """DEBUG records reach the log file while the console stays at INFO."""
        log_file = tmp_path / "linkgate.log"
        logger = setup_logging("INFO", log_file=log_file)
        console_handler, file_handler = logger.handlers

        assert console_handler.level == logging.INFO
        assert file_handler.level == logging.DEBUG

        logging.getLogger("linkgate.resolver").debug("no heading %r", "usage")
        file_handler.flush()
        assert "[linkgate.resolver] no heading 'usage'" in log_file.read_text(encoding="utf-8")

    def test_quiet_console_without_file(self) -> None:
        logger = setup_logging("INFO", quiet_console=True)
        assert logger.level == logging.WARNING
