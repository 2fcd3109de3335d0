"""Unit tests for logging setup."""

import logging
from pathlib import Path

import colorlog

from simple_migrations import get_logger, setup_logging, setup_test_logging


def test_setup_logging_defaults() -> None:
    """Test setup_logging with default parameters."""
    setup_logging()
    root_logger = logging.getLogger()

    assert root_logger.level == logging.INFO
    assert any(
        isinstance(handler.formatter, colorlog.ColoredFormatter)
        for handler in root_logger.handlers
    )


def test_setup_logging_level_name() -> None:
    setup_logging(level="debug")

    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_unknown_level_name() -> None:
    setup_logging(level="chatty")

    assert logging.getLogger().level == logging.INFO


def test_setup_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "simple-migrations.log"
    setup_logging(use_colors=False, log_file=log_file)

    get_logger("test").warning("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()


def test_get_logger() -> None:
    """Test get_logger returns a logger instance."""
    logger = get_logger("test_logger")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "test_logger"


def teardown_module() -> None:
    setup_test_logging()
