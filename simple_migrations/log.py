"""Logging configuration for simple-migrations."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
COLOR_LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)
DATE_FORMAT = "%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level, either numeric or a name such as ``"DEBUG"``
        use_colors: Whether to colorize console output
        log_file: Optional path of a rotating log file
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [_create_console_handler(use_colors)]
    if log_file is not None:
        handlers.append(_create_file_handler(log_file))

    logging.basicConfig(level=level, handlers=handlers, force=True)


def _create_console_handler(use_colors: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            COLOR_LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS,
            style="%",
        )
    else:
        formatter = logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler.setFormatter(formatter)
    return console_handler


def _create_file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=4,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return file_handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_test_logging(level: int = logging.DEBUG) -> None:
    """Setup plain console logging for the test suite."""
    setup_logging(level=level, use_colors=False)
