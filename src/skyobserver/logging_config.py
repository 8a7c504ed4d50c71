"""Logging configuration for SkyObserver.

All loggers live under the ``skyobserver`` namespace so a single call to
``setup_logging`` at an entry point configures the whole package. Library
code only ever calls ``get_logger(__name__)``.

Usage:
    from skyobserver.logging_config import setup_logging, get_logger

    setup_logging(log_level="DEBUG", log_file="logs/skyobserver.log")
    logger = get_logger(__name__)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "skyobserver"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _level(name: str) -> int:
    return LOG_LEVELS.get(name.upper(), logging.INFO)


def setup_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure the ``skyobserver`` logger with console and optional file output.

    Calling it again replaces the previously installed handlers.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_file: Optional path; enables a size-rotated file handler.

    Returns:
        The configured package logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_level(log_level))
    root_logger.handlers.clear()
    root_logger.propagate = False

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_level(log_level))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(_level(log_level))
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``skyobserver`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
