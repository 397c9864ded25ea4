"""
Logging configuration for cidrcalc.

Console output goes to stderr; stdout carries only the computed address.
An optional rotating log file records DEBUG detail for every translation.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "cidrcalc"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(funcName)-14s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    max_bytes: int = 1048576,  # 1MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Set up the cidrcalc package logger.

    Args:
        level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also log to this file, rotated at max_bytes
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The package logger
    """
    console_level = getattr(logging, level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    # The file handler sees DEBUG records even when the console does not
    logger.setLevel(logging.DEBUG if log_file else console_level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, e.g. 'cidrcalc.address.core'."""
    return logging.getLogger(name)


def configure_logging(debug: bool = False, log_file: str | Path | None = None) -> None:
    """
    Quick logging configuration for the command line.

    Args:
        debug: Show debug messages on the console
        log_file: Write a debug log to this file
    """
    setup_logging(level="DEBUG" if debug else "INFO", log_file=log_file)
