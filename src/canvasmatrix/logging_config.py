"""Logging configuration for canvasmatrix.

Library modules log under the ``canvasmatrix`` logger (replay steps and
augmentation decisions at DEBUG) and stay silent unless the host
application configures logging. ``setup_logging`` is what the cmx command
uses: the matrix and other results go to stdout, warnings and errors to
stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Package-level logger name
LOGGER_NAME = "canvasmatrix"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for a canvasmatrix module.

    Args:
        name: Module name (e.g., __name__). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    # Accept both 'canvasmatrix.augment' and 'augment'
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ConsoleFormatter(logging.Formatter):
    """Plain console output: bare INFO lines, prefixed warnings and errors."""

    PREFIXES = {
        logging.DEBUG: "[debug] ",
        logging.WARNING: "Warning: ",
        logging.ERROR: "Error: ",
        logging.CRITICAL: "Error: ",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.PREFIXES.get(record.levelno, "")
        return f"{prefix}{record.getMessage()}"


class InfoFilter(logging.Filter):
    """Filter that only allows records below WARNING level."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the cmx command.

    Args:
        verbosity: 0=matrix output only, 1 or more=debug records (-v)
        quiet: If True, suppress all output except errors
        log_file: Optional file path that receives every record
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    if quiet:
        console_level = logging.ERROR
    elif verbosity >= 1:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO

    # Capture everything at logger level, filter at handlers
    logger.setLevel(logging.DEBUG)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(console_level)
    stdout_handler.setFormatter(ConsoleFormatter())
    stdout_handler.addFilter(InfoFilter())
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
