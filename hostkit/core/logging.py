"""
Logging for hostkit

Console output is attached once, to the package logger. Module loggers only propagate to it, so any number of
get_logger() calls share a single stdout handler.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from hostkit.core.formats import LOGS

__all__ = ["get_logger", "PACKAGE_LOGGER"]

PACKAGE_LOGGER = "hostkit"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_hostkit_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter(LOGS.FORMAT))
        handler._hostkit_console = True
        logger.addHandler(handler)
        logger.setLevel(LOGS.DEFAULT_LEVEL)
    return logger


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in logger.handlers)


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the hostkit package logger.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Optional level for this logger only (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file this logger also writes to
        format_string: Format for the log file; defaults to the console format

    Returns:
        The logger. Calling again with the same file adds no second handler.
    """
    package = _package_logger()
    logger = package if name == PACKAGE_LOGGER else logging.getLogger(name)

    if log_level:
        logger.setLevel(getattr(logging, log_level.upper()))

    if log_file and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(format_string or LOGS.FORMAT))
        logger.addHandler(file_handler)

    return logger
