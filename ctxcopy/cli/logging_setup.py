"""Logging configuration for the ctxcopy namespace."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "ctxcopy"

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Configure handlers on the `ctxcopy` logger.

    Console output goes to stderr at WARNING, or DEBUG when verbose. An
    optional rotating log file (5MB, 3 backups) records DEBUG and up.

    Calling this again replaces the previous handlers.

    Args:
        verbose: Lower the console threshold to DEBUG.
        log_file: Optional log file path. Parent directories are created.

    Returns:
        The configured namespace logger.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))

    ctx_logger = logging.getLogger(LOGGER_NAME)
    for handler in ctx_logger.handlers:
        handler.close()
    ctx_logger.handlers.clear()
    ctx_logger.addHandler(console_handler)
    level = console_level

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        ctx_logger.addHandler(file_handler)
        level = logging.DEBUG

    ctx_logger.setLevel(level)
    # Don't propagate to root logger
    ctx_logger.propagate = False
    return ctx_logger
