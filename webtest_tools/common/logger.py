"""
================================================================================
Test Logger
================================================================================

Thin layer over Loguru that tags every message with a log tier and the
name of the object that produced it.

Log tiers:
    - LEVEL_1 .. LEVEL_3: test suites, test fixtures and fatal framework errors
    - LEVEL_4 .. LEVEL_6: glue code between fixtures and page objects
    - LEVEL_7 .. LEVEL_9: page objects and other code touching the browser

Object names are humanized, so ``LoginPage`` is logged as ``Login Page``.

================================================================================
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from .string_helper import humanize


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized: bool = False


class LogLevel(str, Enum):
    """Tier of the code that emits a message."""

    LEVEL_1 = "LEVEL_1"
    LEVEL_2 = "LEVEL_2"
    LEVEL_3 = "LEVEL_3"
    LEVEL_4 = "LEVEL_4"
    LEVEL_5 = "LEVEL_5"
    LEVEL_6 = "LEVEL_6"
    LEVEL_7 = "LEVEL_7"
    LEVEL_8 = "LEVEL_8"
    LEVEL_9 = "LEVEL_9"


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_str: Optional[str] = None,
) -> None:
    """
    Initializes the Loguru logger once per process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to $LOG_LEVEL or INFO.
        log_file: Optional file to write logs to. Defaults to $LOG_FILE.
        format_str: Custom log format string.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = format_str or DEFAULT_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = log_file or os.getenv("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Returns the Loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


def format_message(level: LogLevel, object_name: str, message: str) -> str:
    """Render ``[LEVEL_n][Object Name] message``."""
    tier = level.value if isinstance(level, LogLevel) else str(level)
    return f"[{tier}][{humanize(object_name)}] {message}"


def log_info(level: LogLevel, object_name: str, message: str) -> None:
    logger.opt(depth=1).info(format_message(level, object_name, message))


def log_error(level: LogLevel, object_name: str, message: str) -> None:
    logger.opt(depth=1).error(format_message(level, object_name, message))


__all__ = [
    "LogLevel",
    "init_logger",
    "get_logger",
    "format_message",
    "log_info",
    "log_error",
]
