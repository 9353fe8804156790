"""
================================================================================
Webtest Tools Common Utilities
================================================================================

Shared logging setup and small helpers used across the framework.

Exports:
    - init_logger / get_logger: Loguru setup
    - LogLevel, log_info, log_error: tiered log helpers
    - humanize / to_camel_case: string conversion
    - back_up_file / restore_file: file backup helpers
    - ensure_directory: create a directory if missing

Usage:
    from webtest_tools.common import init_logger, log_info, LogLevel

    init_logger()
    log_info(LogLevel.LEVEL_8, "LoginPage", "Opening http://localhost/login")

================================================================================
"""

import os

from .file_helper import back_up_file, get_absolute_resource_path, restore_file
from .logger import LogLevel, get_logger, init_logger, log_error, log_info
from .string_helper import humanize, to_camel_case


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "LogLevel",
    "init_logger",
    "get_logger",
    "log_info",
    "log_error",
    "humanize",
    "to_camel_case",
    "back_up_file",
    "restore_file",
    "get_absolute_resource_path",
    "ensure_directory",
]
