"""
================================================================================
Framework Exceptions
================================================================================

    WebtestError
     ├── ConfigurationError   - config file missing, unreadable or incomplete
     ├── InstantiationError   - page object / test data can not be built
     ├── InvalidLocatorError  - malformed or unknown element locator
     ├── NavigationError      - page could not be opened or verified
     ├── InvalidSessionError  - browser handle missing or disconnected
     └── StopTestError        - test can not continue and should stop

================================================================================
"""

from __future__ import annotations

from typing import Optional

from .common.logger import LogLevel, log_error


class WebtestError(Exception):
    """Base class for all framework errors."""
    pass


class ConfigurationError(WebtestError):
    """Raised when framework configuration loading or access fails."""
    pass


class InstantiationError(WebtestError):
    """Raised when a page object or test dataset can not be constructed."""
    pass


class InvalidLocatorError(WebtestError):
    """Raised when an element locator is missing, malformed or unknown."""
    pass


class NavigationError(WebtestError):
    """
    Raised when a page can not be opened or the wrong page is open.

    Attributes:
        url: URL that was being opened, if any
        expected: Expected title/URL on verification failure
        actual: Actual title/URL on verification failure
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        super().__init__(message)
        self.url = url
        self.expected = expected
        self.actual = actual


class InvalidSessionError(WebtestError):
    """Raised when the browser handle is absent or not connected."""
    pass


class StopTestError(WebtestError):
    """
    Raised from fixtures when a test can not continue.

    The message is logged at LEVEL_3 as soon as the error is created.
    """

    def __init__(self, message: str):
        super().__init__(message)
        log_error(LogLevel.LEVEL_3, type(self).__name__, message)


__all__ = [
    "WebtestError",
    "ConfigurationError",
    "InstantiationError",
    "InvalidLocatorError",
    "NavigationError",
    "InvalidSessionError",
    "StopTestError",
]
