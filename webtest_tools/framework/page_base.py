"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to the page URL from the page definition
    - Verification that the expected page is open (title + URL)
    - Element locator lookup from the page definition

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import allure

from ..common.logger import LogLevel, log_error, log_info
from ..exceptions import InvalidSessionError, NavigationError
from .driver_session import DriverSession, SessionHandle
from .page_definition import ElementLocator, PageDefinition

if TYPE_CHECKING:
    from playwright.sync_api import Locator

    from ..config.config_store import ConfigStore


class BasePage:
    """
    Base class for all page objects.

    Every page class has a definition file next to its module named after
    the class (``LoginPage.yaml``), or points to one with ``DEFINITION_FILE``.

    Usage:
        class LoginPage(BasePage):

            def login(self, username: str, password: str) -> None:
                self.find("username_input").fill(username)
                self.find("password_input").fill(password)
                self.find("login_button").click()

        login_page = LoginPage(session.get(), config)
        login_page.navigate()          # opens definition URL and verifies
    """

    # Override in subclasses to use a non-default definition file
    DEFINITION_FILE: Optional[str] = None

    def __init__(
        self,
        handle: SessionHandle,
        config: Optional["ConfigStore"] = None,
    ):
        """
        Initialize page object.

        Args:
            handle: Live browser session
            config: Configuration used to resolve environment URLs

        Raises:
            InvalidSessionError: If the session is not usable
            InstantiationError: If the page definition can not be loaded
        """
        try:
            DriverSession.check_session(handle)
        except InvalidSessionError as e:
            log_error(LogLevel.LEVEL_8, self.name, str(e))
            raise

        self.handle = handle
        self.page = handle.page
        self.config = config
        self.page_definition = PageDefinition.for_page(type(self), config)

    @property
    def name(self) -> str:
        return type(self).__name__

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, url: Optional[str] = None) -> "BasePage":
        """
        Open the page.

        Without ``url`` the page URL comes from the page definition and the
        page is verified after opening. With ``url`` that URL is opened as
        is and no verification is done.

        Raises:
            NavigationError: If the URL is empty, can not be opened, or the
                wrong page is open
        """
        if url is not None:
            self.open_url(url)
            return self

        with allure.step(f"Navigate to {self.name}"):
            self.open_url(self.get_url())
            self.verify()
        return self

    def open_url(self, url: Optional[str]) -> None:
        """Open a URL in the browser without verifying the result."""
        if not url:
            message = "Can't open page, URL is null or empty"
            log_error(LogLevel.LEVEL_8, self.name, message)
            raise NavigationError(message, url=url)

        try:
            log_info(LogLevel.LEVEL_8, self.name, f"Opening {url}")
            self.page.goto(url)
        except Exception as e:
            message = f"Can't open {url}. {e}"
            log_error(LogLevel.LEVEL_8, self.name, message)
            raise NavigationError(message, url=url) from e

    # =========================================================================
    # Verification
    # =========================================================================

    def verify(self) -> None:
        """
        Verify that this page is open.

        Checks title, then URL. Pages whose title or URL is not stable should
        override this with page-specific checks.

        Raises:
            NavigationError: If the wrong page is open
        """
        with allure.step(f"Verify {self.name} is open"):
            self.verify_by_title()
            self.verify_by_url()

    def verify_by_title(self) -> None:
        """
        Raises:
            NavigationError: If the current title differs (case-insensitive)
        """
        actual = self.get_current_title()
        expected = self.get_title()
        if (actual or "").lower() != (expected or "").lower():
            message = f"Wrong page is opened. Expected page with title [{expected}], got [{actual}]"
            log_error(LogLevel.LEVEL_8, self.name, message)
            raise NavigationError(message, expected=expected, actual=actual)

    def verify_by_url(self) -> None:
        """
        Raises:
            NavigationError: If the current URL differs (case-insensitive)
        """
        actual = self.get_current_url()
        expected = self.get_url()
        if (actual or "").lower() != (expected or "").lower():
            message = f"Wrong page is opened. Expected page with URL [{expected}], got [{actual}]"
            log_error(LogLevel.LEVEL_8, self.name, message)
            raise NavigationError(message, url=expected, expected=expected, actual=actual)

    # =========================================================================
    # Page properties
    # =========================================================================

    def get_title(self) -> str:
        """Expected page title from the page definition."""
        return self.page_definition.get_title()

    def get_current_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        """Expected page URL from the page definition and environment."""
        return self.page_definition.get_url()

    def get_current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Elements
    # =========================================================================

    def get_element_locator(self, element_name: str) -> ElementLocator:
        """
        Raises:
            InvalidLocatorError: If the element locator is missing or invalid
        """
        return self.page_definition.get_element_locator(element_name)

    def find(self, element_name: str) -> "Locator":
        """Playwright locator for an element from the page definition."""
        return self.get_element_locator(element_name).locate(self.page)


__all__ = [
    "BasePage",
]
