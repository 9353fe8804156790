"""
================================================================================
Login Page Object
================================================================================

Locators, title and URL live in LoginPage.yaml next to this module.

================================================================================
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

import allure
from loguru import logger

from webtest_tools.framework import BasePage, register_page


@register_page
class LoginPage(BasePage):
    """Login page object."""

    @allure.step("Verify login form is displayed")
    def is_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        return all(
            self.find(name).is_visible()
            for name in ("username_input", "password_input", "login_button")
        )

    @allure.step("Login (username={username})")
    def login(self, username: Optional[str] = None, password: Optional[str] = None) -> None:
        """
        Submit the login form.

        Args:
            username: Username to login. Defaults to `UI_USERNAME` env var.
            password: Password to login. Defaults to `UI_PASSWORD` env var.
        """
        if username is None:
            username = os.getenv("UI_USERNAME", "demo_user")
        if password is None:
            password = os.getenv("UI_PASSWORD", "demo_password")

        self.find("username_input").fill(username)
        self.find("password_input").fill(password)
        self.find("login_button").click()
        self.page.wait_for_load_state()
        logger.debug(f"Login submitted for {username}")

    def login_as(self, user: Mapping[str, str]) -> None:
        """Login with a user record from a test dataset."""
        self.login(user["username"], user["password"])

    @allure.step("Verify login error is displayed")
    def is_error_displayed(self) -> bool:
        return self.find("error_message").is_visible()

    def get_error_text(self) -> str:
        return self.find("error_message").inner_text().strip()
