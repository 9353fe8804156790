"""
================================================================================
Dashboard Page Object
================================================================================

The dashboard URL carries the login query string after sign-in, so this page
is verified by title and welcome banner instead of by URL.

================================================================================
"""

from __future__ import annotations

import allure

from webtest_tools.common import LogLevel, log_error
from webtest_tools.exceptions import NavigationError
from webtest_tools.framework import BasePage, register_page


@register_page
class DashboardPage(BasePage):
    """Dashboard page object."""

    def verify(self) -> None:
        with allure.step("Verify dashboard is open"):
            self.verify_by_title()
            if not self.find("welcome_banner").is_visible():
                message = "Wrong page is opened. Welcome banner is not displayed"
                log_error(LogLevel.LEVEL_8, self.name, message)
                raise NavigationError(message, url=self.get_current_url())

    def get_welcome_text(self) -> str:
        return self.find("welcome_banner").inner_text().strip()

    @allure.step("Logout")
    def logout(self) -> None:
        self.find("logout_link").click()
        self.page.wait_for_load_state()
