"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Browser fixtures for the UI suites.

Key Features:
- Browser session per test class, skipped when no browser is installed
- Built-in demo application served through request routing, so the suite
  runs without a deployed frontend (set UI_DEMO_APP=0 to hit the real one)
- Screenshot capture on failure

================================================================================
"""

import html
import os
from typing import Generator, Optional
from urllib.parse import parse_qs, urlparse

import allure
import pytest
from loguru import logger

from webtest_tools.config import BrowserType, ConfigStore
from webtest_tools.exceptions import InvalidSessionError
from webtest_tools.framework import DriverSession, LaunchOptions, SessionHandle
from webtest_tools.framework.driver_session import launch_playwright_session

# Register page objects with the page factory
import testsuites.ui_testing.pages  # noqa: F401


DEMO_USERS = {
    "demo_user": "demo_password",
}

LOGIN_HTML = """<!DOCTYPE html>
<html>
<head><title>Login</title></head>
<body>
  <form method="get" action="/dashboard">
    {error}
    <input id="username" name="username" type="text">
    <input name="password" type="password">
    <button type="submit">Sign in</button>
  </form>
  <a href="/help">Need help?</a>
</body>
</html>"""

LOGIN_ERROR_HTML = '<div data-testid="error-message">Invalid username or password</div>'

DASHBOARD_HTML = """<!DOCTYPE html>
<html>
<head><title>Dashboard</title></head>
<body>
  <div data-testid="welcome">Welcome, {username}!</div>
  <a href="/login">Log out of demo</a>
</body>
</html>"""


def _render_demo_page(url: str) -> Optional[str]:
    parsed = urlparse(url)
    if parsed.path == "/login":
        return LOGIN_HTML.format(error="")

    if parsed.path == "/dashboard":
        query = parse_qs(parsed.query)
        username = query.get("username", [""])[0]
        password = query.get("password", [""])[0]
        if DEMO_USERS.get(username) == password:
            return DASHBOARD_HTML.format(username=html.escape(username))
        return LOGIN_HTML.format(error=LOGIN_ERROR_HTML)

    return None


def serve_demo_app(route, request) -> None:
    """Answer a routed request with a page of the demo application."""
    body = _render_demo_page(request.url)
    if body is None:
        route.fulfill(status=404, content_type="text/plain", body="Not found")
        return
    route.fulfill(status=200, content_type="text/html", body=body)


def _demo_app_enabled() -> bool:
    return os.getenv("UI_DEMO_APP", "1").lower() not in ("0", "false", "no")


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="class")
def driver_session(framework_config: ConfigStore) -> Generator[DriverSession, None, None]:
    """
    Class-scoped browser session.

    Starts the browser up front so a missing Playwright browser skips the
    class instead of failing every test in it.
    """
    base_url = framework_config.get_environment_property("url")

    def launcher(browser_type: BrowserType, options: LaunchOptions) -> SessionHandle:
        handle = launch_playwright_session(browser_type, options)
        if base_url and _demo_app_enabled():
            handle.context.route(f"{base_url}/**", serve_demo_app)
        return handle

    session = DriverSession(framework_config, launcher=launcher)
    try:
        session.get()
    except InvalidSessionError as e:
        pytest.skip(f"Browser not available: {e}")

    yield session
    session.teardown()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Automatically takes a screenshot when a UI test fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("driver_session")
        handle = session.handle if session is not None else None
        if handle is None or not handle.is_connected():
            return

        try:
            allure.attach(
                handle.page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e}")
