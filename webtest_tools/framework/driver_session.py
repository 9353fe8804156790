"""
================================================================================
Driver Session
================================================================================

Lifecycle of the single browser session used by page objects.

Features:
    - Lazy browser start on first access
    - Browser selection from the configured BrowserType
    - Default element timeout from configuration
    - Automatic rebuild when the browser was closed or crashed
    - Idempotent teardown

Browser mapping:
    UNKNOWN   -> headless Chromium, JavaScript disabled
    HTML_UNIT -> headless Chromium, JavaScript enabled
    IE        -> Microsoft Edge (Chromium ``msedge`` channel)
    FIREFOX   -> Firefox
    CHROME    -> Chromium from ``pathToChromeDriver``

Usage:
    with DriverSession(config) as session:
        handle = session.get()
        handle.page.goto("https://example.com")

One session models one browser; it is not safe to share across threads.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from loguru import logger
from playwright.sync_api import sync_playwright

from ..common.logger import LogLevel, log_error, log_info
from ..config.config_store import BrowserType
from ..exceptions import ConfigurationError, InvalidSessionError
from . import window_helper

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page, Playwright

    from ..config.config_store import ConfigStore


DEFAULT_LAUNCH_ARGS = [
    "--ignore-certificate-errors",
]


@dataclass(frozen=True)
class LaunchOptions:
    """How to start the browser for a BrowserType."""

    engine: str = "chromium"
    headless: bool = True
    java_script_enabled: bool = True
    channel: Optional[str] = None
    executable_path: Optional[str] = None


@dataclass
class SessionHandle:
    """A running browser with one open page."""

    browser_type: BrowserType
    playwright: "Playwright"
    browser: "Browser"
    context: "BrowserContext"
    page: "Page"

    def is_connected(self) -> bool:
        """Ask the browser whether it is alive; any failure counts as disconnected."""
        try:
            return self.browser.is_connected() and not self.page.is_closed()
        except Exception:
            return False

    def set_element_timeout(self, seconds: int) -> None:
        """Apply the element wait timeout. 0 keeps the browser default."""
        if seconds > 0:
            self.context.set_default_timeout(seconds * 1000)

    def close(self) -> bool:
        """
        Close the context, browser and Playwright driver.

        Returns:
            True if every step succeeded
        """
        closed = True
        for step in (self.context.close, self.browser.close, self.playwright.stop):
            try:
                step()
            except Exception as e:
                logger.debug(f"Session close step failed: {e}")
                closed = False
        return closed


Launcher = Callable[[BrowserType, LaunchOptions], SessionHandle]


def build_launch_options(
    browser_type: BrowserType,
    config: "ConfigStore",
    headless: Optional[bool] = None,
) -> LaunchOptions:
    """
    Map a BrowserType to launch options.

    Args:
        browser_type: Resolved browser type
        config: Configuration, used for the Chrome executable path
        headless: Force headless on/off for native browsers

    Raises:
        ConfigurationError: If CHROME is selected without a configured path
    """
    if browser_type is BrowserType.HTML_UNIT:
        return LaunchOptions(headless=True, java_script_enabled=True)
    if browser_type is BrowserType.IE:
        return LaunchOptions(channel="msedge", headless=bool(headless))
    if browser_type is BrowserType.FIREFOX:
        return LaunchOptions(engine="firefox", headless=bool(headless))
    if browser_type is BrowserType.CHROME:
        return LaunchOptions(
            executable_path=config.path_to_chrome_driver,
            headless=bool(headless),
        )
    return LaunchOptions(headless=True, java_script_enabled=False)


def launch_playwright_session(browser_type: BrowserType, options: LaunchOptions) -> SessionHandle:
    """Start Playwright and open a browser page with the given options."""
    playwright = sync_playwright().start()
    try:
        launcher = getattr(playwright, options.engine)
        launch_kwargs: Dict[str, Any] = {
            "headless": options.headless,
            "args": DEFAULT_LAUNCH_ARGS if options.engine == "chromium" else [],
        }
        if options.channel:
            launch_kwargs["channel"] = options.channel
        if options.executable_path:
            launch_kwargs["executable_path"] = options.executable_path

        browser = launcher.launch(**launch_kwargs)
        context = browser.new_context(
            java_script_enabled=options.java_script_enabled,
            ignore_https_errors=True,
        )
        page = context.new_page()
    except Exception:
        playwright.stop()
        raise

    logger.debug(
        f"Browser started: {options.engine} "
        f"(headless={options.headless}, channel={options.channel})"
    )
    return SessionHandle(
        browser_type=browser_type,
        playwright=playwright,
        browser=browser,
        context=context,
        page=page,
    )


class DriverSession:
    """
    Owns at most one live browser session.

    ``get()`` returns the current session, starting a new browser when there
    is none or the previous one is no longer connected. ``teardown()`` closes
    it; the next ``get()`` starts a fresh browser.
    """

    def __init__(
        self,
        config: "ConfigStore",
        launcher: Optional[Launcher] = None,
        headless: Optional[bool] = None,
    ):
        """
        Args:
            config: Configured ConfigStore (browser type, timeout, Chrome path)
            launcher: Callable starting a browser; defaults to Playwright
            headless: Headless mode for IE/FIREFOX/CHROME (headed by default)
        """
        self.config = config
        self._launcher = launcher or launch_playwright_session
        self._headless = headless
        self._handle: Optional[SessionHandle] = None

    def __enter__(self) -> "DriverSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.teardown()

    @property
    def handle(self) -> Optional[SessionHandle]:
        """Current handle without starting a browser."""
        return self._handle

    @staticmethod
    def check_session(handle: Optional[SessionHandle]) -> None:
        """
        Check that a handle is ready for use.

        Raises:
            InvalidSessionError: If the handle is None or not connected
        """
        if handle is None:
            raise InvalidSessionError("Browser session is null and not ready for use.")
        if not handle.is_connected():
            raise InvalidSessionError("Browser session is not connected to the browser and not ready for use.")

    def get(self) -> SessionHandle:
        """
        Return the live session, building a new one if needed.

        Raises:
            ConfigurationError: If the browser configuration is invalid
            InvalidSessionError: If the browser can not be started
        """
        try:
            self.check_session(self._handle)
            return self._handle
        except InvalidSessionError as e:
            logger.debug(f"Building new browser session: {e}")

        if self._handle is not None:
            self._handle.close()
            self._handle = None

        self._handle = self._build()
        return self._handle

    def _build(self) -> SessionHandle:
        browser_type = self.config.browser_type
        try:
            options = build_launch_options(browser_type, self.config, headless=self._headless)
            timeout = self.config.default_element_timeout
        except ConfigurationError as e:
            log_error(LogLevel.LEVEL_1, "DriverSession", str(e))
            raise

        try:
            handle = self._launcher(browser_type, options)
        except Exception as e:
            message = f"Can't start {browser_type.name} browser session: {e}"
            log_error(LogLevel.LEVEL_1, "DriverSession", message)
            raise InvalidSessionError(message) from e

        handle.set_element_timeout(timeout)
        window_helper.focus(handle.page)
        window_helper.maximize(handle.page)

        log_info(LogLevel.LEVEL_4, "DriverSession", f"Started {browser_type.name} browser session")
        return handle

    def teardown(self) -> bool:
        """
        Close the current session, if any.

        Returns:
            True if a live session was closed, False if there was none or it
            was already dead
        """
        handle, self._handle = self._handle, None
        if handle is None:
            return False

        if not handle.is_connected():
            handle.close()
            logger.debug("Browser session was already closed")
            return False

        closed = handle.close()
        log_info(LogLevel.LEVEL_4, "DriverSession", "Browser session closed")
        return closed


__all__ = [
    "DriverSession",
    "LaunchOptions",
    "SessionHandle",
    "build_launch_options",
    "launch_playwright_session",
]
