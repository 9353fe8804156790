"""
In-memory stand-ins for Playwright objects used by the unit tests.
"""

from typing import Dict, List, Optional, Tuple

from webtest_tools.config import BrowserType
from webtest_tools.framework import LaunchOptions, SessionHandle


class FakePage:
    """Records navigation; titles are looked up per URL in `titles`."""

    def __init__(self, titles: Optional[Dict[str, str]] = None):
        self.titles = titles or {}
        self.url = "about:blank"
        self.visited: List[str] = []
        self.closed = False
        self.goto_error: Optional[Exception] = None
        self.window_error: Optional[Exception] = None
        self.brought_to_front = False
        self.viewport: Optional[Dict[str, int]] = None

    def goto(self, url: str) -> None:
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    def title(self) -> str:
        return self.titles.get(self.url, "")

    def is_closed(self) -> bool:
        return self.closed

    def bring_to_front(self) -> None:
        if self.window_error is not None:
            raise self.window_error
        self.brought_to_front = True

    def evaluate(self, script: str):
        if self.window_error is not None:
            raise self.window_error
        return {"width": 1920, "height": 1080}

    def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.viewport = size

    def locator(self, selector: str) -> Tuple[str, str]:
        return ("locator", selector)


class FakeBrowser:
    def __init__(self):
        self.connected = True

    def is_connected(self) -> bool:
        return self.connected

    def close(self) -> None:
        self.connected = False


class FakeContext:
    def __init__(self):
        self.default_timeout: Optional[int] = None
        self.closed = False

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    def close(self) -> None:
        self.closed = True


class FakePlaywright:
    def __init__(self):
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


def make_handle(
    browser_type: BrowserType = BrowserType.UNKNOWN,
    page: Optional[FakePage] = None,
) -> SessionHandle:
    return SessionHandle(
        browser_type=browser_type,
        playwright=FakePlaywright(),
        browser=FakeBrowser(),
        context=FakeContext(),
        page=page or FakePage(),
    )


class FakeLauncher:
    """Launcher returning fake handles and recording every launch."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: List[Tuple[BrowserType, LaunchOptions]] = []
        self.handles: List[SessionHandle] = []

    def __call__(self, browser_type: BrowserType, options: LaunchOptions) -> SessionHandle:
        self.calls.append((browser_type, options))
        if self.error is not None:
            raise self.error
        handle = make_handle(browser_type)
        self.handles.append(handle)
        return handle
