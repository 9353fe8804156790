"""
Best-effort helpers for the browser window.

Each helper returns True on success and False when the browser refused;
callers are free to ignore the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from playwright.sync_api import Page


SCREEN_SIZE_SCRIPT = "() => ({width: window.screen.width, height: window.screen.height})"


def focus(page: "Page") -> bool:
    """Bring the page's window to the front."""
    try:
        page.bring_to_front()
        return True
    except Exception as e:
        logger.debug(f"Window focus failed: {e}")
        return False


def maximize(page: "Page") -> bool:
    """Resize the viewport to the full screen size."""
    try:
        size = page.evaluate(SCREEN_SIZE_SCRIPT)
        page.set_viewport_size({"width": int(size["width"]), "height": int(size["height"])})
        return True
    except Exception as e:
        logger.debug(f"Window maximize failed: {e}")
        return False


__all__ = [
    "focus",
    "maximize",
]
