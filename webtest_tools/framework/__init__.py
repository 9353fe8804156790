"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object framework driven by page definition files.

Components:
    - page_definition: Page metadata and element locator parsing
    - driver_session: Browser session lifecycle management
    - page_base: Base page object with navigation and verification
    - page_factory: Registry-based page object construction
    - window_helper: Best-effort window focus and maximize

Author: Automation Team
License: MIT
================================================================================
"""

from .driver_session import DriverSession, LaunchOptions, SessionHandle
from .page_base import BasePage
from .page_definition import ElementLocator, LocatorType, PageDefinition
from .page_factory import PAGE_REGISTRY, PageFactory, register_page

__all__ = [
    "BasePage",
    "DriverSession",
    "LaunchOptions",
    "SessionHandle",
    "ElementLocator",
    "LocatorType",
    "PageDefinition",
    "PAGE_REGISTRY",
    "PageFactory",
    "register_page",
]
