"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - A page definition file (<ClassName>.yaml) with title, URL and locators
    - Page-specific actions
    - Verification methods

Pages register themselves in PAGE_REGISTRY on import, so PageFactory can
build them by name.

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage

__all__ = [
    "LoginPage",
    "DashboardPage",
]
