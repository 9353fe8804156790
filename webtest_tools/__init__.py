"""
================================================================================
Webtest Tools
================================================================================

Scaffolding for page-object based UI test automation on top of Playwright.

Modules:
    - common: Logging, string and file helpers
    - config: Framework configuration and environment definitions
    - framework: Driver session, page definitions and base page object
    - testdata: XML test dataset loading

Example:
    from webtest_tools.config import ConfigStore
    from webtest_tools.framework import DriverSession, PageFactory

    config = ConfigStore()
    config.configure()

    with DriverSession(config) as session:
        factory = PageFactory(session, config)
        login = factory.get_page("LoginPage")
        login.navigate()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "config",
    "exceptions",
    "framework",
    "testdata",
]
