"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project-wide markers and provides the framework fixtures every
test suite builds on:

    framework_config  - configured ConfigStore (setup of each test run)
    driver_session    - browser session, torn down after each test class
    page_factory      - PageFactory bound to driver_session
    test_data         - default dataset of the requesting test module
    stop_test         - stop the current test with a logged reason

================================================================================
"""

from typing import Callable, Generator

import pytest

from webtest_tools.common import ensure_directory, init_logger
from webtest_tools.config import ConfigStore
from webtest_tools.exceptions import StopTestError
from webtest_tools.framework import DriverSession, PageFactory
from webtest_tools.testdata import load_test_data


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests driving a real browser"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Framework unit tests, no browser required"
    )
    config.addinivalue_line(
        "markers", "ui: UI tests driving page objects"
    )


def pytest_collection_modifyitems(config, items):
    """Mark tests by the directory they live in."""
    for item in items:
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Page Definition UI Automation Framework",
        "=" * 60,
        "",
    ]


# ================================================================================
# Framework Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def framework_config() -> ConfigStore:
    """
    Session-scoped framework configuration.

    Fails the run early when configuration is missing or invalid.
    """
    init_logger()
    config = ConfigStore().configure()
    if config.test_results_directory:
        ensure_directory(config.test_results_directory)
    return config


@pytest.fixture(scope="class")
def driver_session(framework_config: ConfigStore) -> Generator[DriverSession, None, None]:
    """
    Browser session shared by the tests of one class (or module).

    The browser is started lazily by the first page that needs it and
    killed after the last test of the class.
    """
    session = DriverSession(framework_config)
    yield session
    session.teardown()


@pytest.fixture
def page_factory(driver_session: DriverSession, framework_config: ConfigStore) -> PageFactory:
    """Page factory bound to the current browser session."""
    return PageFactory(driver_session, framework_config)


@pytest.fixture
def test_data(request, framework_config: ConfigStore):
    """
    Dataset for the requesting test module.

    Read from the module's testdata/ folder; the name comes from
    TEST_RUNCONFIG_DATASET, defaultTestDataSet or "default".
    """
    return load_test_data(request.module, config=framework_config)


@pytest.fixture
def stop_test() -> Callable[[str], None]:
    """Callable that stops the current test with a logged reason."""

    def _stop(message: str) -> None:
        raise StopTestError(message)

    return _stop
