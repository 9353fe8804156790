from pathlib import Path

import pytest
import yaml

from webtest_tools.config import (
    BROWSER_TYPE_ENV_VAR,
    ENVIRONMENT_ENV_VAR,
    EXTENSIONS_ENV_VAR,
    TEST_DATA_SET_ENV_VAR,
    ConfigStore,
)


BASE_FRAMEWORK_CONFIG = {
    "testResultsDirectory": "reports/results",
    "concordionExtensions": "org.example.ScreenshotExtension",
    "defaultBrowserType": "HTML_UNIT",
    "defaultElementTimeout": 5,
    "defaultEnvironment": "qa",
    "defaultTestDataSet": "smoke",
}

ENVIRONMENTS = {
    "qa": {"url": "http://qa.example.com/"},
    "prod": {"url": "https://www.example.com/"},
}


def write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_run_overrides(monkeypatch):
    """Unit tests never see the caller's run overrides or leak published settings."""
    for name in (BROWSER_TYPE_ENV_VAR, ENVIRONMENT_ENV_VAR, TEST_DATA_SET_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    # Recorded so whatever configure() publishes is undone after the test
    monkeypatch.setenv(EXTENSIONS_ENV_VAR, "")


@pytest.fixture
def config_dir(tmp_path) -> Path:
    write_yaml(tmp_path / "configuration.yaml", BASE_FRAMEWORK_CONFIG)
    write_yaml(tmp_path / "environments.yaml", ENVIRONMENTS)
    return tmp_path


@pytest.fixture
def config(config_dir) -> ConfigStore:
    return ConfigStore(config_dir=config_dir).configure()
