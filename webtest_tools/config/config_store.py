"""
================================================================================
Framework Configuration Store
================================================================================

Loads the framework configuration and environment definitions and resolves
run settings from them.

Configuration files (in the config directory):
    - configuration.yaml: framework settings (mandatory keys:
      testResultsDirectory, concordionExtensions)
    - environments.yaml: per-environment properties, ``<env>.<property>``

Run overrides (environment variables, highest priority):
    - TEST_RUNCONFIG_BROWSER: browser type name
    - TEST_RUNCONFIG_ENV: environment name
    - TEST_RUNCONFIG_DATASET: test dataset name

Published settings:
    - CONCORDION_EXTENSIONS: configured extensions, comma separated

Usage:
    >>> config = ConfigStore(config_dir="config")
    >>> config.configure()
    >>> config.browser_type
    <BrowserType.CHROME: 'CHROME'>
    >>> config.get_environment_property("url")
    'http://qa.example.com'

================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from loguru import logger

from ..common.logger import LogLevel, log_error, log_info
from ..exceptions import ConfigurationError
from .properties import flatten_properties, load_properties


FRAMEWORK_CONFIG_FILE_NAME = "configuration.yaml"
ENVIRONMENTS_DEFINITION_FILE_NAME = "environments.yaml"

CONFIG_DIR_ENV_VAR = "WEBTEST_CONFIG_DIR"

TEST_RESULTS_DIRECTORY_PROPERTY_NAME = "testResultsDirectory"
CONCORDION_EXTENSIONS_PROPERTY_NAME = "concordionExtensions"
DEFAULT_BROWSER_TYPE_PROPERTY_NAME = "defaultBrowserType"
CHROME_DRIVER_PATH_PROPERTY_NAME = "pathToChromeDriver"
DEFAULT_ELEMENT_TIMEOUT_PROPERTY_NAME = "defaultElementTimeout"
DEFAULT_ENVIRONMENT_PROPERTY_NAME = "defaultEnvironment"
DEFAULT_TEST_DATA_SET_PROPERTY_NAME = "defaultTestDataSet"

MANDATORY_PROPERTIES = (
    TEST_RESULTS_DIRECTORY_PROPERTY_NAME,
    CONCORDION_EXTENSIONS_PROPERTY_NAME,
)

BROWSER_TYPE_ENV_VAR = "TEST_RUNCONFIG_BROWSER"
ENVIRONMENT_ENV_VAR = "TEST_RUNCONFIG_ENV"
TEST_DATA_SET_ENV_VAR = "TEST_RUNCONFIG_DATASET"

# Published by configure() for report extensions running in this or child processes
EXTENSIONS_ENV_VAR = "CONCORDION_EXTENSIONS"


class BrowserType(str, Enum):
    """Browser used to run UI tests."""

    UNKNOWN = "UNKNOWN"
    IE = "IE"
    FIREFOX = "FIREFOX"
    CHROME = "CHROME"
    HTML_UNIT = "HTML_UNIT"

    @classmethod
    def allowed_values(cls) -> str:
        return ", ".join(member.name for member in cls)

    @classmethod
    def parse(cls, value: str) -> "BrowserType":
        """
        Look up a browser type by its exact name.

        Raises:
            ConfigurationError: If the name is not a browser type
        """
        try:
            return cls[value]
        except KeyError:
            raise ConfigurationError(
                f"Browser type value '{value}' is incorrect. "
                f"Allowed values: {cls.allowed_values()}"
            ) from None


@dataclass(frozen=True)
class RunOverrides:
    """Process-level overrides that win over configuration file defaults."""

    browser: Optional[str] = None
    environment: Optional[str] = None
    data_set: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RunOverrides":
        environ = os.environ if environ is None else environ
        return cls(
            browser=environ.get(BROWSER_TYPE_ENV_VAR) or None,
            environment=environ.get(ENVIRONMENT_ENV_VAR) or None,
            data_set=environ.get(TEST_DATA_SET_ENV_VAR) or None,
        )


def _default_config_dir() -> Path:
    env_dir = os.getenv(CONFIG_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir)

    candidates = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


class ConfigStore:
    """
    Framework configuration context.

    The framework configuration is read once and kept in memory until
    ``reload()`` is called. Environment definitions are read lazily on the
    first environment property lookup.

    Attributes (available after ``configure()``):
        test_results_directory: Where test results should be written
        extensions: Configured report extensions, also published as
            $CONCORDION_EXTENSIONS (comma separated)
        browser_type: Resolved BrowserType
        environment_name: Resolved environment name, or None
        test_data_set_name: Resolved dataset name, or None
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[RunOverrides] = None,
    ) -> None:
        """
        Args:
            config_dir: Directory holding the configuration files. Defaults to
                $WEBTEST_CONFIG_DIR or ./config.
            overrides: Run overrides. Read from environment variables on every
                ``configure()`` when not given.
        """
        self.config_dir = Path(config_dir) if config_dir else _default_config_dir()
        self._overrides = overrides

        self._framework_config: Optional[Dict[str, str]] = None
        self._environments: Optional[Dict[str, str]] = None

        self.test_results_directory: Optional[str] = None
        self.extensions: List[str] = []
        self.browser_type: BrowserType = BrowserType.UNKNOWN
        self.environment_name: Optional[str] = None
        self.test_data_set_name: Optional[str] = None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def configure(self) -> "ConfigStore":
        """
        Load the framework configuration (once) and resolve run settings.

        Returns:
            self, for chaining

        Raises:
            ConfigurationError: If configuration is missing, unreadable or invalid
        """
        # Settings are published only after every value resolved
        try:
            framework_config = self.get_framework_config()
            overrides = self._overrides or RunOverrides.from_env()

            browser_name = overrides.browser or framework_config.get(DEFAULT_BROWSER_TYPE_PROPERTY_NAME)
            browser_type = BrowserType.parse(browser_name) if browser_name else BrowserType.UNKNOWN
        except ConfigurationError as e:
            log_error(LogLevel.LEVEL_1, "FrameworkConfiguration", str(e))
            raise

        self.test_results_directory = framework_config.get(TEST_RESULTS_DIRECTORY_PROPERTY_NAME) or None
        self.extensions = [
            ext.strip()
            for ext in framework_config.get(CONCORDION_EXTENSIONS_PROPERTY_NAME, "").split(",")
            if ext.strip()
        ]
        self.browser_type = browser_type
        self.environment_name = (
            overrides.environment
            or framework_config.get(DEFAULT_ENVIRONMENT_PROPERTY_NAME)
            or None
        )
        self.test_data_set_name = (
            overrides.data_set
            or framework_config.get(DEFAULT_TEST_DATA_SET_PROPERTY_NAME)
            or None
        )
        os.environ[EXTENSIONS_ENV_VAR] = ",".join(self.extensions)

        log_info(
            LogLevel.LEVEL_1,
            "FrameworkConfiguration",
            f"browser={self.browser_type.name}, environment={self.environment_name}, "
            f"dataset={self.test_data_set_name}",
        )
        return self

    def reload(self) -> "ConfigStore":
        """
        Discard the cached framework configuration and configure again.

        Raises:
            ConfigurationError: If configuration fails
        """
        self._framework_config = None
        logger.info(f"Reloading configuration from: {self.config_dir}")
        return self.configure()

    # =========================================================================
    # Framework configuration
    # =========================================================================

    @property
    def framework_config_path(self) -> Path:
        return self.config_dir / FRAMEWORK_CONFIG_FILE_NAME

    @property
    def environments_path(self) -> Path:
        return self.config_dir / ENVIRONMENTS_DEFINITION_FILE_NAME

    def get_framework_config(self) -> Dict[str, str]:
        """
        Return the framework configuration, reading the file on first access.

        Raises:
            ConfigurationError: If the file can not be read or mandatory
                properties are missing
        """
        if not self._framework_config:
            try:
                self._framework_config = load_properties(self.framework_config_path)
            except (OSError, yaml.YAMLError, ValueError) as e:
                raise ConfigurationError(
                    f"Can't read test automation framework configuration: {e}"
                ) from e
            logger.debug(f"Loaded configuration from {self.framework_config_path}")

        self._check_mandatory_properties(self._framework_config)
        return self._framework_config

    def set_framework_config(self, properties: Mapping[str, Any]) -> None:
        """
        Replace the loaded framework configuration.

        Intended for tests; call ``configure()`` afterwards to re-resolve settings.
        """
        self._framework_config = flatten_properties(dict(properties))

    @staticmethod
    def _check_mandatory_properties(properties: Mapping[str, str]) -> None:
        if not properties:
            raise ConfigurationError("Framework configuration is empty")

        missing = [name for name in MANDATORY_PROPERTIES if name not in properties]
        if missing:
            raise ConfigurationError(
                "Mandatory framework configuration properties missing: " + ", ".join(missing)
            )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Raw framework configuration lookup."""
        return self.get_framework_config().get(key, default)

    @property
    def path_to_chrome_driver(self) -> str:
        """
        Path to the Chrome executable used for CHROME runs.

        Raises:
            ConfigurationError: If the path is not configured
        """
        path = self.get(CHROME_DRIVER_PATH_PROPERTY_NAME)
        if not path:
            raise ConfigurationError("Path to Google Chrome driver is null or empty")
        return path

    @property
    def default_element_timeout(self) -> int:
        """
        How long to wait for elements, in seconds. 0 when not configured.

        Raises:
            ConfigurationError: If the value is not a whole number
        """
        timeout = self.get(DEFAULT_ELEMENT_TIMEOUT_PROPERTY_NAME)
        if not timeout:
            return 0
        try:
            return int(timeout)
        except ValueError:
            raise ConfigurationError(
                f"Default element timeout is incorrect, can't convert {timeout} to number."
            ) from None

    # =========================================================================
    # Environment definitions
    # =========================================================================

    def get_environments_definition(self) -> Dict[str, str]:
        """
        Return environment definitions, reading the file on first access.

        Raises:
            ConfigurationError: If the file can not be read
        """
        if self._environments is None:
            try:
                self._environments = load_properties(self.environments_path)
            except (OSError, yaml.YAMLError, ValueError) as e:
                raise ConfigurationError(f"Can't read environments definition: {e}") from e
            logger.debug(f"Loaded environments from {self.environments_path}")
        return self._environments

    def get_environment_property(self, name: str) -> Optional[str]:
        """
        Look up ``<current environment>.<name>``.

        Returns:
            The property value, or None when absent or no environment is set
        """
        if not self.environment_name:
            return None
        return self.get_environments_definition().get(f"{self.environment_name}.{name}")


__all__ = [
    "BrowserType",
    "ConfigStore",
    "RunOverrides",
    "FRAMEWORK_CONFIG_FILE_NAME",
    "ENVIRONMENTS_DEFINITION_FILE_NAME",
    "BROWSER_TYPE_ENV_VAR",
    "ENVIRONMENT_ENV_VAR",
    "TEST_DATA_SET_ENV_VAR",
    "EXTENSIONS_ENV_VAR",
]
