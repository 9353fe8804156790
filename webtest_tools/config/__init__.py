"""
Framework configuration: configuration.yaml, environments.yaml and run overrides.
"""

from .config_store import (
    BROWSER_TYPE_ENV_VAR,
    ENVIRONMENT_ENV_VAR,
    EXTENSIONS_ENV_VAR,
    TEST_DATA_SET_ENV_VAR,
    BrowserType,
    ConfigStore,
    RunOverrides,
)
from .properties import flatten_properties, load_properties

__all__ = [
    "BrowserType",
    "ConfigStore",
    "RunOverrides",
    "BROWSER_TYPE_ENV_VAR",
    "ENVIRONMENT_ENV_VAR",
    "EXTENSIONS_ENV_VAR",
    "TEST_DATA_SET_ENV_VAR",
    "flatten_properties",
    "load_properties",
]
