"""
Repository-level pytest configuration.

Why this exists:
  - Point the framework at the repository's config/ directory when the
    caller did not choose one
  - Keep log output quiet by default so pytest output stays readable

Run overrides (TEST_RUNCONFIG_BROWSER / _ENV / _DATASET) are left alone:
they are how a CI job or run_tests.py selects browser, environment and dataset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _framework_env_defaults(project_root: Path) -> Generator[None, None, None]:
    """Set framework environment defaults if not already provided by the user/CI."""
    defaults = {
        "WEBTEST_CONFIG_DIR": str(project_root / "config"),
        "LOG_LEVEL": "WARNING",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
