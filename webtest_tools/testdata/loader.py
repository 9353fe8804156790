"""
================================================================================
Test Data Loader
================================================================================

Loads XML test datasets stored next to the tests that use them:

    testsuites/ui_testing/tests/
        test_login.py
        testdata/
            default.xml
            qa_users.xml

Dataset name resolution:
    1. explicit name passed by the caller
    2. configured dataset (TEST_RUNCONFIG_DATASET or defaultTestDataSet)
    3. "default"

XML is converted to plain Python data:
    - elements with children become dicts keyed by tag
    - repeated tags become lists
    - attributes are stored as "@name"
    - leaf elements become their stripped text

================================================================================
"""

from __future__ import annotations

import inspect
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from loguru import logger

from ..common.logger import LogLevel, log_error
from ..exceptions import InstantiationError

if TYPE_CHECKING:
    from ..config.config_store import ConfigStore


TEST_DATA_FOLDER_NAME = "testdata"
DEFAULT_TEST_DATA_SET_NAME = "default"
TEST_DATA_FILE_EXTENSION = ".xml"


def element_to_data(element: ET.Element) -> Any:
    """Convert an XML element into dicts, lists and strings."""
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    data: Dict[str, Any] = {f"@{key}": value for key, value in element.attrib.items()}
    for child in children:
        value = element_to_data(child)
        if child.tag in data:
            existing = data[child.tag]
            if not isinstance(existing, list):
                data[child.tag] = existing = [existing]
            existing.append(value)
        else:
            data[child.tag] = value

    if text:
        data["#text"] = text
    return data


def resolve_data_set_name(
    data_set_name: Optional[str] = None,
    config: Optional["ConfigStore"] = None,
) -> str:
    if data_set_name:
        return data_set_name
    if config is not None and config.test_data_set_name:
        return config.test_data_set_name
    return DEFAULT_TEST_DATA_SET_NAME


def _test_data_dir(owner: Union[str, Path, Any]) -> Path:
    if isinstance(owner, (str, Path)):
        return Path(owner)
    return Path(inspect.getfile(owner)).parent / TEST_DATA_FOLDER_NAME


def load_test_data(
    owner: Union[str, Path, Any],
    data_set_name: Optional[str] = None,
    config: Optional["ConfigStore"] = None,
) -> Any:
    """
    Load a test dataset.

    Args:
        owner: Test class or module (dataset is read from its ``testdata``
            folder), or a directory holding the dataset files
        data_set_name: Dataset name without the .xml extension
        config: Configuration providing the default dataset name

    Returns:
        Dataset converted to Python data

    Raises:
        InstantiationError: If the dataset can not be loaded
    """
    name = resolve_data_set_name(data_set_name, config)
    owner_name = getattr(owner, "__name__", str(owner))

    try:
        path = _test_data_dir(owner) / f"{name}{TEST_DATA_FILE_EXTENSION}"
        root = ET.parse(path).getroot()
    except (OSError, TypeError, ET.ParseError) as e:
        message = f'Can\'t load test data for "{owner_name}" test from "{name}" test dataset. Error: {e}'
        log_error(LogLevel.LEVEL_1, "TestDataLoader", message)
        raise InstantiationError(message) from e

    logger.debug(f"Loaded test data: {path}")
    return element_to_data(root)


__all__ = [
    "DEFAULT_TEST_DATA_SET_NAME",
    "TEST_DATA_FOLDER_NAME",
    "element_to_data",
    "load_test_data",
    "resolve_data_set_name",
]
