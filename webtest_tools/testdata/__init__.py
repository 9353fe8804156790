"""
XML test dataset loading.
"""

from .loader import (
    DEFAULT_TEST_DATA_SET_NAME,
    element_to_data,
    load_test_data,
    resolve_data_set_name,
)

__all__ = [
    "DEFAULT_TEST_DATA_SET_NAME",
    "element_to_data",
    "load_test_data",
    "resolve_data_set_name",
]
