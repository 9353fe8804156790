"""
Loading of flat key/value property documents stored as YAML.

Nested mappings are flattened with dots, so

    qa:
      url: http://qa.example.com

is read as ``{"qa.url": "http://qa.example.com"}``. Scalars become strings,
lists are joined with commas and nulls become empty strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def _to_property_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_property_value(v) for v in value)
    return str(value)


def flatten_properties(data: Dict[Any, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a nested mapping into dot-separated string keys."""
    result: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            result.update(flatten_properties(value, prefix=f"{full_key}."))
        else:
            result[full_key] = _to_property_value(value)
    return result


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read a property document from disk.

    Raises:
        OSError: If the file can not be read
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the document is not a mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a key/value mapping, got {type(data).__name__}")
    return flatten_properties(data)


__all__ = [
    "flatten_properties",
    "load_properties",
]
