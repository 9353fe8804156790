"""
String helpers used to turn class names into log-friendly text and back.
"""

from __future__ import annotations

import re


# Boundaries: "ABc" -> "A Bc", "aB" -> "a B", "a1" -> "a 1"
_HUMANIZE_PATTERN = re.compile(
    r"(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[^A-Z])(?=[A-Z])"
    r"|(?<=[A-Za-z])(?=[^A-Za-z])"
)


def humanize(camel_case: str) -> str:
    """
    Convert camelCase to human-friendly text.

    Examples:
        >>> humanize("ComplexCamelCase")
        'Complex Camel Case'
        >>> humanize("HTMLParser")
        'HTML Parser'
    """
    return _HUMANIZE_PATTERN.sub(" ", camel_case)


def to_camel_case(text: str) -> str:
    """
    Convert space separated words into a CamelCase string.

    Each word is capitalised and the rest of it lower-cased, so
    "advanced Camel Case" becomes "AdvancedCamelCase".
    """
    words = [word.strip() for word in text.split(" ") if word.strip()]
    return "".join(word[0].upper() + word[1:].lower() for word in words)


__all__ = [
    "humanize",
    "to_camel_case",
]
