"""
================================================================================
Page Definitions
================================================================================

Externalized page metadata: expected title, URL and element locators.

Each page class has a ``<ClassName>.yaml`` file next to its module:

    URL: /login
    Title: Login
    username_input: "id~username"
    password_input: "css~input[type='password']"
    login_button: "xpath~//button[@type='submit']"
    help_link: "linkText~Need help?"

Element locators use the ``locatorType~locatorValue`` format. Supported
locator types (case-insensitive): id, name, xpath, css, tagName, linkText,
partialLinkText. Link text matching (linkText, partialLinkText) is case-sensitive.

When page layout changes only the definition file has to be updated.

================================================================================
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Type

import yaml
from loguru import logger

from ..common.logger import LogLevel, log_error
from ..exceptions import InstantiationError, InvalidLocatorError

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page

    from ..config.config_store import ConfigStore


URL_PROPERTY = "URL"
TITLE_PROPERTY = "Title"
MANDATORY_PROPERTIES = (URL_PROPERTY, TITLE_PROPERTY)

LOCATOR_SEPARATOR = "~"
DEFINITION_FILE_EXTENSION = ".yaml"


class LocatorType(Enum):
    """How an element is found on the page."""

    ID = "id"
    NAME = "name"
    XPATH = "xpath"
    CSS = "css"
    TAG_NAME = "tagName"
    LINK_TEXT = "linkText"
    PARTIAL_LINK_TEXT = "partialLinkText"

    @classmethod
    def allowed_values(cls) -> str:
        return ", ".join(member.value for member in cls)

    @classmethod
    def from_string(cls, value: str) -> Optional["LocatorType"]:
        """Case-insensitive lookup, None when the type is unknown."""
        normalized = value.lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None


def _css_string(value: str) -> str:
    """Double-quoted CSS string; characters other than quotes, backslashes and newlines stay literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\a ")
    return f'"{escaped}"'


def _xpath_literal(value: str) -> str:
    """XPath 1.0 string literal, falling back to concat() when both quote kinds occur."""
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    parts = value.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


@dataclass(frozen=True)
class ElementLocator:
    """
    A (type, value) pair identifying an element.

    The value is kept as written in the definition file; selector syntax
    errors surface later, from the browser.
    """

    type: LocatorType
    value: str

    @property
    def selector(self) -> str:
        """Playwright selector equivalent to this locator."""
        if self.type is LocatorType.ID:
            return f"id={self.value}"
        if self.type is LocatorType.NAME:
            return f"css=[name={_css_string(self.value)}]"
        if self.type is LocatorType.XPATH:
            return f"xpath={self.value}"
        if self.type in (LocatorType.CSS, LocatorType.TAG_NAME):
            return f"css={self.value}"
        if self.type is LocatorType.LINK_TEXT:
            return f"css=a:text-is({_css_string(self.value)})"
        # :has-text() ignores case, contains() does not
        return f"xpath=//a[contains(normalize-space(.), {_xpath_literal(self.value)})]"

    def locate(self, page: "Page") -> "Locator":
        return page.locator(self.selector)

    def __str__(self) -> str:
        return f"{self.type.value}{LOCATOR_SEPARATOR}{self.value}"


def parse_element_locator(element_locator: str) -> ElementLocator:
    """
    Parse ``locatorType~locatorValue``.

    The string is split on the first ``~``; both parts must be non-empty.

    Raises:
        InvalidLocatorError: If the string is malformed or the type is unknown
    """
    locator_type, separator, locator_value = element_locator.partition(LOCATOR_SEPARATOR)
    if not separator:
        raise InvalidLocatorError(
            f"Can't parse element locator [{element_locator}]. "
            f"Element locator should have format [locatorType~locatorValue]"
        )
    if not locator_type:
        raise InvalidLocatorError(
            f"Error parsing element locator [{element_locator}]. Locator type can't be empty"
        )
    if not locator_value:
        raise InvalidLocatorError(
            f"Error parsing element locator [{element_locator}]. Locator value can't be empty"
        )

    resolved_type = LocatorType.from_string(locator_type)
    if resolved_type is None:
        raise InvalidLocatorError(
            f"Can't parse element locator [{element_locator}]. "
            f"Locator type {locator_type} is not recognised. "
            f"Allowed values are {LocatorType.allowed_values()}."
        )
    return ElementLocator(resolved_type, locator_value)


class PageDefinition:
    """
    Definition of a single page: title, URL and element locators.

    Usage:
        >>> definition = PageDefinition.for_page(LoginPage, config)
        >>> definition.get_url()
        'http://qa.example.com/login'
        >>> definition.get_element_locator("username_input")
        ElementLocator(type=<LocatorType.ID: 'id'>, value='username')
    """

    def __init__(
        self,
        properties: Mapping[str, Any],
        config: Optional["ConfigStore"] = None,
        page_name: str = "PageDefinition",
    ):
        """
        Args:
            properties: Definition key/value pairs
            config: Configuration used to resolve the environment URL
            page_name: Name of the page, used in log and error messages

        Raises:
            InstantiationError: If URL or Title is missing
        """
        self.page_name = page_name
        self._config = config
        self._properties: Dict[str, str] = {
            str(key): "" if value is None else str(value)
            for key, value in properties.items()
        }

        missing = [name for name in MANDATORY_PROPERTIES if name not in self._properties]
        if missing:
            message = f"Mandatory properties missing in page definition for {page_name}: {', '.join(missing)}"
            log_error(LogLevel.LEVEL_8, page_name, message)
            raise InstantiationError(message)

    @staticmethod
    def definition_path(page_cls: Type[Any]) -> Path:
        """
        Location of the definition file for a page class.

        ``DEFINITION_FILE`` on the class overrides the default
        ``<module dir>/<ClassName>.yaml``; relative paths resolve against the
        module directory.
        """
        module_dir = Path(inspect.getfile(page_cls)).parent
        custom = getattr(page_cls, "DEFINITION_FILE", None)
        if custom:
            custom_path = Path(custom)
            return custom_path if custom_path.is_absolute() else module_dir / custom_path
        return module_dir / f"{page_cls.__name__}{DEFINITION_FILE_EXTENSION}"

    @classmethod
    def for_page(cls, page_cls: Type[Any], config: Optional["ConfigStore"] = None) -> "PageDefinition":
        """
        Load the definition file of a page class.

        Raises:
            InstantiationError: If the file is missing, unparsable or incomplete
        """
        page_name = page_cls.__name__
        path = cls.definition_path(page_cls)
        try:
            with open(path, "r", encoding="utf-8") as f:
                properties = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            message = f"Can't load page definition for {page_name}. Error details: {e}"
            log_error(LogLevel.LEVEL_8, page_name, message)
            raise InstantiationError(message) from e

        if not isinstance(properties, dict):
            message = f"Can't load page definition for {page_name}: {path} is not a key/value mapping"
            log_error(LogLevel.LEVEL_8, page_name, message)
            raise InstantiationError(message)

        logger.debug(f"Loaded page definition: {path}")
        return cls(properties, config=config, page_name=page_name)

    @property
    def properties(self) -> Dict[str, str]:
        return dict(self._properties)

    @property
    def title(self) -> str:
        return self._properties[TITLE_PROPERTY]

    def get_title(self) -> str:
        return self.title

    def get_url(self) -> str:
        """
        Page URL, prefixed with the current environment's ``url`` property.

        The prefix is concatenated as is: ``http://qa.example.com/`` + ``login``
        gives ``http://qa.example.com/login`` and no separator is inserted.
        """
        page_url = self._properties[URL_PROPERTY]
        environment_url = self._config.get_environment_property("url") if self._config else None
        if environment_url:
            return environment_url + page_url
        return page_url

    def element_names(self) -> List[str]:
        return [key for key in self._properties if key not in MANDATORY_PROPERTIES]

    def get_element_locator(self, element_name: str) -> ElementLocator:
        """
        Resolve an element locator by element name.

        Raises:
            InvalidLocatorError: If the element is not defined or its locator
                can not be parsed
        """
        element_locator = self._properties.get(element_name)
        if not element_locator:
            message = (
                f"Can't find element locator for element {element_name} in page definition. "
                f"Element definition should be in format elementName=locatorType~locatorValue."
            )
            log_error(LogLevel.LEVEL_8, self.page_name, message)
            raise InvalidLocatorError(message)

        try:
            return parse_element_locator(element_locator)
        except InvalidLocatorError as e:
            message = f"{e} (element {element_name})"
            log_error(LogLevel.LEVEL_8, self.page_name, message)
            raise InvalidLocatorError(message) from e


__all__ = [
    "LocatorType",
    "ElementLocator",
    "PageDefinition",
    "parse_element_locator",
]
