"""
Page factory: builds page objects bound to the current browser session.

Pages are looked up in a registry mapping a page name to a factory
callable ``factory(handle, config) -> BasePage``. Page classes register
themselves with the ``register_page`` decorator:

    @register_page
    class LoginPage(BasePage):
        ...

    factory = PageFactory(session, config)
    login_page = factory.get_page("LoginPage")

Pages are not opened on construction; call ``navigate()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, MutableMapping, Optional, Type, TypeVar, Union

from ..common.logger import LogLevel, log_error
from ..exceptions import InstantiationError

if TYPE_CHECKING:
    from ..config.config_store import ConfigStore
    from .driver_session import DriverSession, SessionHandle
    from .page_base import BasePage


PageConstructor = Callable[["SessionHandle", Optional["ConfigStore"]], "BasePage"]
P = TypeVar("P", bound=type)

# Default registry used by ``register_page`` and ``PageFactory``
PAGE_REGISTRY: Dict[str, PageConstructor] = {}


def register_page(page_cls: Optional[P] = None, *, name: Optional[str] = None):
    """
    Class decorator adding a page class to ``PAGE_REGISTRY``.

    Usable bare (``@register_page``) or with a custom name
    (``@register_page(name="Login")``).
    """

    def decorator(cls: P) -> P:
        PAGE_REGISTRY[name or cls.__name__] = cls
        return cls

    if page_cls is not None:
        return decorator(page_cls)
    return decorator


class PageFactory:
    """Creates page objects for the session's current browser."""

    def __init__(
        self,
        session: "DriverSession",
        config: Optional["ConfigStore"] = None,
        registry: Optional[MutableMapping[str, PageConstructor]] = None,
    ):
        """
        Args:
            session: Driver session providing the browser handle
            config: Configuration passed to every page
            registry: Page registry; defaults to ``PAGE_REGISTRY``
        """
        self.session = session
        self.config = config if config is not None else session.config
        self.registry = PAGE_REGISTRY if registry is None else registry

    def register(self, name: str, factory: PageConstructor) -> None:
        self.registry[name] = factory

    def get_page(self, page: Union[str, Type["BasePage"]]) -> "BasePage":
        """
        Build a page object by registered name or page class.

        Raises:
            InstantiationError: If the page is unknown or can not be built
        """
        if isinstance(page, str):
            page_name = page
            factory = self.registry.get(page)
            if factory is None:
                message = (
                    f"Can't instantiate page {page_name}: no page registered under that name. "
                    f"Known pages: {', '.join(sorted(self.registry)) or 'none'}"
                )
                log_error(LogLevel.LEVEL_1, "PageFactory", message)
                raise InstantiationError(message)
        else:
            page_name = page.__name__
            factory = self.registry.get(page_name, page)

        handle = self.session.get()
        try:
            return factory(handle, self.config)
        except InstantiationError:
            raise
        except Exception as e:
            message = f"Can't instantiate page {page_name}. Error details: {e}"
            log_error(LogLevel.LEVEL_1, "PageFactory", message)
            raise InstantiationError(message) from e


__all__ = [
    "PAGE_REGISTRY",
    "PageConstructor",
    "PageFactory",
    "register_page",
]
