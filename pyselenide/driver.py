"""Driver boundary and its Playwright implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pyselenide.conditions import ElementCondition
from pyselenide.element import SelenideElement
from pyselenide.exceptions import DriverError
from pyselenide.logger import get_logger
from pyselenide.models import LinkKind

if TYPE_CHECKING:
    from playwright.sync_api import Page

    from pyselenide.chain import LocatorChain

log = get_logger(__name__)


class Driver(ABC):
    """Executes a locator chain against a live page."""

    @abstractmethod
    def search(self, chain: LocatorChain) -> list[Any]:
        """Return the native handles currently matching the chain."""

    def open(self, url: str) -> None:
        """Navigate the session to ``url``."""
        raise DriverError(f"{type(self).__name__} does not support navigation")


class PlaywrightDriver(Driver):
    """Resolves chains with Playwright's synchronous API.

    Find links narrow every current scope to its first match, find-all links
    to all of its matches. Filter links with an element condition keep the
    elements for which the condition, evaluated over that single element,
    equals the link polarity. Filter links with a collection condition (size)
    keep every element or none.
    """

    def __init__(self, page: Page, base_url: str = "") -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")

    def open(self, url: str) -> None:
        if self.base_url and url.startswith("/"):
            url = self.base_url + url
        self.page.goto(url)
        log.info("page_opened", url=url)

    def search(self, chain: LocatorChain) -> list[Any]:
        scopes: list[Any] = [self.page]
        at_root = True
        for link in chain:
            if link.kind is LinkKind.FIND:
                found = [scope.query_selector(link.locator.selector) for scope in scopes]
                scopes = [handle for handle in found if handle is not None]
                at_root = False
            elif link.kind is LinkKind.FIND_ALL:
                scopes = [
                    handle
                    for scope in scopes
                    for handle in scope.query_selector_all(link.locator.selector)
                ]
                at_root = False
            elif at_root:
                log.debug("root_filter_ignored", condition=link.condition.get_locator())
            elif isinstance(link.condition, ElementCondition):
                scopes = [
                    handle
                    for handle in scopes
                    if link.condition.matches([SelenideElement(handle)]) == link.positive
                ]
            else:
                collection = [SelenideElement(handle) for handle in scopes]
                if link.condition.matches(collection) != link.positive:
                    scopes = []
            if not scopes:
                return []
        return [] if at_root else scopes
