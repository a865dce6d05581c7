"""Locator chain resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyselenide.element import SelenideElement
from pyselenide.exceptions import ElementNotFound
from pyselenide.logger import get_logger

if TYPE_CHECKING:
    from pyselenide.chain import LocatorChain
    from pyselenide.driver import Driver
    from pyselenide.report import Report

log = get_logger(__name__)


class CollectionResolver:
    """Turns a chain into fresh element proxies, once per call."""

    def __init__(self, driver: Driver, report: Report) -> None:
        self.driver = driver
        self.report = report

    def resolve(self, chain: LocatorChain) -> list[SelenideElement]:
        """Resolve the chain against the current page state.

        Driver errors propagate unchanged.
        """
        handles = self.driver.search(chain)
        if handles:
            self.report.add_child_event(f"Found elements {len(handles)}")
        else:
            self.report.add_child_event("Not found elements")
        log.debug("chain_resolved", locator=chain.as_text(), count=len(handles))
        return [SelenideElement(handle, self.report) for handle in handles]

    def resolve_non_empty(
        self, chain: LocatorChain, description: str = ""
    ) -> list[SelenideElement]:
        """Like resolve(), but raise ElementNotFound on an empty result."""
        collection = self.resolve(chain)
        if not collection:
            raise ElementNotFound(chain.as_text(), description=description)
        return collection
