"""Selenide context: the root of every locator chain."""

from __future__ import annotations

from typing import Any

from pyselenide.browser import BrowserManager
from pyselenide.collection import ElementsCollection
from pyselenide.config import SelenideConfig
from pyselenide.driver import Driver, PlaywrightDriver
from pyselenide.logger import get_logger
from pyselenide.models import By, ChainLink
from pyselenide.report import LogReport, Report

log = get_logger(__name__)


class Selenide:
    """Holds the driver, report sink and config shared by collections.

    The driver and report are borrowed; the context only closes a browser
    it launched itself through ``launch()``.
    """

    def __init__(
        self,
        driver: Driver,
        report: Report | None = None,
        config: SelenideConfig | None = None,
    ) -> None:
        self.driver = driver
        self.report = report or LogReport()
        self.config = config or SelenideConfig()
        self._browser: BrowserManager | None = None

    @classmethod
    def launch(
        cls, config: SelenideConfig | None = None, report: Report | None = None
    ) -> Selenide:
        """Start a Playwright browser and return a context bound to its page."""
        config = config or SelenideConfig.from_env()
        browser = BrowserManager()
        browser.start(headless=config.headless, browser=config.browser)
        selenide = cls(
            PlaywrightDriver(browser.get_page(), base_url=config.base_url),
            report=report,
            config=config,
        )
        selenide._browser = browser
        return selenide

    def close(self) -> None:
        """Stop the browser started by ``launch()``, if any."""
        if self._browser is not None:
            self._browser.stop()
            self._browser = None

    def __enter__(self) -> Selenide:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def open(self, url: str) -> Selenide:
        self.report.add_child_event(f"Open {url}")
        self.driver.open(url)
        return self

    def find(self, locator: By) -> ElementsCollection:
        """Start a chain that narrows to one element."""
        return ElementsCollection(self, [ChainLink.find(locator)])

    def find_all(self, locator: By) -> ElementsCollection:
        """Start a chain that narrows to every matching element."""
        return ElementsCollection(self, [ChainLink.find_all(locator)])
