"""Playwright browser manager."""

from __future__ import annotations

from playwright.sync_api import Browser, BrowserContext, Page, sync_playwright

from pyselenide.exceptions import DriverError
from pyselenide.logger import get_logger

log = get_logger(__name__)


class BrowserManager:
    """Manages the lifecycle of one synchronous Playwright browser session."""

    def __init__(self) -> None:
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    def start(self, headless: bool = True, browser: str = "chromium") -> None:
        """Launch browser."""
        try:
            self._playwright = sync_playwright().start()
            launcher = getattr(self._playwright, browser)
            self._browser = launcher.launch(headless=headless)
            self._context = self._browser.new_context()
            self._page = self._context.new_page()
            log.info("browser_started", browser=browser, headless=headless)
        except Exception as exc:
            raise DriverError(f"Failed to start browser: {exc}") from exc

    def stop(self) -> None:
        """Close browser and cleanup."""
        try:
            if self._page and not self._page.is_closed():
                self._page.close()
            if self._context:
                self._context.close()
            if self._browser:
                self._browser.close()
            if self._playwright:
                self._playwright.stop()
        except Exception as exc:
            log.warning("browser_stop_error", error=str(exc))
        finally:
            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None
            log.info("browser_stopped")

    def get_page(self) -> Page:
        """Get the current page, opening a new one if it was closed."""
        if self._page and not self._page.is_closed():
            return self._page
        if self._context:
            self._page = self._context.new_page()
            return self._page
        raise DriverError("Browser not started; call start() first")
