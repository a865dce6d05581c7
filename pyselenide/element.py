"""Single-element proxy over a native Playwright handle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyselenide.models import By
    from pyselenide.report import Report


class SelenideElement:
    """Wraps one native element handle produced by a single resolution.

    Proxies are never cached: a stale handle fails in the driver and the
    error propagates to the caller unchanged.
    """

    def __init__(self, handle: Any, report: Report | None = None) -> None:
        self._handle = handle
        self._report = report

    @property
    def handle(self) -> Any:
        return self._handle

    # --- Actions ---

    def click(self) -> SelenideElement:
        self._event("Click")
        self._handle.click()
        return self

    def double_click(self) -> SelenideElement:
        self._event("Double click")
        self._handle.dblclick()
        return self

    def set_value(self, value: str) -> SelenideElement:
        self._event(f"Set value '{value}'")
        self._handle.fill(value)
        return self

    def press_enter(self) -> SelenideElement:
        self._event("Press enter")
        self._handle.press("Enter")
        return self

    # --- Queries ---

    def text(self) -> str:
        return self._handle.inner_text()

    def val(self) -> str:
        return self._handle.input_value()

    def attribute(self, name: str) -> str | None:
        return self._handle.get_attribute(name)

    def exists(self) -> bool:
        return bool(self._handle.evaluate("el => el.isConnected"))

    def is_displayed(self) -> bool:
        return self._handle.is_visible()

    def checked(self) -> bool:
        return self._handle.is_checked()

    def enabled(self) -> bool:
        return self._handle.is_enabled()

    def find(self, locator: By) -> SelenideElement | None:
        """First descendant matching the locator, or None."""
        child = self._handle.query_selector(locator.selector)
        if child is None:
            return None
        return SelenideElement(child, self._report)

    def _event(self, text: str) -> None:
        if self._report is not None:
            self._report.add_child_event(text)

    def __repr__(self) -> str:
        return f"<SelenideElement {self._handle!r}>"
