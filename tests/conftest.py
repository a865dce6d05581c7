"""Shared test fixtures for pyselenide."""
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from pyselenide.config import SelenideConfig
from pyselenide.driver import Driver
from pyselenide.report import MemoryReport
from pyselenide.selenide import Selenide


def make_handle(
    text: str = "",
    value: str = "",
    visible: bool = True,
    checked: bool = False,
    enabled: bool = True,
    connected: bool = True,
    attributes: dict[str, str] | None = None,
) -> MagicMock:
    """Create a mock Playwright element handle."""
    handle = MagicMock()
    handle.inner_text.return_value = text
    handle.input_value.return_value = value
    handle.is_visible.return_value = visible
    handle.is_checked.return_value = checked
    handle.is_enabled.return_value = enabled
    handle.evaluate.return_value = connected
    handle.get_attribute.side_effect = (attributes or {}).get
    handle.query_selector.return_value = None
    return handle


class FakeDriver(Driver):
    """Driver returning canned handles; records every searched chain."""

    def __init__(self, handles: list[Any] | Callable[[], list[Any]] | None = None) -> None:
        self.handles = handles if handles is not None else []
        self.searches: list[str] = []

    def search(self, chain):
        self.searches.append(chain.as_text())
        if callable(self.handles):
            return list(self.handles())
        return list(self.handles)


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def report() -> MemoryReport:
    return MemoryReport()


@pytest.fixture
def config() -> SelenideConfig:
    return SelenideConfig(timeout=0.2, poll_interval=0.01)


@pytest.fixture
def selenide(driver: FakeDriver, report: MemoryReport, config: SelenideConfig) -> Selenide:
    return Selenide(driver, report=report, config=config)
