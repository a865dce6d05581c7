"""Element state conditions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyselenide.conditions import ElementCondition

if TYPE_CHECKING:
    from pyselenide.element import SelenideElement


class ExistsCondition(ElementCondition):
    @property
    def name(self) -> str:
        return "exists"

    def get_locator(self) -> str:
        return "exists"

    def check(self, element: SelenideElement) -> bool:
        return element.exists()


class VisibleCondition(ElementCondition):
    @property
    def name(self) -> str:
        return "visible"

    def get_locator(self) -> str:
        return "visible"

    def check(self, element: SelenideElement) -> bool:
        return element.is_displayed()


class CheckedCondition(ElementCondition):
    @property
    def name(self) -> str:
        return "checked"

    def get_locator(self) -> str:
        return "checked"

    def check(self, element: SelenideElement) -> bool:
        return element.checked()


class EnabledCondition(ElementCondition):
    @property
    def name(self) -> str:
        return "enabled"

    def get_locator(self) -> str:
        return "enabled"

    def check(self, element: SelenideElement) -> bool:
        return element.enabled()
