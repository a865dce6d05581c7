"""Child element condition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyselenide.conditions import ElementCondition

if TYPE_CHECKING:
    from pyselenide.element import SelenideElement
    from pyselenide.models import By


class ChildCondition(ElementCondition):
    """Every element has a descendant matching the locator."""

    def __init__(self, locator: By) -> None:
        self.locator = locator

    @property
    def name(self) -> str:
        return "child"

    def get_locator(self) -> str:
        return f"child {self.locator}"

    def check(self, element: SelenideElement) -> bool:
        return element.find(self.locator) is not None
