"""Text, value and attribute conditions."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pyselenide.conditions import ElementCondition

if TYPE_CHECKING:
    from pyselenide.element import SelenideElement


class TextCondition(ElementCondition):
    """Element text equals the expected string."""

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def name(self) -> str:
        return "text"

    def get_locator(self) -> str:
        return f"text '{self.text}'"

    def check(self, element: SelenideElement) -> bool:
        return element.text() == self.text

    def describe_actual(self, collection: Sequence[SelenideElement]) -> str:
        return f"actual text: {[element.text() for element in collection]}"


class WithTextCondition(TextCondition):
    """Element text contains the expected substring."""

    @property
    def name(self) -> str:
        return "with_text"

    def get_locator(self) -> str:
        return f"with text '{self.text}'"

    def check(self, element: SelenideElement) -> bool:
        return self.text in element.text()


class MatchTextCondition(ElementCondition):
    """Element text matches a regular expression."""

    def __init__(self, pattern: str) -> None:
        self.pattern = re.compile(pattern)

    @property
    def name(self) -> str:
        return "match_text"

    def get_locator(self) -> str:
        return f"match text /{self.pattern.pattern}/"

    def check(self, element: SelenideElement) -> bool:
        return self.pattern.search(element.text()) is not None

    def describe_actual(self, collection: Sequence[SelenideElement]) -> str:
        return f"actual text: {[element.text() for element in collection]}"


class ValueCondition(ElementCondition):
    """Form field value equals the expected string."""

    def __init__(self, value: str) -> None:
        self.value = value

    @property
    def name(self) -> str:
        return "value"

    def get_locator(self) -> str:
        return f"value '{self.value}'"

    def check(self, element: SelenideElement) -> bool:
        return element.val() == self.value

    def describe_actual(self, collection: Sequence[SelenideElement]) -> str:
        return f"actual value: {[element.val() for element in collection]}"


class AttributeCondition(ElementCondition):
    """Attribute equals the expected string."""

    def __init__(self, attr_name: str, value: str) -> None:
        self.attr_name = attr_name
        self.value = value

    @property
    def name(self) -> str:
        return "attribute"

    def get_locator(self) -> str:
        return f"attribute {self.attr_name}='{self.value}'"

    def check(self, element: SelenideElement) -> bool:
        return element.attribute(self.attr_name) == self.value

    def describe_actual(self, collection: Sequence[SelenideElement]) -> str:
        actual = [element.attribute(self.attr_name) for element in collection]
        return f"actual {self.attr_name}: {actual}"
