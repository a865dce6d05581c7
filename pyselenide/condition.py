"""Factory for the built-in conditions."""

from __future__ import annotations

import operator

from pyselenide.conditions import BaseCondition
from pyselenide.conditions.child import ChildCondition
from pyselenide.conditions.size import SizeCondition
from pyselenide.conditions.state import (
    CheckedCondition,
    EnabledCondition,
    ExistsCondition,
    VisibleCondition,
)
from pyselenide.conditions.text import (
    AttributeCondition,
    MatchTextCondition,
    TextCondition,
    ValueCondition,
    WithTextCondition,
)
from pyselenide.models import By


class Condition:
    """Namespace of condition constructors, e.g. ``Condition.size(3)``."""

    @staticmethod
    def size(size: int) -> BaseCondition:
        return SizeCondition(size)

    @staticmethod
    def size_greater_than(size: int) -> BaseCondition:
        return SizeCondition(size, operator.gt)

    @staticmethod
    def size_greater_than_or_equal(size: int) -> BaseCondition:
        return SizeCondition(size, operator.ge)

    @staticmethod
    def size_less_than(size: int) -> BaseCondition:
        return SizeCondition(size, operator.lt)

    @staticmethod
    def size_less_than_or_equal(size: int) -> BaseCondition:
        return SizeCondition(size, operator.le)

    @staticmethod
    def value(value: str) -> BaseCondition:
        return ValueCondition(value)

    @staticmethod
    def text(text: str) -> BaseCondition:
        """Exact text match."""
        return TextCondition(text)

    @staticmethod
    def with_text(text: str) -> BaseCondition:
        """Substring text match."""
        return WithTextCondition(text)

    @staticmethod
    def match_text(pattern: str) -> BaseCondition:
        """Regular expression search on the element text."""
        return MatchTextCondition(pattern)

    @staticmethod
    def exists() -> BaseCondition:
        return ExistsCondition()

    @staticmethod
    def visible() -> BaseCondition:
        return VisibleCondition()

    @staticmethod
    def checked() -> BaseCondition:
        return CheckedCondition()

    @staticmethod
    def enabled() -> BaseCondition:
        return EnabledCondition()

    @staticmethod
    def attribute(attr_name: str, value: str) -> BaseCondition:
        return AttributeCondition(attr_name, value)

    @staticmethod
    def child(locator: By) -> BaseCondition:
        return ChildCondition(locator)
