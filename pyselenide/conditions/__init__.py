"""Condition interface and the universal element-condition base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pyselenide.exceptions import ElementNotFound

if TYPE_CHECKING:
    from pyselenide.element import SelenideElement


class BaseCondition(ABC):
    """Named predicate evaluated over a resolved element collection.

    Conditions are stateless values; one instance can be shared by any
    number of chains.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Condition kind, used in logs."""

    @abstractmethod
    def get_locator(self) -> str:
        """Human-readable description used in error messages."""

    @abstractmethod
    def matches(self, collection: Sequence[SelenideElement]) -> bool:
        """Return True if the collection satisfies the condition."""

    def matches_negative(self, collection: Sequence[SelenideElement]) -> bool:
        """Return True if the collection satisfies the negated condition."""
        return not self.matches(collection)

    def describe_actual(self, collection: Sequence[SelenideElement]) -> str:
        """Observed state, appended to failure messages."""
        return f"actual size: {len(collection)}"

    def apply_assert(self, collection: Sequence[SelenideElement]) -> None:
        """Raise ElementNotFound unless the collection satisfies the condition."""
        if not self.matches(collection):
            raise ElementNotFound(
                self.get_locator(), detail=f"({self.describe_actual(collection)})"
            )

    def apply_assert_negative(self, collection: Sequence[SelenideElement]) -> None:
        """Raise ElementNotFound unless the collection satisfies the negation."""
        if not self.matches_negative(collection):
            raise ElementNotFound(
                f"not {self.get_locator()}",
                detail=f"({self.describe_actual(collection)})",
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.get_locator()}>"


class ElementCondition(BaseCondition):
    """Condition checked element by element.

    Satisfied only by a non-empty collection whose every element matches;
    an empty collection never satisfies it. The negation holds when no
    element matches.
    """

    @abstractmethod
    def check(self, element: SelenideElement) -> bool:
        """Return True if a single element satisfies the condition."""

    def matches(self, collection: Sequence[SelenideElement]) -> bool:
        matched = sum(1 for element in collection if self.check(element))
        return matched == len(collection) and matched > 0

    def matches_negative(self, collection: Sequence[SelenideElement]) -> bool:
        return not any(self.check(element) for element in collection)
