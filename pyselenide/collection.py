"""Fluent element collection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from pyselenide.chain import LocatorChain
from pyselenide.exceptions import CollectionMethodNotImplemented, ElementNotFound
from pyselenide.logger import get_logger
from pyselenide.models import By, ChainLink, ResultMode
from pyselenide.resolver import CollectionResolver
from pyselenide.wait import poll

if TYPE_CHECKING:
    from pyselenide.conditions import BaseCondition
    from pyselenide.element import SelenideElement
    from pyselenide.selenide import Selenide

log = get_logger(__name__)


class ElementsCollection:
    """Lazy query over page elements.

    Builder methods (``find``, ``find_all``, ``should``, ``should_not``)
    only extend the locator chain. Every other method resolves the chain
    from scratch, so two calls may observe different pages.

    Read methods (``val``, ``text``, ``attribute``) return a single value
    when the last find link is ``find`` and a list when it is ``find_all``.
    """

    def __init__(self, selenide: Selenide, links: list[ChainLink] | None = None) -> None:
        self._selenide = selenide
        self._chain = LocatorChain(links)
        self._resolver = CollectionResolver(selenide.driver, selenide.report)
        self._description = ""
        self._index = 0

    @property
    def chain(self) -> LocatorChain:
        return self._chain

    # --- Builder ---

    def description(self, text: str) -> ElementsCollection:
        """Set the description shown in error messages."""
        self._description = text
        return self

    def find(self, locator: By) -> ElementsCollection:
        self._chain.append(ChainLink.find(locator))
        return self

    def find_all(self, locator: By) -> ElementsCollection:
        self._chain.append(ChainLink.find_all(locator))
        return self

    def should(self, condition: BaseCondition) -> ElementsCollection:
        """Keep only elements satisfying the condition."""
        self._chain.append(ChainLink.filter(condition, positive=True))
        return self

    def should_not(self, condition: BaseCondition) -> ElementsCollection:
        """Keep only elements not satisfying the condition."""
        self._chain.append(ChainLink.filter(condition, positive=False))
        return self

    # --- Assertions ---

    def assert_(
        self, condition: BaseCondition, timeout: float | None = None
    ) -> ElementsCollection:
        """Wait until the resolved collection satisfies the condition.

        Raises:
            ElementNotFound: If the condition still fails after ``timeout``
                seconds. The condition's own failure is kept as the cause.
        """

        def attempt() -> None:
            condition.apply_assert(self.get_collection())

        try:
            poll(attempt, self._timeout(timeout), self._selenide.config.poll_interval)
        except ElementNotFound as exc:
            log.info(
                "assert_failed",
                locator=self.get_locator(),
                condition=condition.get_locator(),
            )
            raise ElementNotFound(
                self.get_locator(),
                description=self._description,
                detail=f"with condition {condition.get_locator()}",
            ) from exc
        return self

    def assert_not(
        self, condition: BaseCondition, timeout: float | None = None
    ) -> ElementsCollection:
        """Wait until the resolved collection satisfies the negated condition."""

        def attempt() -> None:
            condition.apply_assert_negative(self.get_collection())

        poll(attempt, self._timeout(timeout), self._selenide.config.poll_interval)
        return self

    # --- Resolution ---

    def get_collection(self) -> list[SelenideElement]:
        return self._resolver.resolve(self._chain)

    def get_collection_not_empty(self) -> list[SelenideElement]:
        return self._resolver.resolve_non_empty(self._chain, self._description)

    def get(self, index: int = 0) -> SelenideElement:
        collection = self.get_collection_not_empty()
        if not 0 <= index < len(collection):
            raise ElementNotFound(
                self.get_locator(),
                description=self._description,
                detail=f"at index {index} (size: {len(collection)})",
            )
        return collection[index]

    def length(self) -> int:
        return len(self.get_collection())

    def count(self) -> int:
        return self.length()

    def get_locator(self) -> str:
        return self._chain.as_text()

    # --- Actions on every element ---

    def set_value(self, value: str) -> ElementsCollection:
        for element in self.get_collection_not_empty():
            element.set_value(value)
        return self

    def press_enter(self) -> ElementsCollection:
        for element in self.get_collection_not_empty():
            element.press_enter()
        return self

    def click(self) -> ElementsCollection:
        for element in self.get_collection_not_empty():
            element.click()
        return self

    def double_click(self) -> ElementsCollection:
        for element in self.get_collection_not_empty():
            element.double_click()
        return self

    # --- State queries (non-empty and all match) ---

    def is_displayed(self) -> bool:
        collection = self.get_collection()
        counter = sum(1 for element in collection if element.is_displayed())
        return counter == len(collection) and counter > 0

    def exists(self) -> bool:
        collection = self.get_collection()
        counter = sum(1 for element in collection if element.exists())
        return counter == len(collection) and counter > 0

    def checked(self) -> bool:
        """All elements checked; raises ElementNotFound if none resolve."""
        collection = self.get_collection_not_empty()
        counter = sum(1 for element in collection if element.checked())
        return counter == len(collection) and counter > 0

    # --- Reads ---

    def val(self) -> Any:
        collection = self.get_collection_not_empty()
        self._selenide.report.add_child_event("Read value")
        return self._send_result([element.val() for element in collection])

    def text(self) -> Any:
        collection = self.get_collection_not_empty()
        self._selenide.report.add_child_event("Read text")
        return self._send_result([element.text() for element in collection])

    def attribute(self, name: str) -> Any:
        collection = self.get_collection_not_empty()
        return self._send_result([element.attribute(name) for element in collection])

    def _send_result(self, result: list[Any]) -> Any:
        # callers resolve with get_collection_not_empty, so an empty read raises first
        if self._chain.result_mode() is ResultMode.SINGLE:
            return result[0] if result else None
        return result

    def _timeout(self, timeout: float | None) -> float:
        return self._selenide.config.timeout if timeout is None else timeout

    # --- Cursor ---

    def current(self) -> SelenideElement:
        return self.get(self._index)

    def next(self) -> None:
        self._index += 1

    def key(self) -> int:
        return self._index

    def valid(self) -> bool:
        return self.offset_exists(self._index)

    def rewind(self) -> None:
        self._index = 0

    def offset_exists(self, index: int) -> bool:
        return 0 <= index < self.length()

    # --- Python sequence protocol ---

    def __len__(self) -> int:
        return self.length()

    def __getitem__(self, index: int) -> SelenideElement:
        return self.get(index)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.offset_exists(index)

    def __iter__(self) -> Iterator[SelenideElement]:
        index = 0
        while index < self.length():
            yield self.get(index)
            index += 1

    def __setitem__(self, index: int, value: Any) -> None:
        raise CollectionMethodNotImplemented("__setitem__")

    def __delitem__(self, index: int) -> None:
        raise CollectionMethodNotImplemented("__delitem__")

    def __repr__(self) -> str:
        return f"<ElementsCollection {self._description or self.get_locator()!r}>"
