"""Tests for the built-in conditions."""

from unittest.mock import MagicMock

import pytest

from pyselenide.condition import Condition
from pyselenide.element import SelenideElement
from pyselenide.exceptions import ElementNotFound
from pyselenide.models import By
from tests.conftest import make_handle


def _elements(*handles: MagicMock) -> list[SelenideElement]:
    return [SelenideElement(handle) for handle in handles]


UNIVERSAL = [
    Condition.value("v"),
    Condition.text("t"),
    Condition.with_text("t"),
    Condition.match_text("t+"),
    Condition.attribute("role", "button"),
    Condition.exists(),
    Condition.visible(),
    Condition.checked(),
    Condition.enabled(),
    Condition.child(By.css(".icon")),
]


class TestSizeConditions:
    @pytest.mark.parametrize(
        "condition, size, expected",
        [
            (Condition.size(3), 3, True),
            (Condition.size(3), 2, False),
            (Condition.size_greater_than(2), 3, True),
            (Condition.size_greater_than(3), 3, False),
            (Condition.size_greater_than_or_equal(3), 3, True),
            (Condition.size_less_than(3), 3, False),
            (Condition.size_less_than(3), 2, True),
            (Condition.size_less_than_or_equal(3), 3, True),
            (Condition.size(0), 0, True),
        ],
    )
    def test_compares_length(self, condition, size: int, expected: bool) -> None:
        collection = _elements(*[make_handle() for _ in range(size)])
        assert condition.matches(collection) is expected

    def test_locator_text(self) -> None:
        assert Condition.size(3).get_locator() == "size == 3"
        assert Condition.size_less_than_or_equal(1).get_locator() == "size <= 1"

    def test_negative_is_inverse(self) -> None:
        assert Condition.size(2).matches_negative(_elements(make_handle())) is True

    def test_assert_reports_actual_size(self) -> None:
        with pytest.raises(ElementNotFound, match=r"size == 3 \(actual size: 1\)"):
            Condition.size(3).apply_assert(_elements(make_handle()))


class TestUniversalQuantifier:
    @pytest.mark.parametrize("condition", UNIVERSAL, ids=lambda c: c.name)
    def test_empty_collection_never_matches(self, condition) -> None:
        assert condition.matches([]) is False

    @pytest.mark.parametrize("condition", UNIVERSAL, ids=lambda c: c.name)
    def test_empty_collection_assert_raises_not_found(self, condition) -> None:
        with pytest.raises(ElementNotFound):
            condition.apply_assert([])

    def test_all_must_match(self) -> None:
        collection = _elements(make_handle(visible=True), make_handle(visible=False))
        assert Condition.visible().matches(collection) is False

    def test_all_matching(self) -> None:
        collection = _elements(make_handle(visible=True), make_handle(visible=True))
        assert Condition.visible().matches(collection) is True

    def test_negative_requires_no_match(self) -> None:
        mixed = _elements(make_handle(visible=True), make_handle(visible=False))
        hidden = _elements(make_handle(visible=False))
        assert Condition.visible().matches_negative(mixed) is False
        assert Condition.visible().matches_negative(hidden) is True
        assert Condition.visible().matches_negative([]) is True

    def test_assert_negative_raises_when_matching(self) -> None:
        with pytest.raises(ElementNotFound, match="not visible"):
            Condition.visible().apply_assert_negative(_elements(make_handle()))


class TestTextConditions:
    def test_text_is_exact(self) -> None:
        condition = Condition.text("Hello")
        assert condition.matches(_elements(make_handle(text="Hello"))) is True
        assert condition.matches(_elements(make_handle(text="Hello world"))) is False

    def test_with_text_is_substring(self) -> None:
        condition = Condition.with_text("world")
        assert condition.matches(_elements(make_handle(text="Hello world"))) is True

    def test_match_text_uses_regex_search(self) -> None:
        condition = Condition.match_text(r"\d{3}")
        assert condition.matches(_elements(make_handle(text="code 404"))) is True
        assert condition.matches(_elements(make_handle(text="code"))) is False

    def test_value(self) -> None:
        assert Condition.value("a@b.c").matches(_elements(make_handle(value="a@b.c")))

    def test_attribute(self) -> None:
        condition = Condition.attribute("role", "button")
        assert condition.matches(_elements(make_handle(attributes={"role": "button"})))
        assert not condition.matches(_elements(make_handle(attributes={})))

    def test_text_failure_lists_actual(self) -> None:
        with pytest.raises(ElementNotFound, match=r"actual text: \['Bye'\]"):
            Condition.text("Hi").apply_assert(_elements(make_handle(text="Bye")))


class TestStateConditions:
    def test_exists_uses_connected_state(self) -> None:
        assert Condition.exists().matches(_elements(make_handle(connected=True)))
        assert not Condition.exists().matches(_elements(make_handle(connected=False)))

    def test_checked(self) -> None:
        assert Condition.checked().matches(_elements(make_handle(checked=True)))
        assert not Condition.checked().matches(_elements(make_handle(checked=False)))

    def test_enabled(self) -> None:
        assert not Condition.enabled().matches(_elements(make_handle(enabled=False)))


class TestChildCondition:
    def test_child_found_under_every_element(self) -> None:
        first, second = make_handle(), make_handle()
        first.query_selector.return_value = make_handle()
        second.query_selector.return_value = make_handle()
        condition = Condition.child(By.css(".icon"))
        assert condition.matches(_elements(first, second)) is True
        first.query_selector.assert_called_once_with(".icon")

    def test_child_missing_under_one_element(self) -> None:
        first, second = make_handle(), make_handle()
        first.query_selector.return_value = make_handle()
        condition = Condition.child(By.css(".icon"))
        assert condition.matches(_elements(first, second)) is False

    def test_locator(self) -> None:
        assert Condition.child(By.css(".icon")).get_locator() == "child .icon"
