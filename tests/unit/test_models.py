"""Tests for locator and chain-link models."""

import pytest
from pydantic import ValidationError

from pyselenide.condition import Condition
from pyselenide.models import By, ChainLink, LinkKind


class TestBy:
    def test_css_selector_is_target(self) -> None:
        assert By.css(".item").selector == ".item"

    def test_xpath_selector_prefixed(self) -> None:
        assert By.xpath("//li").selector == "xpath=//li"

    def test_text_selector_prefixed(self) -> None:
        assert By.text("Login").selector == "text=Login"

    def test_id_and_name_selectors(self) -> None:
        assert By.id("email").selector == '[id="email"]'
        assert By.name("q").selector == '[name="q"]'

    def test_str_renders_target(self) -> None:
        assert str(By.xpath("//li")) == "//li"

    def test_is_frozen(self) -> None:
        locator = By.css("#a")
        with pytest.raises(ValidationError):
            locator.target = "#b"

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            By(strategy="link", target="x")

    def test_equal_by_value(self) -> None:
        assert By.css("#a") == By.css("#a")


class TestChainLink:
    def test_find_link(self) -> None:
        link = ChainLink.find(By.css("#a"))
        assert link.kind is LinkKind.FIND
        assert link.as_text() == "#a"

    def test_find_all_link(self) -> None:
        link = ChainLink.find_all(By.css(".row"))
        assert link.kind is LinkKind.FIND_ALL
        assert link.as_text() == ".row"

    def test_positive_filter_text(self) -> None:
        link = ChainLink.filter(Condition.visible())
        assert link.positive is True
        assert link.as_text() == "[should visible]"

    def test_negative_filter_text(self) -> None:
        link = ChainLink.filter(Condition.text("x"), positive=False)
        assert link.as_text() == "[should not text 'x']"
