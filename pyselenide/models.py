"""Locator and chain-link value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from pyselenide.conditions import BaseCondition


class By(BaseModel):
    """Element locator: a strategy plus a target string."""

    model_config = ConfigDict(frozen=True)

    strategy: Literal["css", "xpath", "text", "id", "name"]
    target: str

    @classmethod
    def css(cls, target: str) -> By:
        return cls(strategy="css", target=target)

    @classmethod
    def xpath(cls, target: str) -> By:
        return cls(strategy="xpath", target=target)

    @classmethod
    def text(cls, target: str) -> By:
        return cls(strategy="text", target=target)

    @classmethod
    def id(cls, target: str) -> By:
        return cls(strategy="id", target=target)

    @classmethod
    def name(cls, target: str) -> By:
        return cls(strategy="name", target=target)

    @property
    def selector(self) -> str:
        """Playwright selector engine string for this locator."""
        if self.strategy == "xpath":
            return f"xpath={self.target}"
        if self.strategy == "text":
            return f"text={self.target}"
        if self.strategy in ("id", "name"):
            return f'[{self.strategy}="{self.target}"]'
        return self.target

    def __str__(self) -> str:
        return self.target


class LinkKind(str, Enum):
    """Kinds of chain links."""

    FIND = "find"
    FIND_ALL = "find_all"
    FILTER = "filter"


class ResultMode(str, Enum):
    """Shape of read results derived from a chain."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class ChainLink:
    """One step of a locator chain."""

    kind: LinkKind
    locator: By | None = None
    condition: BaseCondition | None = None
    positive: bool = True

    @classmethod
    def find(cls, locator: By) -> ChainLink:
        return cls(kind=LinkKind.FIND, locator=locator)

    @classmethod
    def find_all(cls, locator: By) -> ChainLink:
        return cls(kind=LinkKind.FIND_ALL, locator=locator)

    @classmethod
    def filter(cls, condition: BaseCondition, positive: bool = True) -> ChainLink:
        return cls(kind=LinkKind.FILTER, condition=condition, positive=positive)

    def as_text(self) -> str:
        """Diagnostic fragment for this link."""
        if self.kind is LinkKind.FILTER:
            verb = "should" if self.positive else "should not"
            return f"[{verb} {self.condition.get_locator()}]"
        return str(self.locator)
