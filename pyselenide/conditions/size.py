"""Collection size conditions."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from pyselenide.conditions import BaseCondition

if TYPE_CHECKING:
    from pyselenide.element import SelenideElement


class SizeCondition(BaseCondition):
    """Compare the collection length to a fixed size."""

    _symbols: dict[Callable[[int, int], bool], str] = {
        operator.eq: "==",
        operator.gt: ">",
        operator.ge: ">=",
        operator.lt: "<",
        operator.le: "<=",
    }

    def __init__(self, size: int, op: Callable[[int, int], bool] = operator.eq) -> None:
        if op not in self._symbols:
            raise ValueError(f"Unsupported size comparison: {op!r}")
        self.size = size
        self.op = op

    @property
    def name(self) -> str:
        return "size"

    def get_locator(self) -> str:
        return f"size {self._symbols[self.op]} {self.size}"

    def matches(self, collection: Sequence[SelenideElement]) -> bool:
        return self.op(len(collection), self.size)
