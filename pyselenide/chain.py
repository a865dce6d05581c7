"""Append-only locator chain."""

from __future__ import annotations

from collections.abc import Iterator

from pyselenide.models import ChainLink, LinkKind, ResultMode

_SEPARATOR = " -> "


class LocatorChain:
    """Ordered sequence of chain links.

    Holds no resolution state: every resolution re-derives its result from
    the links and the current page.
    """

    def __init__(self, links: list[ChainLink] | None = None) -> None:
        self._links: list[ChainLink] = list(links or [])

    def append(self, link: ChainLink) -> LocatorChain:
        self._links.append(link)
        return self

    @property
    def links(self) -> tuple[ChainLink, ...]:
        return tuple(self._links)

    def __iter__(self) -> Iterator[ChainLink]:
        return iter(tuple(self._links))

    def __len__(self) -> int:
        return len(self._links)

    def result_mode(self) -> ResultMode:
        """Cardinality declared by the last find / find-all link.

        Filter links never change the mode; a chain without find links is
        ``MULTIPLE``.
        """
        mode = ResultMode.MULTIPLE
        for link in self._links:
            if link.kind is LinkKind.FIND:
                mode = ResultMode.SINGLE
            elif link.kind is LinkKind.FIND_ALL:
                mode = ResultMode.MULTIPLE
        return mode

    def as_text(self) -> str:
        """Render the chain for error messages."""
        return _SEPARATOR.join(link.as_text() for link in self._links)

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"LocatorChain({self.as_text()!r})"
