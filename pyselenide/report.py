"""Report sink for diagnostic events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pyselenide.logger import get_logger

log = get_logger(__name__)


class Report(ABC):
    """Fire-and-forget sink for step events."""

    @abstractmethod
    def add_child_event(self, text: str) -> None:
        """Record one event under the current step."""


class LogReport(Report):
    """Writes every event to the structured log."""

    def add_child_event(self, text: str) -> None:
        log.info("report_event", text=text)


class MemoryReport(Report):
    """Keeps events in memory, in arrival order."""

    def __init__(self) -> None:
        self.events: list[str] = []

    def add_child_event(self, text: str) -> None:
        self.events.append(text)

    def clear(self) -> None:
        self.events.clear()
