"""Bounded polling for condition assertions."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

from pyselenide.exceptions import ElementNotFound
from pyselenide.logger import get_logger

log = get_logger(__name__)

T = TypeVar("T")


def poll(attempt: Callable[[], T], timeout: float, interval: float) -> T:
    """Call ``attempt`` until it stops raising ElementNotFound.

    Only ElementNotFound is retried; any other exception escapes on the
    attempt that raised it. The last ElementNotFound is re-raised once
    ``timeout`` seconds have elapsed. At least one attempt is always made.
    """
    deadline = time.monotonic() + timeout
    attempts = 0
    while True:
        attempts += 1
        try:
            return attempt()
        except ElementNotFound as exc:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                log.debug("poll_timeout", attempts=attempts, timeout=timeout)
                raise
            log.debug("poll_retry", attempt=attempts, error=str(exc))
            time.sleep(min(interval, remaining))
