"""Runtime configuration for pyselenide."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field


class SelenideConfig(BaseModel):
    """Timeouts and browser settings shared by every collection of a context."""

    timeout: float = Field(default=4.0, gt=0)  # seconds
    poll_interval: float = Field(default=0.05, gt=0)  # seconds
    headless: bool = True
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    base_url: str = ""

    @classmethod
    def from_env(cls) -> SelenideConfig:
        """Load config from ``SELENIDE_*`` environment variables."""
        return cls(
            timeout=float(os.environ.get("SELENIDE_TIMEOUT", "4.0")),
            poll_interval=float(os.environ.get("SELENIDE_POLL_INTERVAL", "0.05")),
            headless=os.environ.get("SELENIDE_HEADLESS", "true").lower() == "true",
            browser=os.environ.get("SELENIDE_BROWSER", "chromium"),
            base_url=os.environ.get("SELENIDE_BASE_URL", ""),
        )
