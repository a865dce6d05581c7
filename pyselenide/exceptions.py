"""pyselenide exception hierarchy."""


class SelenideError(Exception):
    """Base exception for all pyselenide errors."""


class ElementNotFound(SelenideError):
    """Raised when a locator chain or condition cannot be satisfied."""

    def __init__(self, locator: str, description: str = "", detail: str = "") -> None:
        self.locator = locator
        self.description = description
        self.detail = detail
        msg = f"Not found element {locator}"
        if description:
            msg = f"{description}: {msg}"
        if detail:
            msg += f" {detail}"
        super().__init__(msg)


class CollectionMethodNotImplemented(SelenideError):
    """Raised on write-style access to a read-only element collection."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Collection method not implemented: {method}")


class DriverError(SelenideError):
    """Raised on browser lifecycle and navigation errors."""
