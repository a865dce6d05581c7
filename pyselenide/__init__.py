"""pyselenide: fluent, lazily resolved element queries for browser tests."""

from pyselenide.chain import LocatorChain
from pyselenide.collection import ElementsCollection
from pyselenide.condition import Condition
from pyselenide.conditions import BaseCondition, ElementCondition
from pyselenide.config import SelenideConfig
from pyselenide.driver import Driver, PlaywrightDriver
from pyselenide.element import SelenideElement
from pyselenide.exceptions import (
    CollectionMethodNotImplemented,
    DriverError,
    ElementNotFound,
    SelenideError,
)
from pyselenide.models import By, ChainLink, LinkKind, ResultMode
from pyselenide.report import LogReport, MemoryReport, Report
from pyselenide.selenide import Selenide

__version__ = "0.1.0"

__all__ = [
    "BaseCondition",
    "By",
    "ChainLink",
    "CollectionMethodNotImplemented",
    "Condition",
    "Driver",
    "DriverError",
    "ElementCondition",
    "ElementNotFound",
    "ElementsCollection",
    "LinkKind",
    "LocatorChain",
    "LogReport",
    "MemoryReport",
    "PlaywrightDriver",
    "Report",
    "ResultMode",
    "Selenide",
    "SelenideConfig",
    "SelenideElement",
    "SelenideError",
    "__version__",
]
