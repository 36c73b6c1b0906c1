"""Driver implementations."""

from .driver import Driver, SeleniumDriver, get_by_selector

__all__ = [
    "Driver",
    "SeleniumDriver",
    "get_by_selector",
]
