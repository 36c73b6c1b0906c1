"""Error kinds raised by node resolution."""

from typing import Optional


class NodeFinderError(Exception):
    """Base class for every error this package raises itself."""


class ElementNotFound(NodeFinderError):
    """No element matched although at least one was required."""

    def __init__(self, message: str = "Could not find element", query=None):
        super().__init__(message)
        self.query = query


class AmbiguousMatch(NodeFinderError):
    """The number of matches differs from the requested count."""

    def __init__(self, found: int, expected=None, query=None, message: Optional[str] = None):
        super().__init__(message or f"Ambiguous match, found {found}")
        self.found = found
        self.expected = expected
        self.query = query


class NoDriverError(NodeFinderError):
    """An action ran before a driver was attached to the context."""


__all__ = [
    "NodeFinderError",
    "ElementNotFound",
    "AmbiguousMatch",
    "NoDriverError",
]
