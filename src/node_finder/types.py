"""
Data model shared by the finder, the driver and the actions.

A locator is the scope a query runs against: either a whole ``Session`` or a
``Node`` whose sub-tree is searched. Both expose ``session`` and ``scope_id``
so drivers can dispatch without inspecting the concrete type.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass(frozen=True)
class Session:
    """
    Opaque reference to a browser session.

    Attributes:
        id: Driver-assigned session identifier
        handle: Whatever the driver needs to talk to the session (e.g. a
            Selenium WebDriver). Excluded from equality and repr.
    """

    id: str
    handle: Any = field(default=None, compare=False, repr=False)

    @property
    def session(self) -> "Session":
        return self

    @property
    def scope_id(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Node:
    """A resolved DOM element; its ``id`` only means something within ``session``."""

    session: Session
    id: str

    @property
    def scope_id(self) -> Optional[str]:
        return self.id


Locator = Union[Session, Node]


CSS = "css"
XPATH = "xpath"


@dataclass(frozen=True)
class Query:
    """A selector in exactly one representation: CSS or XPath."""

    kind: str
    text: str

    def __post_init__(self):
        if self.kind not in (CSS, XPATH):
            raise ValueError(f"Unsupported query kind: {self.kind!r}")
        if not isinstance(self.text, str):
            raise TypeError(f"Query text must be a string, got {type(self.text).__name__}")

    @property
    def is_xpath(self) -> bool:
        return self.kind == XPATH

    @classmethod
    def coerce(cls, value) -> "Query":
        """
        Normalize the accepted query spellings into a Query.

        - Query instances pass through
        - bare strings are CSS selectors
        - ("xpath", expr) and ("css", selector) tuples pick the kind explicitly
        """
        if isinstance(value, Query):
            return value
        if isinstance(value, str):
            return cls(CSS, value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"Cannot build a query from {value!r}")

    def __str__(self) -> str:
        return f"{self.kind}:{self.text}"


def css(text: str) -> Query:
    return Query(CSS, text)


def xpath(text: str) -> Query:
    return Query(XPATH, text)


class _AnyCount:
    """Sentinel accepting any positive number of matches."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"


ANY = _AnyCount()

CountExpectation = Union[int, _AnyCount]

NodeResult = Union[Node, List[Node]]


__all__ = [
    "Session",
    "Node",
    "Locator",
    "Query",
    "css",
    "xpath",
    "ANY",
    "CountExpectation",
    "NodeResult",
]
