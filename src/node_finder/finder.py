"""
Resolve queries into nodes.

``Finder.find`` polls the driver until the number of matches satisfies the
requested count, or the wait budget runs out. A count of exactly one returns
the node itself; any other count returns a list.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config.environment import FinderConfig
from .exceptions import AmbiguousMatch, ElementNotFound
from .types import ANY, CountExpectation, Locator, Node, NodeResult, Query
from .utils.retry import RetryableFailure, RetryEngine

import logging
logger = logging.getLogger(__name__)


@dataclass
class NotFound(RetryableFailure):
    query: Optional[Query] = None

    def to_error(self) -> Exception:
        return ElementNotFound(query=self.query)


@dataclass
class CountMismatch(RetryableFailure):
    found: int
    expected: CountExpectation
    query: Optional[Query] = None

    def to_error(self) -> Exception:
        return AmbiguousMatch(found=self.found, expected=self.expected, query=self.query)


def validate_count(count) -> CountExpectation:
    if count is ANY:
        return count
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be a non-negative integer or ANY, got {count!r}")
    if count < 0:
        raise ValueError(f"count must be a non-negative integer or ANY, got {count}")
    return count


def match_count(elements: Sequence[Node], count: CountExpectation, query: Optional[Query] = None):
    """
    Apply the count policy to one batch of matches.

    Returns the resolved value, or a RetryableFailure describing why the
    batch did not satisfy ``count``.
    """
    found = len(elements)
    if count is ANY:
        if found > 0:
            return list(elements)
    elif found == count:
        if count == 1:
            return elements[0]
        return list(elements)

    if found == 0:
        return NotFound(query=query)
    return CountMismatch(found=found, expected=count, query=query)


class Finder:
    """Runs queries through a driver under a retry engine."""

    def __init__(self, driver, config: Optional[FinderConfig] = None, retry: Optional[RetryEngine] = None):
        self.driver = driver
        self.config = config or FinderConfig()
        self.retry = retry or RetryEngine.from_config(self.config)

    def find(self, locator: Locator, query, count: CountExpectation = 1) -> NodeResult:
        """
        Find the node(s) matching ``query`` inside ``locator``.

        Blocks until the match count equals ``count`` (or is positive for
        ``ANY``) or the wait budget is spent. Selections can be scoped by
        passing a Node as the locator.

        Raises:
            ElementNotFound: nothing ever matched
            AmbiguousMatch: matches were found, but never the requested number
        """
        query = Query.coerce(query)
        count = validate_count(count)

        def attempt():
            elements = self.driver.find_elements(locator, query)
            return match_count(elements, count, query=query)

        result = self.retry.run(attempt, description=f"find {query}")
        logger.debug(f"Resolved {query} (count={count!r})")
        return result

    def all(self, locator: Locator, query) -> List[Node]:
        """Return every match right away; an empty list is not an error."""
        return list(self.driver.find_elements(locator, Query.coerce(query)))


__all__ = [
    "Finder",
    "NotFound",
    "CountMismatch",
    "match_count",
    "validate_count",
]
