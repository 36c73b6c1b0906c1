"""
Node and query layer for browser automation.

Queries (CSS selectors or XPath expressions) are resolved against a Session or
a previously found Node. Because the page renders asynchronously, ``find``
keeps polling the driver until the number of matches is right or the wait
budget runs out:

    finder = Finder(SeleniumDriver(), FinderConfig(max_wait_time=3000))
    session = SeleniumDriver.session_for(webdriver)

    users = finder.find(session, ".users")
    rows = finder.find(users, ".user", count=3)
    name = text(finder.find(rows[0], ".user-name"), finder=finder)

``all`` returns whatever is on the page right now, without waiting.

Errors:
    ElementNotFound: nothing matched before the budget ran out
    AmbiguousMatch: something matched, but never the requested number
Driver errors (a lost session, for example) are never retried.
"""

from .types import ANY, Locator, Node, Query, Session, css, xpath
from .exceptions import AmbiguousMatch, ElementNotFound, NoDriverError, NodeFinderError
from .config import FinderConfig, get_env_config
from .finder import Finder
from .context import get_context, reset_context
from .browser import Driver, SeleniumDriver
from .actions import (
    attr,
    check,
    choose,
    clear,
    click,
    fill_in,
    has_content,
    has_value,
    is_checked,
    selected,
    text,
    uncheck,
)

__all__ = [
    "ANY",
    "Locator",
    "Node",
    "Query",
    "Session",
    "css",
    "xpath",
    "AmbiguousMatch",
    "ElementNotFound",
    "NoDriverError",
    "NodeFinderError",
    "FinderConfig",
    "get_env_config",
    "Finder",
    "get_context",
    "reset_context",
    "Driver",
    "SeleniumDriver",
    "attr",
    "check",
    "choose",
    "clear",
    "click",
    "fill_in",
    "has_content",
    "has_value",
    "is_checked",
    "selected",
    "text",
    "uncheck",
]
