"""
Element interaction.

Every action accepts either a Node, or a locator plus a query that is first
resolved to exactly one node through the finder (and therefore waits the way
``Finder.find`` does). Driver calls themselves are made once, without retry.
"""

from typing import Any, Callable, Optional

from ..context import get_context
from ..finder import Finder
from ..types import Locator, Node, Session, xpath
from ..form_xpath import checkbox, fillable_field, radio_button

import logging
logger = logging.getLogger(__name__)


def _finder(finder: Optional[Finder]) -> Finder:
    return finder if finder is not None else get_context().get_finder()


def _resolve(locator: Locator, query, finder: Finder, to_xpath: Optional[Callable[[str], str]] = None) -> Node:
    if query is None:
        if locator.scope_id is None:
            raise TypeError("A query is required when acting on a Session")
        return locator
    if to_xpath is not None:
        # form controls are looked up by id, name or label text only
        if not isinstance(query, str):
            raise TypeError(f"Expected an id, name or label string, got {type(query).__name__}")
        query = xpath(to_xpath(query))
    return finder.find(locator, query)


def fill_in(locator: Locator, query: Optional[str] = None, *, value: str, finder: Optional[Finder] = None) -> Session:
    """
    Fill a text field. Fields are looked up by id, name, placeholder or label
    text; the node can also be passed in directly.
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be a string, got {type(value).__name__}")
    finder = _finder(finder)
    node = _resolve(locator, query, finder, fillable_field)
    finder.driver.set_value(node, value)
    return node.session


def clear(locator: Locator, query: Optional[str] = None, *, finder: Optional[Finder] = None) -> Session:
    """Clear a text field, looked up like ``fill_in``."""
    finder = _finder(finder)
    node = _resolve(locator, query, finder, fillable_field)
    finder.driver.clear(node)
    return node.session


def click(locator: Locator, query=None, *, finder: Optional[Finder] = None) -> Session:
    """Click the single node matching ``query`` (any CSS or XPath query), or the node itself."""
    finder = _finder(finder)
    node = _resolve(locator, query, finder)
    finder.driver.click(node)
    return node.session


def choose(locator: Locator, query: Optional[str] = None, *, finder: Optional[Finder] = None) -> Session:
    """Choose a radio button by id, name or label."""
    finder = _finder(finder)
    node = _resolve(locator, query, finder, radio_button)
    finder.driver.click(node)
    return node.session


def check(locator: Locator, query: Optional[str] = None, *, finder: Optional[Finder] = None):
    """
    Mark a checkbox as checked. Clicks only when it is currently unchecked.

    Returns the node when given a node, the enclosing session otherwise.
    """
    finder = _finder(finder)
    node = _resolve(locator, query, finder, checkbox)
    if not is_checked(node, finder=finder):
        finder.driver.click(node)
    return node if query is None else node.session


def uncheck(locator: Locator, query: Optional[str] = None, *, finder: Optional[Finder] = None):
    """Uncheck a checkbox. Clicks only when it is currently checked."""
    finder = _finder(finder)
    node = _resolve(locator, query, finder, checkbox)
    if is_checked(node, finder=finder):
        finder.driver.click(node)
    return node if query is None else node.session


def text(node: Node, *, finder: Optional[Finder] = None) -> str:
    return _finder(finder).driver.text(node)


def attr(node: Node, name: str, *, finder: Optional[Finder] = None) -> Any:
    return _finder(finder).driver.attribute(node, name)


def selected(node: Node, *, finder: Optional[Finder] = None) -> Any:
    """Selected state as reported by the driver (checkboxes and radio buttons)."""
    return _finder(finder).driver.selected(node)


def has_value(node: Node, value: Any, *, finder: Optional[Finder] = None) -> bool:
    return attr(node, "value", finder=finder) == value


def has_content(node: Node, content: str, *, finder: Optional[Finder] = None) -> bool:
    return text(node, finder=finder) == content


def is_checked(node: Node, *, finder: Optional[Finder] = None) -> bool:
    return selected(node, finder=finder) is True


__all__ = [
    'fill_in',
    'clear',
    'click',
    'choose',
    'check',
    'uncheck',
    'text',
    'attr',
    'selected',
    'has_value',
    'has_content',
    'is_checked',
]
