"""Driver contract and its Selenium implementation."""

from typing import Any, List, Protocol

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..types import Locator, Node, Query, Session

import logging
logger = logging.getLogger(__name__)


class Driver(Protocol):
    """
    What the finder and the actions need from a browser session.

    Every call is single-shot: no retries, and transport errors propagate to
    the caller. ``find_elements`` returns ``[]`` when nothing matches.
    """

    def find_elements(self, locator: Locator, query: Query) -> List[Node]: ...

    def click(self, node: Node) -> Any: ...

    def set_value(self, node: Node, value: str) -> Any: ...

    def clear(self, node: Node) -> Any: ...

    def text(self, node: Node) -> str: ...

    def attribute(self, node: Node, name: str) -> Any: ...

    def selected(self, node: Node) -> Any: ...


def get_by_selector(query: Query):
    return {
        'css': By.CSS_SELECTOR,
        'xpath': By.XPATH,
    }[query.kind]


class SeleniumDriver:
    """
    Driver backed by Selenium WebDriver sessions.

    Sessions carry their WebDriver in ``Session.handle``. Node ids are the
    W3C element references Selenium hands out, so a node can be rebuilt into
    a WebElement without another lookup.
    """

    @staticmethod
    def session_for(webdriver: WebDriver) -> Session:
        """Wrap an existing WebDriver as the root locator."""
        return Session(id=webdriver.session_id, handle=webdriver)

    def _search_context(self, locator: Locator):
        webdriver = locator.session.handle
        if locator.scope_id is None:
            return webdriver
        return WebElement(webdriver, locator.scope_id)

    def _element(self, node: Node) -> WebElement:
        return WebElement(node.session.handle, node.id)

    def find_elements(self, locator: Locator, query: Query) -> List[Node]:
        context = self._search_context(locator)
        elements = context.find_elements(get_by_selector(query), query.text)
        logger.debug(f"{query} matched {len(elements)} element(s)")
        return [Node(session=locator.session, id=el.id) for el in elements]

    def click(self, node: Node) -> None:
        self._element(node).click()

    def set_value(self, node: Node, value: str) -> None:
        el = self._element(node)
        el.clear()
        el.send_keys(value)

    def clear(self, node: Node) -> None:
        self._element(node).clear()

    def text(self, node: Node) -> str:
        return self._element(node).text

    def attribute(self, node: Node, name: str) -> Any:
        return self._element(node).get_attribute(name)

    def selected(self, node: Node) -> bool:
        return self._element(node).is_selected()


__all__ = [
    "Driver",
    "SeleniumDriver",
    "get_by_selector",
]
