"""Tests for the node action surface."""

import pytest

from node_finder import (
    ElementNotFound,
    Finder,
    FinderConfig,
    NoDriverError,
    attr,
    check,
    choose,
    clear,
    click,
    fill_in,
    get_context,
    has_content,
    has_value,
    is_checked,
    selected,
    text,
    uncheck,
    xpath,
)
from node_finder.form_xpath import checkbox, fillable_field, radio_button
from node_finder.utils.retry import RetryEngine

from _utils import FakeClock, FakeDriver, make_nodes, make_session


def make_finder(driver, max_wait_time=200):
    clock = FakeClock()
    engine = RetryEngine(max_wait_time, clock=clock, sleep=clock.sleep)
    return Finder(driver, FinderConfig(max_wait_time=max_wait_time), retry=engine)


class TestFillIn:

    def setup_method(self):
        self.session = make_session()
        self.field, = make_nodes(self.session, "username-field")

    def test_scenario_d_fill_in_by_label(self):
        driver = FakeDriver({fillable_field("Username"): [self.field]})
        finder = make_finder(driver)

        result = fill_in(self.session, "Username", value="alice", finder=finder)

        assert result is self.session
        _, locator, query = driver.calls_named("find_elements")[0]
        assert locator is self.session
        assert query.is_xpath
        assert query.text == fillable_field("Username")
        assert driver.calls_named("set_value") == [("set_value", self.field, "alice")]

    def test_fill_in_node_directly(self):
        driver = FakeDriver()
        finder = make_finder(driver)

        assert fill_in(self.field, value="bob", finder=finder) is self.session
        assert driver.calls_named("find_elements") == []
        assert driver.calls_named("set_value") == [("set_value", self.field, "bob")]

    def test_fill_in_requires_string_value(self):
        finder = make_finder(FakeDriver())
        with pytest.raises(TypeError):
            fill_in(self.field, value=42, finder=finder)

    def test_fill_in_missing_field_times_out(self):
        driver = FakeDriver()
        finder = make_finder(driver)

        with pytest.raises(ElementNotFound):
            fill_in(self.session, "Nope", value="x", finder=finder)
        assert driver.calls_named("set_value") == []

    def test_session_without_query_rejected(self):
        finder = make_finder(FakeDriver())
        with pytest.raises(TypeError):
            fill_in(self.session, value="x", finder=finder)


class TestClickAndChoose:

    def setup_method(self):
        self.session = make_session()
        self.button, self.radio = make_nodes(self.session, "button", "radio")

    def test_click_by_css_query(self):
        driver = FakeDriver({"#submit": [self.button]})
        finder = make_finder(driver)

        assert click(self.session, "#submit", finder=finder) is self.session
        assert driver.calls_named("click") == [("click", self.button)]

    def test_click_node(self):
        driver = FakeDriver()
        click(self.button, finder=make_finder(driver))
        assert driver.calls == [("click", self.button)]

    def test_click_query_inside_node_scope(self):
        child, = make_nodes(self.session, "child")
        driver = FakeDriver({"a": [child]})

        click(self.button, "a", finder=make_finder(driver))

        _, locator, _ = driver.calls[0]
        assert locator is self.button
        assert driver.calls_named("click") == [("click", child)]

    def test_choose_radio_button(self):
        driver = FakeDriver({radio_button("Blue"): [self.radio]})

        assert choose(self.session, "Blue", finder=make_finder(driver)) is self.session
        assert driver.calls_named("click") == [("click", self.radio)]

    def test_clear_field(self):
        field, = make_nodes(self.session, "field")
        driver = FakeDriver({fillable_field("Email"): [field]})

        clear(self.session, "Email", finder=make_finder(driver))
        assert driver.calls_named("clear") == [("clear", field)]


class TestFormQueryTypes:

    def setup_method(self):
        self.session = make_session()
        self.driver = FakeDriver()
        self.finder = make_finder(self.driver)

    @pytest.mark.parametrize("action", [fill_in, clear, choose, check, uncheck])
    @pytest.mark.parametrize("query", [xpath("//input"), ("xpath", "//input"), 7])
    def test_non_string_form_query_rejected(self, action, query):
        kwargs = {"value": "x"} if action is fill_in else {}

        with pytest.raises(TypeError, match="label string"):
            action(self.session, query, finder=self.finder, **kwargs)
        assert self.driver.calls == []

    def test_click_still_accepts_query_objects(self):
        button, = make_nodes(self.session, "b")
        self.driver.results["//button"] = [button]

        click(self.session, xpath("//button"), finder=self.finder)
        assert self.driver.calls_named("click") == [("click", button)]


class TestCheckboxes:

    def setup_method(self):
        self.session = make_session()
        self.box, = make_nodes(self.session, "terms")

    def test_check_twice_clicks_once(self):
        driver = FakeDriver(selected={"terms": False})
        finder = make_finder(driver)

        assert check(self.box, finder=finder) is self.box
        check(self.box, finder=finder)

        assert driver.calls_named("click") == [("click", self.box)]
        assert is_checked(self.box, finder=finder)

    def test_uncheck_twice_clicks_once(self):
        driver = FakeDriver(selected={"terms": True})
        finder = make_finder(driver)

        assert uncheck(self.box, finder=finder) is self.box
        uncheck(self.box, finder=finder)

        assert driver.calls_named("click") == [("click", self.box)]
        assert not is_checked(self.box, finder=finder)

    def test_check_already_checked_is_noop(self):
        driver = FakeDriver(selected={"terms": True})
        check(self.box, finder=make_finder(driver))
        assert driver.calls_named("click") == []

    def test_check_by_label_returns_session(self):
        driver = FakeDriver({checkbox("I agree"): [self.box]}, selected={"terms": False})

        assert check(self.session, "I agree", finder=make_finder(driver)) is self.session
        assert driver.calls_named("click") == [("click", self.box)]

    def test_uncheck_by_label(self):
        driver = FakeDriver({checkbox("I agree"): [self.box]}, selected={"terms": True})

        assert uncheck(self.session, "I agree", finder=make_finder(driver)) is self.session
        assert driver.calls_named("click") == [("click", self.box)]


class TestReaders:

    def setup_method(self):
        self.session = make_session()
        self.node, = make_nodes(self.session, "n")
        self.driver = FakeDriver(
            texts={"n": "Hello"},
            attributes={("n", "value"): "42", ("n", "href"): "/home"},
            selected={"n": "yes"},
        )
        self.finder = make_finder(self.driver)

    def test_passthroughs(self):
        assert text(self.node, finder=self.finder) == "Hello"
        assert attr(self.node, "href", finder=self.finder) == "/home"
        assert selected(self.node, finder=self.finder) == "yes"

    def test_has_value(self):
        assert has_value(self.node, "42", finder=self.finder)
        assert not has_value(self.node, 42, finder=self.finder)

    def test_has_content(self):
        assert has_content(self.node, "Hello", finder=self.finder)
        assert not has_content(self.node, "Hello world", finder=self.finder)

    def test_checked_requires_literal_true(self):
        # truthy but not True
        assert not is_checked(self.node, finder=self.finder)


class TestContextFinder:

    def test_actions_use_context_driver(self):
        session = make_session()
        node, = make_nodes(session, "n")
        driver = FakeDriver({"#go": [node]})
        get_context().driver = driver

        assert click(session, "#go") is session
        assert driver.calls_named("click") == [("click", node)]

    def test_missing_driver_raises(self):
        with pytest.raises(NoDriverError):
            text(make_nodes(make_session(), "n")[0])
