import logging
import time

import pytest

from fakes import appearing_after
from fakes import FakeElement
from webui.browser import Browser
from webui.conditions import element_to_be_clickable
from webui.conditions import invisibility_of_element_located
from webui.conditions import presence_of_element_located
from webui.conditions import visibility_of_element_located
from webui.elements import BaseElement
from webui.elements import Button
from webui.elements import ContainerElement
from webui.elements import ElementDescriptor
from webui.elements import Text
from webui.exceptions import LocatorNotImplemented
from webui.exceptions import NoSuchElementException
from webui.exceptions import TimeoutException
from webui.locator import MOCKED_STRING_VALUE
from webui.locator import SmartLocator
from webui.locator import TBD
from webui.page import BasePage
from webui.types import BoundRef
from webui.types import LocatorRef


# ======================== CONSTRUCTION TESTS ========================


def test_element_correctly_collapses_to_descriptor(browser):
    assert isinstance(Text("#foo"), ElementDescriptor)
    assert isinstance(Text(locator="#foo"), ElementDescriptor)
    assert isinstance(Text(browser, "#foo"), Text)


def test_element_browser(browser):
    text = Text(browser, "#foo")
    assert text.browser is browser
    assert text.parent is browser
    assert text.locatable_parent is None


def test_locator_or_element_required(browser):
    with pytest.raises(TypeError):
        BaseElement(browser)
    with pytest.raises(TypeError):
        BaseElement(browser, "#foo", element=FakeElement())


def test_element_refs(browser):
    by_locator = Text(browser, "#foo")
    assert by_locator.ref == LocatorRef(SmartLocator("#foo"))
    assert not by_locator.is_bound
    assert by_locator.locator == SmartLocator("#foo")
    assert by_locator.__locator__() == SmartLocator("#foo")

    node = FakeElement(name="node")
    bound = Text(browser, element=node)
    assert bound.ref == BoundRef(node)
    assert bound.is_bound
    with pytest.raises(LocatorNotImplemented):
        bound.locator


def test_element_name(browser):
    assert Text(browser, "#foo").name == "Text(SmartLocator(by='css', locator='#foo'))"
    assert repr(Button(browser, element=FakeElement(name="node"))) == "Button(<FakeElement node>)"


# ======================== DESCRIPTOR TESTS ========================


def test_descriptor_on_class():
    class MyClass:
        def __init__(self, parent, logger=None):
            self.parent = parent
            self.logger = logger

    class HostClass:
        logger = logging.getLogger("webui.test")

        def __init__(self):
            self._element_cache = {}

        desc = ElementDescriptor(MyClass)

    assert isinstance(HostClass.desc, ElementDescriptor)
    assert HostClass.desc.name == "desc"
    hc = HostClass()
    obj = hc.desc
    assert isinstance(obj, MyClass)
    assert hc.desc is obj
    assert obj.parent is hc
    assert obj.logger.element_path == "desc"
    assert hc.desc.parent_descriptor is HostClass.desc


def test_descriptor_instances_are_per_object(browser):
    class TestPage(BasePage):
        title = Text("#title")

    first, second = TestPage(browser), TestPage(browser)
    assert first.title is first.title
    assert first.title is not second.title
    assert first.title.parent is first
    assert first.title.logger.element_path == "TestPage/title"
    assert repr(TestPage.title) == "Text('#title')"


def test_nested_elements(browser, page):
    inner = FakeElement("span", text="inside")
    container = FakeElement("div").add("span", inner)
    page.add("#container", container)
    page.add("span", FakeElement("span", text="outside"))

    class Box(ContainerElement):
        label = Text("span")

    box = Box(browser, "#container")
    assert box.label.locatable_parent is box
    assert box.label.text == "inside"
    assert box.label.logger.element_path == "Box/label"


def test_nested_element_of_missing_container(browser):
    class Box(ContainerElement):
        label = Text("span")

    assert not Box(browser, "#nowhere").label.exists(timeout=0)


# ======================== RESOLVE / EXISTS TESTS ========================


def test_resolve(browser, page):
    node = FakeElement(name="node")
    page.add("#foo", node)
    assert Text(browser, "#foo").resolve() is node


def test_resolve_bound_element_does_not_look_up(browser):
    node = FakeElement(visible=False, name="node")
    text = Text(browser, element=node)
    assert text.resolve() is node
    assert text.exists(timeout=0)


def test_resolve_waits_for_element(browser, page):
    node = FakeElement(name="late")
    lookup = appearing_after(3, node)
    page.root.queries["#late"] = lookup

    assert Text(browser, "#late").resolve(timeout=5) is node
    assert lookup.state["calls"] == 4


def test_resolve_not_found(browser, settings):
    text = Text(browser, "#missing")
    with pytest.raises(NoSuchElementException) as e:
        text.resolve()
    assert e.value.description == text.name
    assert e.value.timeout == settings.element_timeout
    assert text.name in str(e.value)


def test_resolve_visibility_policy(browser, page):
    hidden = FakeElement(visible=False)
    page.add("#hidden", hidden)
    text = Text(browser, "#hidden")

    with pytest.raises(NoSuchElementException, match="to become visible"):
        text.resolve(timeout=0)

    text.check_visibility = False
    assert text.resolve(timeout=0) is hidden


def test_exists_zero_timeout_does_not_block(browser, page):
    lookup = appearing_after(1000)
    page.root.queries["#never"] = lookup
    start = time.monotonic()

    assert not Text(browser, "#never").exists(timeout=0)

    assert time.monotonic() - start < 0.2
    assert lookup.state["calls"] == 1


def test_exists(browser, page):
    page.add("#here", FakeElement())
    assert Text(browser, "#here").exists()
    assert not Text(browser, "#gone").exists(timeout=0.05)


def test_is_visible(browser, page):
    page.add("#shown", FakeElement())
    page.add("#hidden", FakeElement(visible=False))

    assert Text(browser, "#shown").is_visible()
    assert Text(browser, "#shown").is_displayed
    assert not Text(browser, "#hidden").is_visible(timeout=0.05)
    assert not Text(browser, "#hidden").is_displayed
    assert not Text(browser, "#gone").is_displayed


def test_is_visible_bound(browser):
    node = FakeElement()
    text = Text(browser, element=node)
    assert text.is_visible()

    node.shown = False
    assert not text.is_visible()

    node.detached = True
    assert not text.is_visible()


# ======================== WAIT TESTS ========================


def test_wait_until_visible_blocks_at_most_timeout(browser, settings):
    text = Text(browser, "#never")
    start = time.monotonic()
    with pytest.raises(TimeoutException) as e:
        text.wait_until_visible(timeout=0.2)
    elapsed = time.monotonic() - start

    assert 0.2 <= elapsed < 0.2 + settings.poll_interval + 0.3
    assert str(e.value) == (
        f"Timed out after 0.2 seconds in waiting for {text.name} to become visible."
    )
    assert e.value.timeout == 0.2


def test_wait_until_present(browser, page):
    hidden = FakeElement(visible=False)
    page.add("#hidden", hidden)
    text = Text(browser, "#hidden")

    assert text.wait_until_present(timeout=0) is hidden
    with pytest.raises(TimeoutException):
        text.wait_until_visible(timeout=0)


def test_wait_until_exists_follows_policy(browser, page):
    hidden = FakeElement(visible=False)
    page.add("#hidden", hidden)
    text = Text(browser, "#hidden")

    with pytest.raises(TimeoutException):
        text.wait_until_exists(timeout=0)
    text.check_visibility = False
    assert text.wait_until_exists(timeout=0) is hidden


def test_wait_until_not_visible(browser, page):
    node = FakeElement()
    page.add("#node", node)
    text = Text(browser, "#node")

    with pytest.raises(TimeoutException, match="to become invisible"):
        text.wait_until_not_visible(timeout=0)

    node.shown = False
    assert text.wait_until_not_visible(timeout=0)
    assert Text(browser, "#gone").wait_until_not_visible(timeout=0)


def test_wait_until_clickable(browser, page):
    node = FakeElement("button", enabled=False)
    page.add("#button", node)
    button = Button(browser, "#button")

    with pytest.raises(TimeoutException, match="to become clickable"):
        button.wait_until_clickable(timeout=0)

    node.enabled = True
    assert button.wait_until_clickable(timeout=0) is node


def test_waits_are_logged(page, settings, caplog):
    caplog.set_level(logging.DEBUG, logger="webui.test")
    browser = Browser(page, settings=settings, logger=logging.getLogger("webui.test"))
    page.add("#node", FakeElement())

    Text(browser, "#node").wait_until_visible()

    messages = [record.getMessage() for record in caplog.records]
    assert "[Text]: wait_until_visible started" in messages
    assert any(m.startswith("[Text]: wait_until_visible (elapsed ") for m in messages)


# ======================== READING & ACTION TESTS ========================


def test_get_attribute_and_tag(browser, page):
    page.add("#link", FakeElement("a", attributes={"href": "/home"}))
    text = Text(browser, "#link")
    assert text.get_attribute("href") == "/home"
    assert text.tag == "a"


def test_click(browser, page):
    node = FakeElement("button")
    page.add("#button", node)
    Button(browser, "#button").click()
    assert node.actions == ["click"]


def test_click_hidden_element(browser, page):
    page.add("#button", FakeElement("button", visible=False))
    with pytest.raises(NoSuchElementException):
        Button(browser, "#button").click()


def test_container_find_element(browser, page):
    cell = FakeElement("td")
    page.add("#container", FakeElement("div").add("./td", cell))
    container = ContainerElement(browser, "#container")

    assert container.find_element("./td") is cell
    assert container.find_elements("./td") == [cell]
    assert container.find_elements("./th") == []
    with pytest.raises(NoSuchElementException, match="in ContainerElement"):
        container.find_element("./th")


# ======================== TBD TESTS ========================


def test_tbd_element(browser, caplog):
    caplog.set_level(logging.WARNING)
    button = Button(browser, TBD)

    assert button.is_tbd
    assert button.click() is None
    assert button.text == MOCKED_STRING_VALUE
    assert not button.exists(timeout=0)
    assert "!!MOCKED ACTION: click()!!" in caplog.text


# ======================== CONDITION TESTS ========================


def test_condition_names():
    assert presence_of_element_located("#a").__name__ == "presence of '#a'"
    assert visibility_of_element_located("#a").__name__ == "visibility of '#a'"
    assert invisibility_of_element_located("#a").__name__ == "invisibility of '#a'"
    assert element_to_be_clickable("#a").__name__ == "clickability of '#a'"


def test_conditions(browser, page):
    shown = FakeElement(name="shown")
    hidden = FakeElement(visible=False, name="hidden")
    page.add("#shown", shown)
    page.add("#hidden", hidden)

    assert presence_of_element_located("#hidden")(browser) is hidden
    assert presence_of_element_located("#gone")(browser) is False
    assert visibility_of_element_located("#shown")(browser) is shown
    assert visibility_of_element_located("#hidden")(browser) is False
    assert invisibility_of_element_located("#hidden")(browser) is True
    assert invisibility_of_element_located("#gone")(browser) is True
    assert invisibility_of_element_located("#shown")(browser) is False
    assert element_to_be_clickable("#shown")(browser) is shown


def test_conditions_on_detached_element(browser, page):
    detached = FakeElement()
    detached.detached = True
    page.add("#detached", detached)

    assert visibility_of_element_located("#detached")(browser) is False
    assert invisibility_of_element_located("#detached")(browser) is False
