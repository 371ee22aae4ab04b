import logging

import pytest

from fakes import FakeElement
from webui.browser import Browser
from webui.elements import BaseInput
from webui.elements import Button
from webui.elements import CheckBox
from webui.elements import Label
from webui.elements import RadioButton
from webui.elements import Text
from webui.elements import TextField
from webui.elements import TextLink
from webui.exceptions import ElementOperationFailed
from webui.locator import MOCKED_STRING_VALUE
from webui.locator import SmartLocator
from webui.locator import TBD
from webui.page import BasePage


def by_name(name):
    """Key the page is queried with for inputs looked up by name."""
    return f'.//*[(self::input or self::textarea) and @name="{name}"]'


def by_id(id):
    return f'.//*[(self::input or self::textarea) and @id="{id}"]'


# === Text-like elements ===


def test_text(browser, page):
    page.add("#paragraph", FakeElement("p", text="  Some   text\n spread over lines  "))
    text = Text(browser, "#paragraph")
    assert text.text == "Some text spread over lines"
    assert text.read() == "Some text spread over lines"


def test_label(browser, page):
    label = FakeElement("label", text="Name", attributes={"for": "name-input"})
    page.add("#name-label", label)

    name_label = Label(browser, "#name-label")
    assert name_label.text == "Name"
    assert name_label.for_id == "name-input"
    name_label.click()
    assert label.actions == ["click"]


def test_text_link(browser, page):
    link = FakeElement("a", text="A   link", attributes={"href": "#anchor"})
    page.add("#link", link)

    text_link = TextLink(browser, "#link")
    assert text_link.text == "A link"
    assert text_link.href == "#anchor"
    text_link.click()
    assert link.actions == ["click"]


def test_button(browser, page):
    page.add("#click-button", FakeElement("button", text=" Click me "))
    assert Button(browser, "#click-button").text == "Click me"
    assert Button(browser, "#click-button").read() == "Click me"


def test_input_button_text(browser, page):
    """Input buttons have no text content, their value is their caption."""
    page.add(
        "#input-button",
        FakeElement("input", text="", value="  Input   Button ", attributes={"type": "button"}),
    )
    assert Button(browser, "#input-button").text == "Input Button"


# === Text fields ===


def test_base_input_lookup(browser):
    assert BaseInput(browser, name="q").locator == SmartLocator(xpath=by_name("q"))
    assert BaseInput(browser, id="notes").locator == SmartLocator(xpath=by_id("notes"))
    assert BaseInput(browser, "#q").locator == SmartLocator("#q")
    assert BaseInput(browser, name="q").input_name == "q"


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"name": "q", "id": "q"}, {"locator": "#q", "name": "q"}],
    ids=["none", "name-and-id", "locator-and-name"],
)
def test_base_input_requires_single_lookup(browser, kwargs):
    with pytest.raises(TypeError):
        BaseInput(browser, **kwargs)


def test_text_field(browser, page):
    field = FakeElement("input", value="initial")
    page.add(by_name("name"), field)
    text_field = TextField(browser, name="name")

    assert text_field.value == "initial"
    assert text_field.read() == "initial"

    text_field.set_text("Ann")
    assert text_field.text == "Ann"
    assert field.actions == ["clear", ("type", "Ann")]


def test_text_field_fill(browser, page):
    field = FakeElement("textarea", value="same")
    page.add(by_id("notes"), field)
    text_field = TextField(browser, id="notes")

    assert not text_field.fill("same")
    assert field.actions == []
    assert text_field.fill("other")
    assert text_field.value == "other"


def test_text_field_clear_and_submit(browser, page):
    field = FakeElement("input", value="x")
    page.add("#field", field)
    text_field = TextField(browser, "#field")

    assert text_field.clear()
    assert text_field.value == ""
    text_field.submit()
    assert field.actions == ["clear", "submit"]


def test_set_text_sensitive(page, settings, caplog):
    caplog.set_level(logging.DEBUG, logger="webui.test")
    browser = Browser(page, settings=settings, logger=logging.getLogger("webui.test"))
    page.add("#password", FakeElement("input"))

    TextField(browser, "#password").set_text("hunter2", sensitive=True)

    assert "hunter2" not in caplog.text
    assert "send_keys '*******'" in caplog.text


# === Check boxes and radio buttons ===


@pytest.fixture
def checkbox(page):
    element = FakeElement("input", attributes={"type": "checkbox"})
    page.add(by_name("agree"), element)
    return element


def test_checkbox(browser, checkbox):
    agree = CheckBox(browser, name="agree")
    assert not agree.selected

    assert agree.check()
    assert agree.selected
    assert agree.read()
    assert not agree.check()

    assert agree.uncheck()
    assert not agree.selected
    assert checkbox.actions == ["check", "uncheck"]


@pytest.mark.parametrize("value", [True, "yes", 1])
def test_checkbox_fill(browser, checkbox, value):
    agree = CheckBox(browser, name="agree")
    assert agree.fill(value)
    assert not agree.fill(value)
    assert agree.fill(False)


def test_checkbox_click(browser, checkbox):
    agree = CheckBox(browser, name="agree")
    agree.click()
    assert agree.selected


def test_checkbox_failed(browser, checkbox):
    checkbox.stuck = True
    with pytest.raises(ElementOperationFailed):
        CheckBox(browser, name="agree").check()


def test_radio_button(browser, page):
    red = FakeElement("input", checked=True, attributes={"type": "radio", "value": "red"})
    blue = FakeElement("input", attributes={"type": "radio", "value": "blue"})
    page.add("#color-red", red)
    page.add("#color-blue", blue)

    blue_radio = RadioButton(browser, "#color-blue")
    assert not blue_radio.selected
    blue_radio.select()
    assert blue_radio.read()

    blue.stuck = True
    blue.checked = False
    with pytest.raises(ElementOperationFailed):
        blue_radio.select()


# === Elements declared on a page ===


def test_form_page(browser, page):
    page.add("#form", FakeElement("form"))
    page.add(by_name("name"), FakeElement("input", value=""))
    checkbox = FakeElement("input", attributes={"type": "checkbox"})
    page.add(by_name("agree"), checkbox)

    class FormPage(BasePage):
        KEY_LOCATOR = "#form"

        full_name = TextField(name="name")
        agree = CheckBox(name="agree")

    form = FormPage(browser).wait_until_available()
    form.full_name.fill("Ann")
    form.agree.check()

    assert form.full_name.read() == "Ann"
    assert checkbox.checked


# === TBD placeholders ===


def test_tbd_elements(browser, page, caplog):
    caplog.set_level(logging.WARNING)

    assert Text(browser, TBD).text == MOCKED_STRING_VALUE
    assert TextLink(browser, TBD).href == MOCKED_STRING_VALUE
    assert Button(browser, TBD).read() == MOCKED_STRING_VALUE

    field = TextField(browser, TBD)
    assert field.value == MOCKED_STRING_VALUE
    assert field.set_text("x") is None
    assert field.fill("x") is False
    assert field.clear() is None

    agree = CheckBox(browser, TBD)
    assert agree.selected is False
    assert agree.check() is None
    assert RadioButton(browser, TBD).select() is None

    assert "!!MOCKED ACTION: set_text('x')!!" in caplog.text
    assert "!!MOCKED ACTION: check()!!" in caplog.text
    assert not page.root.queries
