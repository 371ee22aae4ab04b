"""
Element factory
===============

Creates elements of a given *flavor*. Code creating its elements through a factory instead of
instantiating the classes directly can switch to different element implementations (of another
UI toolkit, say) by subclassing the factory and replacing the class attributes.
"""

from enum import Enum
from typing import Union

from .elements import Button
from .elements import CheckBox
from .elements import Label
from .elements import RadioButton
from .elements import Table
from .elements import Text
from .elements import TextField
from .elements import TextLink
from .elements import XPathTable
from .elements.base import is_element_parent
from .exceptions import InvalidArgument
from .types import LocatorAlias


class ElementFlavor(Enum):
    BASIC_HTML = "basic_html"


class ElementFactory:
    """Creates elements bound to ``parent``.

    Args:
        parent: Browser, page or container element the elements belong to
        flavor: Flavor of the created elements
    """

    button_class = Button
    checkbox_class = CheckBox
    label_class = Label
    radio_button_class = RadioButton
    table_class = Table
    xpath_table_class = XPathTable
    text_class = Text
    text_field_class = TextField
    text_link_class = TextLink

    def __init__(self, parent, flavor: Union[ElementFlavor, str] = ElementFlavor.BASIC_HTML):
        if not is_element_parent(parent):
            raise InvalidArgument(f"{parent!r} cannot be a parent of elements")
        try:
            self.flavor = ElementFlavor(flavor)
        except ValueError:
            raise InvalidArgument(f"Unknown element flavor {flavor!r}") from None
        self.parent = parent

    def __repr__(self):
        return f"{type(self).__name__}({self.parent!r}, flavor={self.flavor.value!r})"

    def button(self, locator: LocatorAlias) -> Button:
        return self.button_class(self.parent, locator)

    def checkbox(self, locator: LocatorAlias) -> CheckBox:
        return self.checkbox_class(self.parent, locator)

    def label(self, locator: LocatorAlias) -> Label:
        return self.label_class(self.parent, locator)

    def radio_button(self, locator: LocatorAlias) -> RadioButton:
        return self.radio_button_class(self.parent, locator)

    def table(self, locator: LocatorAlias) -> Table:
        return self.table_class(self.parent, locator)

    def xpath_table(self, locator: LocatorAlias) -> XPathTable:
        return self.xpath_table_class(self.parent, locator)

    def text(self, locator: LocatorAlias) -> Text:
        return self.text_class(self.parent, locator)

    def text_field(self, locator: LocatorAlias) -> TextField:
        return self.text_field_class(self.parent, locator)

    def text_link(self, locator: LocatorAlias) -> TextLink:
        return self.text_link_class(self.parent, locator)
