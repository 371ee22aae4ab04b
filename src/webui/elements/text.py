from typing import Optional

from .base import BaseElement
from .base import ClickableMixin
from .base import mocked_if_tbd
from ..locator import MOCKED_STRING_VALUE


class Text(BaseElement):
    """An element that can represent anything that can be read from the webpage as a text
    content of a tag, usually a ``<div>``, ``<span>`` or ``<p>``.

    Args:
        locator: Locator of the object on the page.
    """

    @property
    @mocked_if_tbd(result=MOCKED_STRING_VALUE)
    def text(self) -> str:
        return self.browser.text(self)

    def read(self) -> str:
        return self.text


class Label(Text, ClickableMixin):
    """A ``<label>``. Clicking it has the same effect as clicking its associated control."""

    @property
    def for_id(self) -> Optional[str]:
        """Id of the control the label is associated with, if any."""
        return self.browser.get_attribute("for", self)


class TextLink(Text, ClickableMixin):
    """A hypertext link, ``<a href="...">``."""

    @property
    @mocked_if_tbd(result=MOCKED_STRING_VALUE)
    def href(self) -> Optional[str]:
        return self.browser.get_attribute("href", self)
