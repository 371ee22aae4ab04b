from .base import BaseElement
from .base import ClickableMixin
from .base import mocked_if_tbd
from ..locator import MOCKED_STRING_VALUE
from ..xpath import normalize_space


class Button(BaseElement, ClickableMixin):
    """A button, ``<button>`` or ``<input type="button|submit|reset">``.

    Args:
        locator: Locator of the button on the page.
    """

    @property
    @mocked_if_tbd(result=MOCKED_STRING_VALUE)
    def text(self) -> str:
        """Caption of the button. Input buttons have none, their ``value`` is used instead."""
        text = self.browser.text(self)
        if not text:
            text = normalize_space(self.browser.get_attribute("value", self))
        return text

    def read(self) -> str:
        return self.text
