from .base import BaseElement
from .base import mocked_if_tbd
from ..locator import MOCKED_STRING_VALUE
from ..log import logged
from ..xpath import quote


class BaseInput(BaseElement):
    """This represents the bare minimum to interact with bogo-standard form inputs.

    Args:
        name: If you want to look the input up by name, use this parameter, pass the name.
        id: If you want to look the input up by id, use this parameter, pass the id.
        locator: If you have specific locator, use it here.
        element: Playwright ``Locator`` of an input that was already found.
    """

    def __init__(self, parent, locator=None, name=None, id=None, element=None, logger=None):
        if sum(value is not None for value in (locator, name, id, element)) != 1:
            raise TypeError("You can only pass one of locator, name, id or element!")
        self.input_name = name
        self.input_id = id
        if name is not None:
            locator = f".//*[(self::input or self::textarea) and @name={quote(name)}]"
        elif id is not None:
            locator = f".//*[(self::input or self::textarea) and @id={quote(id)}]"
        BaseElement.__init__(self, parent, locator=locator, element=element, logger=logger)


class TextField(BaseInput):
    """A text field (text box), ``<input type="text">`` and its relatives or ``<textarea>``.

    The label of a text field is outside of it and should be handled separately.
    """

    @property
    @mocked_if_tbd(result=MOCKED_STRING_VALUE)
    def value(self) -> str:
        """Text currently in the field."""
        return self.browser.input_value(self)

    @property
    def text(self) -> str:
        return self.value

    def read(self) -> str:
        return self.value

    @logged()
    @mocked_if_tbd()
    def set_text(self, text: str, sensitive: bool = False) -> None:
        """Clears the field and types the text in, key by key."""
        self.browser.clear(self)
        self.browser.send_keys(text, self, sensitive)

    @mocked_if_tbd(result=False)
    def fill(self, value: str, sensitive: bool = False) -> bool:
        """Sets the text unless the field already holds it.

        Returns:
            Whether the value was changed.
        """
        if value == self.value:
            return False
        self.set_text(value, sensitive=sensitive)
        return True

    @logged()
    @mocked_if_tbd()
    def clear(self) -> bool:
        return self.browser.clear(self)

    @logged()
    @mocked_if_tbd()
    def submit(self) -> None:
        """Submits the form the field belongs to."""
        self.browser.submit(self)
