from typing import Union

from .base import ClickableMixin
from .base import mocked_if_tbd
from .input import BaseInput
from ..exceptions import ElementOperationFailed
from ..log import logged


class CheckBox(BaseInput, ClickableMixin):
    """A form check box, ``<input type="checkbox">``.

    Its label is a separate element, see :py:class:`webui.elements.Label`.

    Args:
        name: ``name`` attribute to look the check box up by
        id: ``id`` attribute to look the check box up by
        locator: Any other locator
    """

    @property
    @mocked_if_tbd(result=False)
    def selected(self) -> bool:
        return self.browser.is_checked(self)

    def read(self) -> bool:
        return self.selected

    @logged()
    @mocked_if_tbd()
    def check(self) -> bool:
        """Checks the box unless it is checked already."""
        return self.fill(True)

    @logged()
    @mocked_if_tbd()
    def uncheck(self) -> bool:
        """Unchecks the box unless it is unchecked already."""
        return self.fill(False)

    def fill(self, value: Union[bool, str]) -> bool:
        """Brings the box to the truth value of ``value``.

        Returns:
            Whether the box had to change

        Raises:
            :py:class:`webui.exceptions.ElementOperationFailed` when the box does not change
        """
        wanted = bool(value)
        if self.selected == wanted:
            return False
        (self.browser.check if wanted else self.browser.uncheck)(self)
        if self.selected != wanted:
            state = "checked" if wanted else "unchecked"
            raise ElementOperationFailed(f"{self.name} did not become {state}")
        return True


class RadioButton(BaseInput):
    """A radio button, ``<input type="radio">``."""

    @property
    @mocked_if_tbd(result=False)
    def selected(self) -> bool:
        return self.browser.is_checked(self)

    def read(self) -> bool:
        return self.selected

    @logged()
    @mocked_if_tbd()
    def select(self) -> None:
        """Selects the radio button (a no-op when it is selected already)."""
        self.browser.check(self)
        if not self.selected:
            raise ElementOperationFailed(f"Failed to select {self.name}.")
