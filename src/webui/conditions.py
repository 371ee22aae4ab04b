"""
Expected conditions
===================

Callables consumed by :py:meth:`webui.browser.Browser.poll_until`. Each factory returns a
function of the browser which gives back something truthy (usually the found element) once the
condition holds and ``False`` while it does not, so the poll keeps going.

.. code-block:: python

    button = browser.poll_until(visibility_of_element_located("#submit"), timeout=5)
"""

from typing import Any
from typing import Callable
from typing import Optional
from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError

from .exceptions import NoSuchElementException
from .types import ElementParent
from .types import LocatorAlias

if TYPE_CHECKING:
    from .browser import Browser

Condition = Callable[["Browser"], Any]


def _named(predicate: Condition, name: str) -> Condition:
    predicate.__name__ = name
    return predicate


def presence_of_element_located(
    locator: LocatorAlias, parent: Optional[ElementParent] = None
) -> Condition:
    """Element matching ``locator`` is attached to the document, visible or not."""

    def predicate(browser: "Browser"):
        try:
            return browser.element(locator, parent=parent)
        except (NoSuchElementException, PlaywrightError):
            return False

    return _named(predicate, f"presence of {locator!r}")


def visibility_of_element_located(
    locator: LocatorAlias, parent: Optional[ElementParent] = None
) -> Condition:
    """Element matching ``locator`` is present and visible."""

    def predicate(browser: "Browser"):
        try:
            return browser.element(locator, parent=parent, check_visibility=True)
        except (NoSuchElementException, PlaywrightError):
            return False

    return _named(predicate, f"visibility of {locator!r}")


def invisibility_of_element_located(
    locator: LocatorAlias, parent: Optional[ElementParent] = None
) -> Condition:
    """No element matching ``locator`` is visible (missing elements count as invisible)."""

    def predicate(browser: "Browser"):
        try:
            return not browser.elements(locator, parent=parent, check_visibility=True)
        except NoSuchElementException:
            return True
        except PlaywrightError:
            return False

    return _named(predicate, f"invisibility of {locator!r}")


def element_to_be_clickable(
    locator: LocatorAlias, parent: Optional[ElementParent] = None
) -> Condition:
    """Element matching ``locator`` is visible and enabled."""
    visible = visibility_of_element_located(locator, parent=parent)

    def predicate(browser: "Browser"):
        element = visible(browser)
        if not element:
            return False
        try:
            return element if element.is_enabled() else False
        except PlaywrightError:
            return False

    return _named(predicate, f"clickability of {locator!r}")
