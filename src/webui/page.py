"""
Pages
=====

A page object stands for a whole screen of the application. It knows a *key locator*, a locator
of some element only that screen shows, and is considered available once the element is
visible. Elements used on the page are declared on its class:

.. code-block:: python

    class SearchPage(BasePage):
        KEY_LOCATOR = "#search-form"

        query = TextField(name="q")
        search = Button(".//button[normalize-space(.)='Search']")

    page = SearchPage(browser).wait_until_available()
    page.query.set_text("python")
    page.search.click()
"""

from typing import Dict
from typing import Optional

from .browser import Browser
from .conditions import visibility_of_element_located
from .exceptions import LocatorNotImplemented
from .exceptions import TimeoutException
from .locator import SmartLocator
from .log import call_unlogged
from .log import create_child_logger
from .log import create_element_logger
from .log import logged
from .log import PrependNameAdapter
from .types import LocatorAlias
from .types import Timeout


class BasePage:
    """Base class of page objects.

    Args:
        browser: The browser (or anything with a ``browser`` attribute) the page is shown in
        key_locator: Locator of the key element, ``KEY_LOCATOR`` of the class by default
        logger: Optional logger, the browser's one is used by default
    """

    #: Default key locator of the page class
    KEY_LOCATOR: Optional[LocatorAlias] = None

    def __init__(self, browser, key_locator: Optional[LocatorAlias] = None, logger=None) -> None:
        self.parent = browser
        key = key_locator if key_locator is not None else self.KEY_LOCATOR
        self.key_locator: Optional[SmartLocator] = SmartLocator(key) if key is not None else None
        logger = logger or self.browser.logger
        if isinstance(logger, PrependNameAdapter):
            self.logger = create_child_logger(logger, self.name)
        else:
            self.logger = create_element_logger(self.name, logger)
        self._element_cache: Dict = {}

    @property
    def browser(self) -> Browser:
        return self.parent.browser

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self):
        return f"{self.name}(key_locator={self.key_locator!r})"

    def set_key_element(self, element) -> "BasePage":
        """Uses the locator of ``element`` as the key locator of the page.

        Raises:
            :py:class:`webui.exceptions.LocatorNotImplemented` if the element is bound to a node
        """
        self.key_locator = element.locator
        return self

    def _required_key_locator(self) -> SmartLocator:
        if self.key_locator is None:
            raise LocatorNotImplemented(
                f"The key locator of {self.name} is not set. Set KEY_LOCATOR on the class, pass "
                "key_locator= to the constructor or call set_key_element()."
            )
        return self.key_locator

    def _timeout(self, timeout: Timeout) -> float:
        return self.browser.settings.page_load_timeout if timeout is None else timeout

    def is_available(self, timeout: Timeout = None) -> bool:
        """Whether the key element is (or becomes, within the timeout) visible.

        Args:
            timeout: Seconds to wait, the page load timeout when not specified.
                ``0`` checks just once.
        """
        self._required_key_locator()
        try:
            call_unlogged(self.wait_until_available, timeout)
        except TimeoutException:
            return False
        return True

    @logged()
    def wait_until_available(self, timeout: Timeout = None) -> "BasePage":
        """Waits for the key element to be visible.

        Returns:
            The page itself

        Raises:
            :py:class:`webui.exceptions.TimeoutException` naming the page
        """
        key_locator = self._required_key_locator()
        timeout = self._timeout(timeout)
        self.browser.poll_until(
            visibility_of_element_located(key_locator),
            timeout=timeout,
            message=(
                f"Timed out after {timeout:g} seconds in waiting for {self.name} "
                "to become available."
            ),
        )
        return self
