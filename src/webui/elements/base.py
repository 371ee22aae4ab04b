"""
Base elements
=============

Every element either carries a locator and finds its node again on each access
(:py:class:`webui.types.LocatorRef`), or is bound to a node that was already found, like the
rows of a table (:py:class:`webui.types.BoundRef`).

Elements can be instantiated directly with a parent (a browser, a page or another element) or
declared on a class. In the latter case they are created lazily, once per instance of that class:

.. code-block:: python

    class LoginPage(BasePage):
        KEY_LOCATOR = "#login-form"

        username = TextField(id="username")
        submit = Button(".//button[@type='submit']")

    LoginPage(browser).submit.click()
"""

import functools
from copy import copy
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from cached_property import cached_property
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..browser import Browser
from ..conditions import element_to_be_clickable
from ..conditions import invisibility_of_element_located
from ..conditions import presence_of_element_located
from ..conditions import visibility_of_element_located
from ..exceptions import LocatorNotImplemented
from ..exceptions import NoSuchElementException
from ..exceptions import TimeoutException
from ..locator import SmartLocator
from ..log import call_sig
from ..log import create_child_logger
from ..log import create_element_logger
from ..log import logged
from ..log import PrependNameAdapter
from ..types import BoundRef
from ..types import ElementRef
from ..types import LocatorAlias
from ..types import LocatorRef
from ..types import Timeout


def is_element_parent(value: Any) -> bool:
    return isinstance(getattr(value, "browser", None), Browser)


def mocked_if_tbd(result: Any = None):
    """Skips the decorated action on elements whose locator is :py:data:`webui.locator.TBD`.

    The call is only logged and ``result`` returned instead.
    """

    def g(f):
        @functools.wraps(f)
        def wrapped(self, *args, **kwargs):
            if self.is_tbd:
                self.logger.warning("!!MOCKED ACTION: %s%s!!", f.__name__, call_sig(args, kwargs))
                return result
            return f(self, *args, **kwargs)

        return wrapped

    return g


class ElementDescriptor:
    """This class handles instantiating and caching of the elements declared on a class.

    It stores the class and the parameters it should be instantiated with. Once it is accessed from
    the instance of the class where it was defined on, it passes the instance to the element class
    followed by args and then kwargs.
    """

    def __init__(self, klass, *args, **kwargs):
        self.klass = klass
        self.args = args
        self.kwargs = kwargs
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, type=None):
        if obj is None:  # class access
            return self

        if self not in obj._element_cache:
            kwargs = copy(self.kwargs)
            if "logger" not in kwargs:
                kwargs["logger"] = create_child_logger(
                    obj.logger, self.name or self.klass.__name__
                )
            element = self.klass(obj, *self.args, **kwargs)
            element.parent_descriptor = self
            obj._element_cache[self] = element
        return obj._element_cache[self]

    def __repr__(self):
        return "{}{}".format(self.klass.__name__, call_sig(self.args, self.kwargs))


class BaseElement:
    """Base class for all elements.

    Args:
        parent: Browser, page or element the element belongs to
        locator: Locator to find the element with, every time it is needed
        element: Already found Playwright ``Locator`` to bind the element to
        logger: Optional logger, the parent's one is extended by default

    Exactly one of ``locator`` and ``element`` has to be passed. Unless the first argument is a
    parent, an :py:class:`ElementDescriptor` is returned instead of the element.
    """

    #: Default visibility policy, copied to ``check_visibility`` of each instance. When true,
    #: resolving the element waits for it to be present and visible, otherwise just present.
    CHECK_VISIBILITY = True

    #: Set by the descriptor the element was created by
    parent_descriptor: Optional[ElementDescriptor] = None

    def __new__(cls, *args, **kwargs):
        parent = args[0] if args else kwargs.get("parent")
        if is_element_parent(parent):
            return super().__new__(cls)
        return ElementDescriptor(cls, *args, **kwargs)

    def __init__(
        self,
        parent,
        locator: Optional[LocatorAlias] = None,
        element: Optional[Locator] = None,
        logger=None,
    ) -> None:
        if (locator is None) == (element is None):
            raise TypeError("You have to pass either a locator or an element, not both or none")
        self.parent = parent
        self.ref: ElementRef = (
            BoundRef(element) if element is not None else LocatorRef(SmartLocator(locator))
        )
        self.check_visibility = self.CHECK_VISIBILITY
        if logger is None:
            self.logger = create_child_logger(parent.logger, type(self).__name__)
        elif isinstance(logger, PrependNameAdapter):
            # The logger is already prepared
            self.logger = logger
        else:
            self.logger = create_element_logger(type(self).__name__, logger)
        self._element_cache: Dict[ElementDescriptor, "BaseElement"] = {}

    @property
    def browser(self) -> Browser:
        return self.parent.browser

    @property
    def locatable_parent(self) -> Optional["BaseElement"]:
        """The parent element lookups are scoped to, if the parent is an element."""
        return self.parent if isinstance(self.parent, BaseElement) else None

    @property
    def is_bound(self) -> bool:
        return isinstance(self.ref, BoundRef)

    @property
    def is_tbd(self) -> bool:
        return isinstance(self.ref, LocatorRef) and self.ref.locator.is_tbd

    @property
    def locator(self) -> SmartLocator:
        if isinstance(self.ref, BoundRef):
            raise LocatorNotImplemented(f"{type(self).__name__} is bound to a node, not a locator")
        return self.ref.locator

    @cached_property
    def name(self) -> str:
        target = self.ref.handle if isinstance(self.ref, BoundRef) else self.ref.locator
        return f"{type(self).__name__}({target!r})"

    def __repr__(self):
        return self.name

    def __locator__(self) -> SmartLocator:
        return self.locator

    def __element__(self) -> Locator:
        return self.resolve()

    def _timeout(self, timeout: Timeout) -> float:
        return self.browser.settings.element_timeout if timeout is None else timeout

    def _target(self):
        return self.ref.handle if isinstance(self.ref, BoundRef) else self.ref.locator

    def _poll(self, condition_factory, timeout: Timeout, state: str):
        timeout = self._timeout(timeout)
        return self.browser.poll_until(
            condition_factory(self._target(), parent=self.locatable_parent),
            timeout=timeout,
            message=f"Timed out after {timeout:g} seconds in waiting for {self.name} to {state}.",
        )

    def _expected_state(self) -> str:
        return "become visible" if self.check_visibility else "be present"

    # ======================== LOCATING ========================
    def resolve(self, timeout: Timeout = None) -> Locator:
        """Returns the Playwright ``Locator`` of the node this element represents.

        Bound elements return their node right away. Otherwise the locator is polled until it
        matches a present (and, with the visibility policy on, visible) node.

        Args:
            timeout: Seconds to wait, the configured element timeout when not specified.
                ``0`` checks just once.

        Raises:
            :py:class:`webui.exceptions.NoSuchElementException` when nothing was found in time
        """
        if isinstance(self.ref, BoundRef):
            return self.ref.handle
        factory = (
            visibility_of_element_located if self.check_visibility else presence_of_element_located
        )
        try:
            return self._poll(factory, timeout, self._expected_state())
        except TimeoutException as e:
            raise NoSuchElementException(
                str(e), description=self.name, timeout=e.timeout
            ) from None

    def exists(self, timeout: Timeout = None) -> bool:
        """Whether :py:meth:`resolve` finds the element within the timeout."""
        if isinstance(self.ref, BoundRef):
            return True
        try:
            self.resolve(timeout=timeout)
        except NoSuchElementException:
            return False
        return True

    def is_visible(self, timeout: Timeout = None) -> bool:
        """Whether the element is (or becomes, within the timeout) visible."""
        if isinstance(self.ref, BoundRef):
            try:
                return self.ref.handle.is_visible()
            except PlaywrightError:
                return False
        try:
            self._poll(visibility_of_element_located, timeout, "become visible")
        except TimeoutException:
            return False
        return True

    @logged()
    def wait_until_present(self, timeout: Timeout = None) -> Locator:
        """Waits for the element to be attached to the document, visible or not.

        Raises:
            :py:class:`webui.exceptions.TimeoutException`
        """
        return self._poll(presence_of_element_located, timeout, "be present")

    @logged()
    def wait_until_visible(self, timeout: Timeout = None) -> Locator:
        """Waits for the element to be present and visible.

        Raises:
            :py:class:`webui.exceptions.TimeoutException`
        """
        return self._poll(visibility_of_element_located, timeout, "become visible")

    @logged()
    def wait_until_not_visible(self, timeout: Timeout = None) -> bool:
        """Waits for the element to be hidden or gone.

        Raises:
            :py:class:`webui.exceptions.TimeoutException`
        """
        return self._poll(invisibility_of_element_located, timeout, "become invisible")

    def wait_until_exists(self, timeout: Timeout = None) -> Locator:
        """:py:meth:`wait_until_visible` or :py:meth:`wait_until_present`, by the visibility
        policy."""
        if self.check_visibility:
            return self.wait_until_visible(timeout)
        return self.wait_until_present(timeout)

    # ======================== READING ========================
    @property
    def is_displayed(self) -> bool:
        """Immediate visibility check, no waiting."""
        return self.is_visible(timeout=0)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.browser.get_attribute(name, self)

    @property
    def tag(self) -> str:
        return self.browser.tag(self)


class ClickableMixin:
    @logged()
    @mocked_if_tbd()
    def click(self) -> None:
        """Clicks the element, once it is visible."""
        self.browser.click(self)

    @logged()
    def wait_until_clickable(self, timeout: Timeout = None) -> Locator:
        """Waits for the element to be visible and enabled.

        Raises:
            :py:class:`webui.exceptions.TimeoutException`
        """
        return self._poll(element_to_be_clickable, timeout, "become clickable")


class ContainerElement(BaseElement):
    """Element other elements are looked up in.

    The lookups do not wait, the container itself is resolved (and waited for) first.
    Elements declared on a container subclass are scoped to it as well.
    """

    def find_element(self, locator: LocatorAlias) -> Locator:
        """First node matching ``locator`` within this element.

        Raises:
            :py:class:`webui.exceptions.NoSuchElementException` when nothing matches
        """
        root = self.resolve()
        try:
            return self.browser.element(locator, parent=root)
        except NoSuchElementException:
            raise NoSuchElementException(
                f"Could not find an element {locator!r} in {self.name}", description=repr(locator)
            ) from None

    def find_elements(self, locator: LocatorAlias) -> List[Locator]:
        """All nodes matching ``locator`` within this element, possibly none."""
        return self.browser.elements(locator, parent=self.resolve())


__all__ = [
    "BaseElement",
    "ClickableMixin",
    "ContainerElement",
    "ElementDescriptor",
    "is_element_parent",
    "mocked_if_tbd",
]
