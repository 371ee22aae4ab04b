"""
WebUI Browser Implementation
============================

This module provides the :py:class:`Browser` class, the handle every page and element talks to.
It owns the Playwright session (or wraps a Playwright ``Page`` somebody else owns), performs
navigation, and offers the element lookups and interactions the elements build upon.

Key Features:
- Explicit open/closed session lifecycle with a context manager
- SmartLocator integration for flexible element location
- A single polling primitive, :py:meth:`Browser.poll_until`, built on ``wait_for``
"""

import time
from enum import Enum
from logging import Logger
from textwrap import dedent
from typing import Any
from typing import cast
from typing import List
from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

from playwright.sync_api import ElementHandle
from playwright.sync_api import Locator
from playwright.sync_api import Page
from playwright.sync_api import sync_playwright
from wait_for import TimedOutError
from wait_for import wait_for

from .config import DEFAULT_SETTINGS
from .config import Settings
from .exceptions import BrowserAlreadyOpen
from .exceptions import BrowserNotOpen
from .exceptions import InvalidArgument
from .exceptions import LocatorNotImplemented
from .exceptions import NoSuchElementException
from .exceptions import TimeoutException
from .exceptions import UnsupportedBrowserType
from .locator import SmartLocator
from .log import null_logger
from .types import ElementParent
from .types import LocatorAlias
from .types import LocatorProtocol
from .types import Timeout
from .xpath import normalize_space

if TYPE_CHECKING:
    from .conditions import Condition
    from .elements.base import BaseElement


class BrowserType(str, Enum):
    """Browser engines a :py:class:`Browser` can launch."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"

    @classmethod
    def coerce(cls, value: Union[str, "BrowserType"]) -> "BrowserType":
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError:
            raise UnsupportedBrowserType(
                f"Unsupported browser type {value!r}, use one of: "
                + ", ".join(member.value for member in cls)
            ) from None


def _not_satisfied(result: Any) -> bool:
    return result is None or result is False


class Browser:
    """Handle of one browser session.

    A browser is either launched by this object (:py:meth:`launch`, torn down again by
    :py:meth:`dispose`) or attached to an existing Playwright ``Page`` passed to the constructor,
    in which case it is open right away and its Playwright objects stay owned by the caller.

    .. code-block:: python

        with Browser(settings=Settings(headless=False)).launch("firefox", url=START_URL) as b:
            b.click("#submit")
            print(b.title)

        # Wrapping a page from a pytest-playwright fixture
        browser = Browser(page)

    All element lookups accept anything :py:class:`webui.locator.SmartLocator` understands,
    Playwright ``Locator`` objects and the library's elements.

    Args:
        page: Playwright Page to attach to, if the session is managed elsewhere
        settings: Timeouts and launch options (:py:class:`webui.config.Settings`)
        logger: Optional logger instance (uses null_logger if not provided)
    """

    def __init__(
        self,
        page: Optional[Page] = None,
        settings: Optional[Settings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.logger = logger or null_logger
        self._page = page
        self._playwright = None
        self._browser = None

    # ======================== SESSION LIFECYCLE ========================
    @property
    def browser(self) -> "Browser":
        """Implemented so pages and elements do not have to check the instance of their
        parent. This property exists there so here it just stops the chain"""
        return self

    @property
    def is_open(self) -> bool:
        return self._page is not None and not self._page.is_closed()

    @property
    def page(self) -> Page:
        """The Playwright Page of the open session.

        Raises:
            :py:class:`webui.exceptions.BrowserNotOpen` when there is no open session
        """
        if not self.is_open:
            raise BrowserNotOpen("The browser is not open, launch it first")
        return cast(Page, self._page)

    @property
    def browser_type(self) -> str:
        """Browser engine name (chromium, firefox, webkit)."""
        return self.page.context.browser.browser_type.name

    def launch(
        self,
        browser_type: Union[str, BrowserType, None] = None,
        url: Optional[str] = None,
    ) -> "Browser":
        """Starts Playwright and opens a browser with a single page.

        Args:
            browser_type: Engine to launch, the configured one when not specified
            url: Address to navigate to once the browser is up

        Returns:
            The browser itself, so it can be chained or used as a context manager

        Raises:
            :py:class:`webui.exceptions.BrowserAlreadyOpen` when the session is already open
            :py:class:`webui.exceptions.UnsupportedBrowserType` for an unknown engine
        """
        if self.is_open:
            raise BrowserAlreadyOpen("The browser is already open, dispose it first")
        engine = BrowserType.coerce(browser_type or self.settings.browser_type)
        if self._browser is not None or self._playwright is not None:
            # The page was closed behind our back, the browser and the driver are still up
            self.logger.info("Disposing the previous session")
            self.dispose()
        self.logger.info("Launching %s (headless=%s)", engine.value, self.settings.headless)

        playwright = sync_playwright().start()
        try:
            browser = getattr(playwright, engine.value).launch(
                headless=self.settings.headless, slow_mo=self.settings.slow_mo
            )
            context = browser.new_context(viewport=self.settings.viewport)
            context.set_default_navigation_timeout(self.settings.page_load_timeout * 1000)
            page = context.new_page()
        except Exception:
            playwright.stop()
            raise
        self._playwright = playwright
        self._browser = browser
        self._page = page

        if url:
            self.navigate_to(url)
        return self

    def dispose(self) -> None:
        """Ends the session. Never raises and can be called any number of times.

        A launched browser is closed together with its Playwright driver, failures while doing
        so are logged and otherwise ignored. An attached page is only released.
        """
        browser, playwright = self._browser, self._playwright
        self._page = self._browser = self._playwright = None
        if browser is not None:
            self.logger.info("Closing the browser")
            try:
                browser.close()
            except Exception:
                self.logger.exception("Failed to close the browser")
        if playwright is not None:
            try:
                playwright.stop()
            except Exception:
                self.logger.exception("Failed to stop the Playwright driver")

    def __enter__(self) -> "Browser":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"{type(self).__name__}({state})"

    # ======================== NAVIGATION & PAGE PROPERTIES ========================
    def navigate_to(self, url: str, *, wait_until: Optional[str] = "domcontentloaded") -> None:
        """Navigate to the specified URL.

        Args:
            url: URL to navigate to
            wait_until: Wait condition before considering navigation successful.
                       Options: "commit", "domcontentloaded", "load", "networkidle", None
        """
        self.logger.info("Opening URL: %r", url)
        self.page.goto(url, wait_until=wait_until)

    def back(self) -> None:
        """Goes one step back in the history."""
        self.logger.debug("back")
        self.page.go_back()

    def refresh(self) -> None:
        """Triggers a page refresh."""
        self.logger.debug("refresh")
        self.page.reload()

    @property
    def url(self) -> str:
        """Current page URL."""
        result = self.page.url
        self.logger.debug("current_url -> %r", result)
        return result

    @property
    def title(self) -> str:
        """Current page title as displayed in the browser tab."""
        current_title = self.page.title()
        self.logger.info("Current title: %r", current_title)
        return current_title

    @property
    def window_titles(self) -> List[str]:
        """Titles of all pages open in the browser context."""
        return [page.title() for page in self.page.context.pages]

    def save_screenshot(self, filename: str) -> None:
        """Saves a screenshot of the current page.

        Args:
            filename: Path where the screenshot will be saved
        """
        self.logger.debug("Saving screenshot to -> %r", filename)
        self.page.screenshot(path=filename)

    def execute_script(self, script: str, *args, silent=False) -> Any:
        """Executes a script using the ``arguments`` array the way Selenium scripts do.

        Elements and locators among ``args`` are resolved to element handles.

        Args:
            script: The JavaScript string to execute.
            *args: Arguments to be passed to the script, accessible via `arguments[i]`.
            silent: If True, suppress debug logging for this call.

        Returns:
            Result of the JavaScript execution
        """
        if not silent:
            self.logger.debug("execute_script: %r", script)
        page = self.page
        processed_args = []
        for arg in args:
            if isinstance(arg, Locator) or hasattr(arg, "__element__"):
                processed_args.append(self.element(arg).element_handle())
            else:
                processed_args.append(arg)

        js_wrapper_function = f"""
            (args) => {{
                const arguments = args;
                {dedent(script)}
            }}
        """
        return page.evaluate(js_wrapper_function, processed_args)

    def sleep(self, seconds: float) -> None:
        """Fixed delay. Prefer :py:meth:`poll_until` which does not wait longer than needed."""
        if not self.is_open:
            raise BrowserNotOpen("The browser is not open, launch it first")
        self.logger.warning("Sleeping for %s seconds", seconds)
        time.sleep(seconds)

    # ======================= WAITING =======================
    def poll_until(
        self, condition: "Condition", timeout: Timeout = None, message: Optional[str] = None
    ) -> Any:
        """Evaluates ``condition(browser)`` every poll interval until it returns something
        other than ``None`` or ``False``.

        Args:
            condition: Callable taking the browser, see :py:mod:`webui.conditions`
            timeout: Seconds to keep polling, the element timeout when not specified.
                ``0`` evaluates the condition exactly once.
            message: Message of the exception raised on timeout

        Returns:
            Whatever the condition returned the first time it was satisfied

        Raises:
            :py:class:`webui.exceptions.TimeoutException` when the timeout elapses
        """
        if timeout is None:
            timeout = self.settings.element_timeout
        if timeout < 0:
            raise InvalidArgument(f"Timeout cannot be negative, got {timeout}")
        description = getattr(condition, "__name__", repr(condition))
        try:
            result, _ = wait_for(
                condition,
                func_args=[self],
                timeout=timeout,
                delay=self.settings.poll_interval,
                fail_condition=_not_satisfied,
                message=description,
                very_quiet=True,
            )
        except TimeoutException:
            raise
        except TimedOutError as e:
            raise TimeoutException(
                message or f"Timed out after {timeout:g} seconds waiting for {description}",
                timeout=timeout,
            ) from e
        return result

    # ======================= ELEMENT DISCOVERY =======================
    @staticmethod
    def _process_locator(locator: LocatorAlias) -> Union[Locator, ElementHandle, SmartLocator]:
        """Turns whatever was passed as a locator into a node or a :py:class:`SmartLocator`.

        Nodes and elements bound to a node are used as they are, everything else goes through
        :py:class:`SmartLocator`.
        """
        if isinstance(locator, (Locator, ElementHandle)):
            return locator
        if hasattr(locator, "__element__"):
            return cast("BaseElement", locator).__element__()
        try:
            return SmartLocator(locator)
        except TypeError:
            if not hasattr(locator, "__locator__"):
                raise LocatorNotImplemented(
                    f"{type(locator).__name__} cannot be located, it has no __locator__"
                ) from None
        inner = cast(LocatorProtocol, locator).__locator__()
        return inner if isinstance(inner, (Locator, ElementHandle)) else SmartLocator(inner)

    @staticmethod
    def _visibility_policy(locator: LocatorAlias) -> Optional[bool]:
        """Visibility filter an element class asks for through ``CHECK_VISIBILITY``, if any."""
        if not (hasattr(locator, "__locator__") and hasattr(locator, "CHECK_VISIBILITY")):
            return None
        return getattr(locator, "check_visibility", locator.CHECK_VISIBILITY)

    def _root_of(self, parent: Optional[ElementParent]) -> Union[Page, Locator, ElementHandle]:
        from .elements.base import BaseElement

        if parent is None or isinstance(parent, Browser):
            return self.page
        if isinstance(parent, (Locator, ElementHandle)):
            return parent
        if isinstance(parent, BaseElement):
            # Single immediate check, the caller is the one polling
            return parent.resolve(timeout=0)
        # Locators, dicts and locatable objects alike
        return self.element(parent)

    def elements(
        self,
        locator: LocatorAlias,
        parent: Optional[ElementParent] = None,
        check_visibility: bool = False,
    ) -> List[Locator]:
        """All nodes matching ``locator`` at this moment, possibly none. Nothing is waited for.

        Args:
            locator: Anything :py:class:`SmartLocator` accepts, an element or a Playwright node
            parent: Element or node to search in, the whole page by default
            check_visibility: Drop the nodes that are not visible
        """
        target = self._process_locator(locator)
        if isinstance(target, (Locator, ElementHandle)):
            found = [target]
        else:
            found = self._root_of(parent).locator(str(target)).all()
        if check_visibility:
            found = [node for node in found if node.is_visible()]
        return found

    def element(self, locator: LocatorAlias, *args, **kwargs) -> Locator:
        """First node matching ``locator``, see :py:meth:`elements` for the arguments.

        Element classes with ``CHECK_VISIBILITY`` decide about the visibility filter themselves.

        Raises:
            :py:class:`webui.exceptions.NoSuchElementException` when nothing matches
        """
        policy = self._visibility_policy(locator)
        if policy is not None:
            kwargs["check_visibility"] = policy
        found = self.elements(locator, *args, **kwargs)
        if not found:
            raise NoSuchElementException(f"Could not find an element {locator!r}")
        return found[0]

    # ==================== ELEMENT STATE & PROPERTY QUERIES ====================
    def _state(self, query: str, locator: LocatorAlias, *args, **kwargs) -> bool:
        try:
            node = self.element(locator, *args, **kwargs)
        except NoSuchElementException:
            return False
        return getattr(node, query)()

    def is_displayed(self, locator: LocatorAlias, *args, **kwargs) -> bool:
        """Whether the node exists and is visible. Missing nodes are not displayed."""
        return self._state("is_visible", locator, *args, **kwargs)

    def is_enabled(self, locator: LocatorAlias, *args, **kwargs) -> bool:
        return self._state("is_enabled", locator, *args, **kwargs)

    def is_checked(self, locator: LocatorAlias, *args, **kwargs) -> bool:
        return self._state("is_checked", locator, *args, **kwargs)

    def text(self, locator: LocatorAlias, *args, **kwargs) -> str:
        """Text content of the node with the whitespace normalized."""
        return normalize_space(self.element(locator, *args, **kwargs).text_content())

    def input_value(self, locator: LocatorAlias, *args, **kwargs) -> str:
        return self.element(locator, *args, **kwargs).input_value() or ""

    def tag(self, *args, **kwargs) -> str:
        """Lowercase tag name of the node."""
        return self.element(*args, **kwargs).evaluate("el => el.tagName.toLowerCase()")

    def get_attribute(self, attr: str, *args, **kwargs) -> Optional[str]:
        """Attribute of the node, ``None`` when it is not set.

        ``value`` of form fields is their current value, not the one from the markup.
        """
        node = self.element(*args, **kwargs)
        if attr == "value" and self.tag(node) in ("input", "textarea", "select"):
            return node.input_value()
        return node.get_attribute(attr)

    # ====================== INTERACTIONS ======================
    @staticmethod
    def _shown(text: str, sensitive: bool) -> str:
        return "*" * len(text) if sensitive else text

    def click(self, locator: LocatorAlias, *args, **kwargs) -> None:
        self.logger.debug("click: %r", locator)
        self.element(locator, *args, **kwargs).click()

    def send_keys(self, text: str, locator: LocatorAlias, sensitive=False, *args, **kwargs) -> None:
        """Types ``text`` key by key after the current content of the node.

        ``sensitive`` text is logged as asterisks.
        """
        text = str(text)
        self.logger.debug("send_keys %r to %r", self._shown(text, sensitive), locator)
        self.element(locator, *args, **kwargs).type(text)

    def fill(self, text: str, locator: LocatorAlias, sensitive=False, *args, **kwargs) -> None:
        """Replaces the content of a form field with ``text`` in one go."""
        text = str(text)
        self.logger.debug("fill %r to %r", self._shown(text, sensitive), locator)
        self.element(locator, *args, **kwargs).fill(text)

    def clear(self, locator: LocatorAlias, *args, **kwargs) -> bool:
        """Empties a form field.

        Returns:
            Whether the field is empty afterwards
        """
        self.logger.debug("clear: %r", locator)
        node = self.element(locator, *args, **kwargs)
        node.clear()
        return not node.input_value()

    def submit(self, locator: LocatorAlias, *args, **kwargs) -> None:
        """Submits the form the node belongs to (or the form itself)."""
        self.logger.debug("submit: %r", locator)
        self.element(locator, *args, **kwargs).evaluate(
            """el => {
                const form = el.tagName === "FORM" ? el : (el.form || el.closest("form"));
                if (!form) { throw new Error("Element is not inside a form"); }
                form.requestSubmit ? form.requestSubmit() : form.submit();
            }"""
        )

    def check(self, locator: LocatorAlias, *args, **kwargs) -> None:
        self.logger.debug("check: %r", locator)
        self.element(locator, *args, **kwargs).check()

    def uncheck(self, locator: LocatorAlias, *args, **kwargs) -> None:
        self.logger.debug("uncheck: %r", locator)
        self.element(locator, *args, **kwargs).uncheck()
