"""
SmartLocator - locator resolution for webui
===========================================

A locator is an immutable ``(by, locator)`` pair: a strategy and the value the strategy is
applied with. Elements and pages hold one and hand it to Playwright every time they need to find
their node in the live document, so the same locator keeps working across page reloads.

The strategy does not have to be spelled out, it is detected from the input:

.. code-block:: python

    SmartLocator("#submit")                   # css
    SmartLocator(".//td[2]")                  # xpath
    SmartLocator("xpath", "//table")          # explicit (by, value) pair
    SmartLocator({"id": "username"})          # dict
    SmartLocator(name="q")                    # keyword argument
    SmartLocator(some_element)                # anything implementing __locator__

``str()`` of a locator is the Playwright selector, ``repr()`` is the human readable description
used in log records and error messages.

Supported strategies: ``css``, ``xpath``, ``id``, ``name``, ``class_name``, ``tag``,
``link_text``, ``partial_link_text``, ``text``, ``data-testid`` and the ``tbd`` placeholder
(see :py:data:`TBD`).
"""

import re
from collections import namedtuple
from typing import Any
from typing import Optional
from typing import Tuple
from typing import TYPE_CHECKING

from .xpath import quote

if TYPE_CHECKING:
    from typing import Type


#: Value returned by text reads of elements located by :py:data:`TBD`
MOCKED_STRING_VALUE = "!!MOCKED STRING VALUE!!"


def _css_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class LocatorStrategy:
    """Base class for all locator resolution strategies."""

    locator_class: "Type[SmartLocator]"  # injected to avoid circular references

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        """Tries to create a (by, locator) tuple from the given value.

        Returns the tuple if successful, otherwise None.
        """
        raise NotImplementedError


class LocatorObjectStrategy(LocatorStrategy):
    """Handles locators and locatable objects (``__locator__``) passed in."""

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, self.locator_class):
            return value.by, value.locator
        if hasattr(value, "__locator__"):
            inner = self.locator_class(value.__locator__())
            return inner.by, inner.locator
        return None


class CSSStrategy(LocatorStrategy):
    """Handles simple CSS selectors like ``tag#id.class``."""

    CSS_SELECTOR_RE = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9-]*)?(?:[#.][a-zA-Z0-9_-]+)+$")

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, str) and self.CSS_SELECTOR_RE.match(value):
            return "css", value
        return None


class XPathStrategy(LocatorStrategy):
    """Handles XPath expressions, absolute, relative or parenthesized."""

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, str) and value.strip().startswith(("/", "(", ".")):
            return "xpath", value
        return None


class KwargsStrategy(LocatorStrategy):
    """Handles dicts and keyword arguments like ``SmartLocator(id="username")``."""

    SUPPORTED_ENGINES = {
        "css",
        "xpath",
        "id",
        "name",
        "class_name",
        "tag",
        "link_text",
        "partial_link_text",
        "text",
        "data-testid",
        "tbd",
    }

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if not isinstance(value, dict):
            return None
        if "by" in value and "locator" in value:
            engine, locator_value = value["by"], value["locator"]
        elif len(value) == 1:
            engine, locator_value = next(iter(value.items()))
        else:
            return None
        if engine in self.SUPPORTED_ENGINES:
            return engine, locator_value
        return None


class SmartLocator(namedtuple("SmartLocator", ["by", "locator"])):
    """Resolves various inputs into a ``(by, locator)`` pair with a Playwright selector as
    its string form.

    Strategy resolution order:
        1. :py:class:`LocatorObjectStrategy` - SmartLocator instances and ``__locator__``
        2. :py:class:`CSSStrategy` - simple CSS selectors
        3. :py:class:`XPathStrategy` - strings starting with ``/``, ``(`` or ``.``
        4. :py:class:`KwargsStrategy` - dicts and keyword arguments

    Any other string is taken as a CSS selector.

    Raises:
        TypeError: When the value cannot be turned into a locator.
        ValueError: When an explicit but unsupported strategy is requested.
    """

    STRATEGIES = [
        LocatorObjectStrategy(),
        CSSStrategy(),
        XPathStrategy(),
        KwargsStrategy(),
    ]

    def __new__(cls, *args: Any, **kwargs: Any):
        by: Optional[str] = None
        locator: Optional[str] = None

        if len(args) == 2 and not kwargs:
            value = {"by": args[0], "locator": args[1]}
        elif len(args) == 1 and not kwargs:
            value = args[0]
        elif kwargs and not args:
            value = kwargs
        else:
            raise TypeError("Provide a single value, a (by, locator) pair, or keyword arguments.")

        for strategy in cls.STRATEGIES:
            strategy.locator_class = cls
            result = strategy.create_locator(value)
            if result:
                by, locator = result
                break

        if not by:
            if isinstance(value, str):
                by, locator = "css", value
            elif isinstance(value, dict) and "by" in value and "locator" in value:
                raise ValueError(f"Unsupported locator strategy: {value['by']!r}")
            else:
                raise TypeError(f"Could not resolve {value!r} into a valid locator.")

        return super().__new__(cls, by, locator)

    @property
    def is_tbd(self) -> bool:
        return self.by == "tbd"

    def __str__(self):
        """Playwright selector for this locator."""
        if self.by == "css":
            return self.locator
        if self.by == "xpath":
            return f"xpath={self.locator}"
        if self.by in ("id", "name", "data-testid"):
            return f"[{self.by}={_css_string(self.locator)}]"
        if self.by == "class_name":
            return f"[class~={_css_string(self.locator)}]"
        if self.by == "tag":
            return self.locator
        if self.by == "link_text":
            return f"xpath=.//a[normalize-space(.)={quote(self.locator)}]"
        if self.by == "partial_link_text":
            return f"xpath=.//a[contains(normalize-space(.), {quote(self.locator)})]"
        if self.by == "text":
            return f"text={_css_string(self.locator)}"
        # tbd: a selector that can never match anything
        return "xpath=self::node()[false()]"

    def __repr__(self):
        return f"SmartLocator(by={self.by!r}, locator={self.locator!r})"

    def __locator__(self):
        return self


#: Placeholder for elements whose real locator is "to be determined". Elements located by it
#: never find anything; their actions are only logged as mocked.
TBD = SmartLocator("tbd", "")
