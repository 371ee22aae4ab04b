"""
WebUI Type Declarations
=======================
"""

from typing import Dict
from typing import NamedTuple
from typing import Protocol
from typing import TYPE_CHECKING
from typing import Union

from playwright.sync_api import ElementHandle
from playwright.sync_api import Locator

from .locator import SmartLocator

if TYPE_CHECKING:
    from .browser import Browser
    from .elements.base import BaseElement


class LocatorProtocol(Protocol):
    CHECK_VISIBILITY: bool

    def __locator__(self) -> Union[str, SmartLocator, Locator, ElementHandle]: ...


LocatorAlias = Union[str, Dict[str, str], SmartLocator, Locator, ElementHandle, LocatorProtocol]

ElementParent = Union[LocatorAlias, "Browser", "BaseElement"]

Timeout = Union[int, float, None]


class LocatorRef(NamedTuple):
    """Element re-resolved against the live document on every access."""

    locator: SmartLocator


class BoundRef(NamedTuple):
    """Element bound to an already found node, never re-resolved."""

    handle: Locator


ElementRef = Union[LocatorRef, BoundRef]
