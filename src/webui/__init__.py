"""Page-object UI test automation on top of Playwright."""

from .app import BaseApp
from .browser import Browser
from .browser import BrowserType
from .config import Settings
from .factory import ElementFactory
from .factory import ElementFlavor
from .locator import SmartLocator
from .locator import TBD
from .page import BasePage

__all__ = [
    "BaseApp",
    "BasePage",
    "Browser",
    "BrowserType",
    "ElementFactory",
    "ElementFlavor",
    "Settings",
    "SmartLocator",
    "TBD",
]
