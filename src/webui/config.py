"""
WebUI Settings
==============

Runtime settings of a :py:class:`webui.browser.Browser`. Every field has a default and can be
overridden from the environment through ``WEBUI_<FIELD>`` variables (``WEBUI_HEADLESS=0``,
``WEBUI_ELEMENT_TIMEOUT=10`` ...), which is the usual way to tweak a test run on CI without
touching the code:

.. code-block:: python

    browser = Browser(settings=Settings.from_env())
    browser = Browser(settings=Settings(element_timeout=10, headless=False))
"""

import os
from typing import Any
from typing import Callable
from typing import Dict
from typing import Mapping
from typing import NamedTuple
from typing import Optional

from .exceptions import InvalidArgument

ENV_PREFIX = "WEBUI_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{value!r} is not a boolean")


def _non_negative(convert: Callable[[str], Any]) -> Callable[[str], Any]:
    def parse(value: str) -> Any:
        result = convert(value)
        if result < 0:
            raise ValueError(f"{value!r} is negative")
        return result

    return parse


class Settings(NamedTuple):
    """Browser and wait settings.

    Timeouts and the poll interval are in seconds, ``slow_mo`` is in milliseconds.
    """

    browser_type: str = "chromium"
    headless: bool = True
    element_timeout: float = 3
    page_load_timeout: float = 30
    poll_interval: float = 0.5
    slow_mo: float = 0
    viewport_width: int = 1280
    viewport_height: int = 720

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any
    ) -> "Settings":
        """Builds settings from ``WEBUI_<FIELD>`` environment variables.

        Args:
            environ: Mapping to read instead of :py:data:`os.environ`
            **overrides: Values taking precedence over the environment

        Raises:
            :py:class:`webui.exceptions.InvalidArgument` if a variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for field, parse in _PARSERS.items():
            key = ENV_PREFIX + field.upper()
            if key not in environ:
                continue
            raw = environ[key]
            try:
                values[field] = parse(raw)
            except ValueError as e:
                raise InvalidArgument(f"Invalid value {raw!r} of {key}: {e}") from e
        values.update(overrides)
        return cls(**values)

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}


_PARSERS: Dict[str, Callable[[str], Any]] = {
    "browser_type": lambda value: value.strip().lower(),
    "headless": parse_bool,
    "element_timeout": _non_negative(float),
    "page_load_timeout": _non_negative(float),
    "poll_interval": _non_negative(float),
    "slow_mo": _non_negative(float),
    "viewport_width": _non_negative(int),
    "viewport_height": _non_negative(int),
}

DEFAULT_SETTINGS = Settings()
