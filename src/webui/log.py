"""
Logging of pages and elements
=============================

Every page and element logs through a :py:class:`PrependNameAdapter` that prefixes the records
with the path of the object, so the output reads like::

    [SearchPage/results[3]['Age']]: read (elapsed 12 ms)

Pages start a path, elements declared on them extend it with ``/name`` and rows or cells of a
table extend it with ``[index]``. Without a configured logger everything goes to
:py:data:`null_logger`.
"""

import functools
import logging
import time
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Mapping
from typing import MutableMapping
from typing import Optional
from typing import Tuple
from typing import TypeVar
from typing import Union

null_logger = logging.getLogger("webui_null")
null_logger.addHandler(logging.NullHandler())

F = TypeVar("F", bound=Callable[..., Any])


def call_sig(args: Iterable[Any], kwargs: Mapping[str, Any]) -> str:
    """Renders positional and keyword arguments the way they would appear in a call."""
    rendered = [repr(arg) for arg in args]
    rendered += [f"{key}={value!r}" for key, value in kwargs.items()]
    return f"({', '.join(rendered)})"


class PrependNameAdapter(logging.LoggerAdapter):
    """Prefixes the log records with the path of the page or element logging them."""

    def __init__(self, logger: logging.Logger, element_path: str) -> None:
        super().__init__(logger, {"element_path": element_path})
        self.element_path = element_path

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        # the path ends up in the format string
        return f"[{self.element_path.replace('%', '%%')}]: {msg}", kwargs

    def extended(self, suffix: str) -> "PrependNameAdapter":
        return type(self)(self.logger, f"{self.element_path}{suffix}".lstrip("/"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.logger!r}, {self.element_path!r})"


def create_element_logger(
    element_path: str, logger: Optional[logging.Logger] = None
) -> PrependNameAdapter:
    """Starts a new path, logging into ``logger`` or the null logger."""
    return PrependNameAdapter(logger or null_logger, element_path)


def _extend(parent_logger: logging.Logger, suffix: str) -> PrependNameAdapter:
    if isinstance(parent_logger, PrependNameAdapter):
        return parent_logger.extended(suffix)
    return PrependNameAdapter(parent_logger, suffix.lstrip("/"))


def create_child_logger(parent_logger: logging.Logger, child_name: str) -> PrependNameAdapter:
    """Logger of an element declared on a page or inside a container.

    Args:
        parent_logger: Logger of the parent. A plain logger makes the child the top of the path.
        child_name: Attribute name of the child
    """
    return _extend(parent_logger, f"/{child_name}")


def create_item_logger(parent_logger: logging.Logger, item: Union[str, int]) -> PrependNameAdapter:
    """Logger of a row or cell, referred to by its index or column name."""
    return _extend(parent_logger, f"[{item!r}]")


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000.0


def logged(log_args: bool = False, log_result: bool = False) -> Callable[[F], F]:
    """Logs the start and the end of a method call together with its duration.

    The object the method is called on must have a ``logger``. Arguments of methods handling
    secrets must not be logged, so ``log_args`` is off by default.

    Args:
        log_args: Whether to put the call arguments into the records
        log_result: Whether to log the returned value
    """

    def g(f):
        @functools.wraps(f)
        def wrapped(self, *args, **kwargs):
            signature = f.__name__ + (call_sig(args, kwargs) if log_args else "")
            self.logger.debug("%s started", signature)
            start = time.monotonic()
            try:
                result = f(self, *args, **kwargs)
            except Exception:
                self.logger.exception(
                    "An exception happened during %s call (elapsed %.0f ms)",
                    signature,
                    _elapsed_ms(start),
                )
                raise
            elapsed = _elapsed_ms(start)
            if log_result:
                self.logger.info("%s -> %r (elapsed %.0f ms)", signature, result, elapsed)
            else:
                self.logger.info("%s (elapsed %.0f ms)", signature, elapsed)
            return result

        wrapped.original_function = f
        return wrapped

    return g


def call_unlogged(method, *args, **kwargs):
    """Calls a bound method bypassing :py:func:`logged`.

    Methods that are not decorated are simply called.
    """
    f = getattr(method, "original_function", method.__func__)
    return f(method.__self__, *args, **kwargs)
