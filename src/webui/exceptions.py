"""
WebUI Exceptions
================
"""

from wait_for import TimedOutError


class WebUIException(Exception):
    """A base exception for the webui framework."""

    pass


class LocatorNotImplemented(NotImplementedError, WebUIException):
    """Raised when a page or an element does not have a locator set."""

    pass


class NoSuchElementException(WebUIException):
    """Raised when an element cannot be found (or is not visible when it is expected to be).

    Args:
        message: Human readable message.
        description: Name of the element that was looked for.
        timeout: How long (in seconds) the element was waited for.
    """

    def __init__(self, message, description=None, timeout=None):
        super().__init__(message)
        self.description = description
        self.timeout = timeout


class TimeoutException(TimedOutError, WebUIException):
    """Raised when a polling wait does not see its condition satisfied in time."""

    def __init__(self, message, timeout=None):
        super().__init__(message)
        self.timeout = timeout


class IndexOutOfBounds(IndexError, WebUIException):
    """Raised when a table row or column index is outside of the valid range."""

    def __init__(self, axis, index, max_index):
        self.axis = axis
        self.index = index
        self.max_index = max_index
        super().__init__(f"The table {axis} index ({index}) is out of bounds [0, {max_index}].")


class ColumnNotFound(LookupError, WebUIException):
    """Raised when a column name is not present in the table headers."""

    def __init__(self, table_name, column_name):
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(
            f"Cannot find specified table column name ({column_name!r}) in {table_name}."
        )

    def __str__(self):
        return self.args[0]


class BrowserNotOpen(WebUIException):
    """Raised when an operation needs an open browser session but there is none."""

    pass


class BrowserAlreadyOpen(WebUIException):
    """Raised when launching a browser that already has an open session."""

    pass


class InvalidArgument(ValueError, WebUIException):
    """Raised when a value passed in (or read from the environment) is not acceptable."""

    pass


class UnsupportedBrowserType(InvalidArgument):
    """Raised when asked to launch a browser engine that is not supported."""

    pass


class ElementOperationFailed(WebUIException):
    """Raised when an action on an element does not result in the expected outcome."""

    pass


__all__ = [
    "WebUIException",
    "LocatorNotImplemented",
    "NoSuchElementException",
    "TimeoutException",
    "IndexOutOfBounds",
    "ColumnNotFound",
    "BrowserNotOpen",
    "BrowserAlreadyOpen",
    "InvalidArgument",
    "UnsupportedBrowserType",
    "ElementOperationFailed",
]
