import re
from xml.sax.saxutils import quoteattr, unescape


def quote(s):
    """Quotes a string in such a way that it is usable inside XPath expressions."""
    return unescape(quoteattr(s))


def normalize_space(text):
    """Works in accordance with the XPath's normalize-space() operator.

    `Description <https://developer.mozilla.org/en-US/docs/Web/XPath/Functions/normalize-space>`_:

        *The normalize-space function strips leading and trailing white-space from a string,
        replaces sequences of whitespace characters by a single space, and returns the resulting
        string.*

    ``None`` (an element without text content) is normalized to an empty string.
    """
    if text is None:
        return ""
    return re.sub(r"\s+", " ", text.strip(), flags=re.UNICODE)


def position(expression, index):
    """Selects the node at the 0-based ``index`` out of the nodes matched by ``expression``.

    XPath positions are 1-based, so ``position("./tr", 0)`` gives ``(./tr)[1]``.
    """
    if index < 0:
        raise ValueError(f"XPath positions cannot be negative, got index {index}")
    return f"({expression})[{index + 1}]"
