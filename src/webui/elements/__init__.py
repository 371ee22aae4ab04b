"""Elements representing the controls of a page, from the base classes to the concrete ones."""

from .base import *  # noqa: F403 F401
from .button import Button
from .checkbox import CheckBox
from .checkbox import RadioButton
from .input import BaseInput
from .input import TextField
from .table import Table
from .table import TableCell
from .table import TableHeaderRow
from .table import TableRow
from .table import XPathTable
from .text import Label
from .text import Text
from .text import TextLink

__all__ = [
    "BaseElement",
    "BaseInput",
    "Button",
    "CheckBox",
    "ClickableMixin",
    "ContainerElement",
    "ElementDescriptor",
    "Label",
    "RadioButton",
    "Table",
    "TableCell",
    "TableHeaderRow",
    "TableRow",
    "Text",
    "TextField",
    "TextLink",
    "XPathTable",
]
