"""
Tables
======

:py:class:`Table` indexes the rows and cells of a ``<table>``. All indexes are 0-based, columns
can also be addressed by their header text. Texts are always whitespace-normalized.

Rows are the ``<tr>`` elements of the table body. Tables without a ``<tbody>`` (XHTML documents
and the like) use their direct ``<tr>`` children instead. The header row is the ``<thead>`` row,
or the first row of the table when there is no ``<thead>``, which then may as well be a data row.

Header texts are read from the live page on every lookup until :py:meth:`Table.cache_headers`
is called. After that the snapshot it took is used, even when the page changes:

.. code-block:: python

    table = Table(browser, "#jobs")
    table.cache_headers()
    for row in table:
        print(row.cell("Job Title").text, row.cell("Salary").text)

:py:class:`XPathTable` behaves the same, but looks the rows and cells up by XPath position
instead of listing them all first, which is cheaper for big tables when just a few cells are read.
"""

from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Union

from playwright.sync_api import Locator

from .base import ContainerElement
from ..exceptions import ColumnNotFound
from ..exceptions import IndexOutOfBounds
from ..exceptions import NoSuchElementException
from ..log import create_item_logger
from ..log import logged
from ..xpath import position

Column = Union[int, str]


def _check_bounds(axis: str, index: int, elements: List[Locator]) -> Locator:
    max_index = len(elements) - 1
    if index < 0 or index > max_index:
        raise IndexOutOfBounds(axis, index, max_index)
    return elements[index]


class TableCell(ContainerElement):
    """A single ``<td>`` (or header ``<th>``) of a :py:class:`Table`.

    Args:
        element: The cell node.
        row_index: Index of the row the cell is in, ``-1`` for a ``<thead>`` row.
        column_index: Index of the column.
    """

    # Hidden cells still have a text, the same one TableRow.cell_texts reports
    CHECK_VISIBILITY = False

    def __init__(self, parent, element, row_index, column_index, logger=None):
        ContainerElement.__init__(self, parent, element=element, logger=logger)
        self.row_index = row_index
        self.column_index = column_index

    @property
    def row(self) -> "TableRow":
        return self.parent

    @property
    def text(self) -> str:
        return self.browser.text(self)

    def read(self) -> str:
        return self.text

    def __repr__(self):
        return f"{type(self).__name__}({self.row_index!r}, {self.column_index!r})"


class TableRow(ContainerElement):
    """A row of a :py:class:`Table`.

    Args:
        element: The ``<tr>`` node.
        index: Position of the row in the table.
    """

    CELLS = "./td"

    Cell = TableCell

    def __init__(self, parent, element, index, logger=None):
        ContainerElement.__init__(self, parent, element=element, logger=logger)
        self.index = index

    @property
    def table(self) -> "Table":
        return self.parent

    def __repr__(self):
        return f"{type(self).__name__}({self.table.name}, {self.index!r})"

    @property
    def cell_elements(self) -> List[Locator]:
        return self.find_elements(self.CELLS)

    @property
    def cell_count(self) -> int:
        return len(self.cell_elements)

    @property
    def cell_texts(self) -> List[str]:
        return [self.browser.text(cell) for cell in self.cell_elements]

    @property
    def cells(self) -> List[TableCell]:
        return [
            self.Cell(self, element, self.index, i, logger=create_item_logger(self.logger, i))
            for i, element in enumerate(self.cell_elements)
        ]

    def cell_element(self, column: Column) -> Locator:
        column_index = self.table.column_index_of(column) if isinstance(column, str) else column
        return self.table._cell_in_row(self, column_index)

    def cell(self, column: Column) -> TableCell:
        """The cell in the given column, by its index or header text.

        Raises:
            :py:class:`webui.exceptions.IndexOutOfBounds`,
            :py:class:`webui.exceptions.ColumnNotFound`
        """
        column_index = self.table.column_index_of(column) if isinstance(column, str) else column
        return self.Cell(
            self,
            self.table._cell_in_row(self, column_index),
            self.index,
            column_index,
            logger=create_item_logger(self.logger, column),
        )

    def __getitem__(self, column: Column) -> TableCell:
        return self.cell(column)

    def __iter__(self) -> Iterator[TableCell]:
        return iter(self.cells)

    def read(self) -> List[str]:
        return self.cell_texts


class TableHeaderRow(TableRow):
    """The header row. Its cells are the ``<th>`` and ``<td>`` elements in document order,
    so a data row standing in for a missing header works too."""

    CELLS = "./th|./td"


class Table(ContainerElement):
    """A ``<table>``, materializing the list of rows (or cells) before indexing into it.

    Args:
        locator: A locator to the ``<table>`` tag.
        element: The ``<table>`` node, if already found.
    """

    BODY_ROWS = "./tbody/tr"
    DIRECT_ROWS = "./tr"
    HEADER_ROW = "./thead/tr"

    Row = TableRow
    HeaderRow = TableHeaderRow

    def __init__(self, parent, locator=None, element=None, logger=None):
        ContainerElement.__init__(self, parent, locator=locator, element=element, logger=logger)
        self._cached_header_texts: Optional[List[str]] = None
        self._header_index_map: Optional[Dict[str, int]] = None

    # ======================== HEADERS ========================
    @property
    def header_row(self) -> TableHeaderRow:
        """The ``<thead>`` row, or the first row when there is no ``<thead>``.

        Raises:
            :py:class:`webui.exceptions.NoSuchElementException` for a table without rows
        """
        header_rows = self.find_elements(self.HEADER_ROW)
        if header_rows:
            return self.HeaderRow(
                self, header_rows[0], -1, logger=create_item_logger(self.logger, "header")
            )
        rows = self.row_elements
        if not rows:
            raise NoSuchElementException(
                f"{self.name} has no rows to take the header from", description=self.name
            )
        return self.HeaderRow(self, rows[0], 0, logger=create_item_logger(self.logger, "header"))

    @property
    def header_texts(self) -> List[str]:
        """Texts of the header cells, the cached snapshot once there is one."""
        if self._cached_header_texts is not None:
            return list(self._cached_header_texts)
        return self.header_row.cell_texts

    @property
    def headers_cached(self) -> bool:
        return self._header_index_map is not None

    @logged()
    def cache_headers(self) -> None:
        """Snapshots the header texts and builds the name to index mapping used by the column
        lookups from now on. Calling it again takes a new snapshot."""
        texts = self.header_row.cell_texts
        index_map: Dict[str, int] = {}
        for i, text in enumerate(texts):
            if text in index_map:
                self.logger.warning(
                    "Duplicate header %r at columns %d and %d, using column %d",
                    text,
                    index_map[text],
                    i,
                    index_map[text],
                )
                continue
            index_map[text] = i
        self._cached_header_texts = texts
        self._header_index_map = index_map

    def column_index_of(self, name: str) -> int:
        """Index of the column whose header text is exactly ``name``.

        Raises:
            :py:class:`webui.exceptions.ColumnNotFound`
        """
        if self._header_index_map is not None:
            try:
                return self._header_index_map[name]
            except KeyError:
                raise ColumnNotFound(self.name, name) from None
        for i, text in enumerate(self.header_row.cell_texts):
            if text == name:
                return i
        raise ColumnNotFound(self.name, name)

    @property
    def column_count(self) -> int:
        """Number of header cells (first row cells without a header), ``0`` for an empty table."""
        if self._cached_header_texts is not None:
            return len(self._cached_header_texts)
        try:
            return self.header_row.cell_count
        except NoSuchElementException:
            return 0

    # ======================== ROWS ========================
    @property
    def row_elements(self) -> List[Locator]:
        return self.find_elements(self.BODY_ROWS) or self.find_elements(self.DIRECT_ROWS)

    @property
    def row_count(self) -> int:
        return len(self.row_elements)

    def __len__(self) -> int:
        return self.row_count

    @property
    def rows(self) -> List[TableRow]:
        return [self._wrap_row(element, i) for i, element in enumerate(self.row_elements)]

    def __iter__(self) -> Iterator[TableRow]:
        return iter(self.rows)

    def row_element(self, index: int) -> Locator:
        """Node of the row at ``index``.

        Raises:
            :py:class:`webui.exceptions.IndexOutOfBounds`
        """
        return _check_bounds("row", index, self.row_elements)

    def _wrap_row(self, element: Locator, index: int) -> TableRow:
        return self.Row(self, element, index, logger=create_item_logger(self.logger, index))

    def row_at(self, index: int) -> TableRow:
        return self._wrap_row(self.row_element(index), index)

    def __getitem__(self, index: int) -> TableRow:
        if not isinstance(index, int):
            raise TypeError("Table [] accepts only integers.")
        return self.row_at(index)

    # ======================== CELLS ========================
    def _cell_in_row(self, row: TableRow, column_index: int) -> Locator:
        return _check_bounds("column", column_index, row.cell_elements)

    def cell_element(self, row_index: int, column: Column) -> Locator:
        return self.row_at(row_index).cell_element(column)

    def cell_at(self, row_index: int, column: Column) -> TableCell:
        """The cell at the row index and the column index or header text.

        Raises:
            :py:class:`webui.exceptions.IndexOutOfBounds`,
            :py:class:`webui.exceptions.ColumnNotFound`
        """
        return self.row_at(row_index).cell(column)

    def cell_text(self, row_index: int, column: Column) -> str:
        return self.cell_at(row_index, column).text

    def cell_texts(self, row_index: int) -> List[str]:
        return self.row_at(row_index).cell_texts


class XPathTable(Table):
    """A :py:class:`Table` looking rows and cells up by their XPath position.

    Nothing is listed unless the position matches nothing, then the rows (or cells) are counted
    to report the same :py:class:`webui.exceptions.IndexOutOfBounds` as :py:class:`Table`.
    """

    ROWS = "./tbody/tr|./tr[not(../tbody/tr)]"

    def row_element(self, index: int) -> Locator:
        found = self.find_elements(position(self.ROWS, index)) if index >= 0 else []
        if not found:
            raise IndexOutOfBounds("row", index, self.row_count - 1)
        return found[0]

    def _cell_in_row(self, row: TableRow, column_index: int) -> Locator:
        found = row.find_elements(position(row.CELLS, column_index)) if column_index >= 0 else []
        if not found:
            raise IndexOutOfBounds("column", column_index, row.cell_count - 1)
        return found[0]
