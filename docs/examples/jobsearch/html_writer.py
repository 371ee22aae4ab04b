from typing import Iterable
from typing import TextIO

HEAD = """<head>
<meta charset="utf-8"/>
<style>
table, th, td { border: 1px solid black; border-collapse: collapse; }
th, td { padding: 4px; vertical-align: top; }
</style>
</head>"""

INDENT = "  "


class SimpleHtmlWriter:
    """Writes a single HTML table to a text stream.

    Every method but :py:meth:`close` returns the writer so the calls can be chained.

    .. code-block:: python

        with open("jobs.html", "w") as f:
            writer = SimpleHtmlWriter(f).begin_html().begin_table()
            writer.write_table_head(["Title", "Salary"]).write_table_row(["Clerk", "$3,000"])
            writer.end_table().end_html()
    """

    def __init__(self, out: TextIO, head: str = HEAD) -> None:
        self.out = out
        self.head = head

    def write(self, text: str) -> "SimpleHtmlWriter":
        self.out.write(text)
        return self

    def _line(self, text: str, depth: int = 0) -> "SimpleHtmlWriter":
        return self.write(f"{INDENT * depth}{text}\n")

    def begin_html(self) -> "SimpleHtmlWriter":
        return self._line("<html>")._line(self.head)._line("<body>")

    def end_html(self) -> "SimpleHtmlWriter":
        return self._line("</body>")._line("</html>")

    def begin_table(self) -> "SimpleHtmlWriter":
        return self._line("<table>")

    def end_table(self) -> "SimpleHtmlWriter":
        return self._line("</table>")

    def write_table_head(self, headings: Iterable[str]) -> "SimpleHtmlWriter":
        self._line("<thead><tr>", 1)
        for heading in headings:
            self._line(f"<th>{heading}</th>", 2)
        return self._line("</tr></thead>", 1)

    def write_table_row(self, cells: Iterable[str]) -> "SimpleHtmlWriter":
        self._line("<tr>", 1)
        for cell in cells:
            self._line(f"<td>{cell}</td>", 2)
        return self._line("</tr>", 1)

    def close(self) -> None:
        self.out.flush()
        self.out.close()
