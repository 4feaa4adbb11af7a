"""Delimited-text parsing into header-indexed tables.

The data files are hand-maintained, comma separated and never contain
escaped quotes or embedded commas, so the parsing here is deliberately
simple: split on newlines, split on commas, trim each cell and drop one
pair of surrounding quotes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

_NEWLINE = re.compile(r"\r\n|\r")
_QUOTES = ('"', "'")
_INTEGER = re.compile(r"-?[0-9]+")


def clean_cell(cell: str) -> str:
    """Trim a cell and strip a single matching pair of quotes around it."""
    value = cell.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        value = value[1:-1]
    return value


def clean_header(header: str) -> str:
    return clean_cell(header).upper()


def parse_integer(value: str) -> Optional[int]:
    """Parse a plain base-10 integer, optionally negative; None otherwise.

    Only ASCII digits are accepted, so "+4", "1_000" and non-Latin digits
    that ``int()`` would take are rejected.
    """
    if _INTEGER.fullmatch(value) is None:
        return None
    return int(value)


@dataclass
class Table:
    """A parsed table of string cells.

    Attributes:
        headers: Uppercase column headers (empty for header-less tables)
        rows: Body rows; ``rows[i][j]`` is the j-th cell of the i-th
            non-header line
    """

    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    _header_to_col: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        headers, self.headers = self.headers, []
        for header in headers:
            self.add_header(header)

    def add_header(self, header: str) -> None:
        """Append a column header; a header already present is ignored."""
        header = clean_header(header)
        if header not in self._header_to_col:
            self._header_to_col[header] = len(self.headers)
            self.headers.append(header)

    def has_header(self, header: str) -> bool:
        return clean_header(header) in self._header_to_col

    def column_index(self, header: str) -> Optional[int]:
        """Return the index of ``header`` (case-insensitive), or None."""
        return self._header_to_col.get(clean_header(header))

    @property
    def has_headers(self) -> bool:
        return len(self.headers) != 0

    def add_row(self, cells: Iterable[str]) -> None:
        self.rows.append([clean_cell(cell) for cell in cells])

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[List[str]]:
        return iter(self.rows)

    def pretty(self) -> str:
        """Render the table with every cell padded to the same width."""
        cells = [*self.headers, *(cell for row in self.rows for cell in row)]
        width = max((len(cell) for cell in cells), default=0)

        def join(row: List[str]) -> str:
            return ", ".join(cell.ljust(width) for cell in row)

        lines = [join(self.headers)] if self.headers else []
        lines.extend(join(row) for row in self.rows)
        return "\n".join(lines)


def parse_table(text: str, has_headers: bool = True) -> Table:
    """Parse comma separated text into a Table.

    Parameters
    ----------
    text:
        Raw file contents. ``\\r\\n``, ``\\n`` and ``\\r`` are all
        accepted as line breaks; blank lines are skipped.
    has_headers:
        Whether the first line holds the column headers.

    Returns
    -------
    Table
        The parsed table. Empty input yields an empty table.
    """
    lines = [line for line in _NEWLINE.sub("\n", text).split("\n") if line.strip()]
    table = Table()
    if not lines:
        return table

    if has_headers:
        for header in lines.pop(0).split(","):
            table.add_header(header)

    for line in lines:
        table.add_row(line.split(","))

    return table
