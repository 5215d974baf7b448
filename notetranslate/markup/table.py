# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Pipe-table codec.

Wire format::

    | h1 | h2 |
    | --- | --- |
    | a | b |

Cells are trimmed, not escaped: a literal ``|`` inside a cell is not supported.
"""
import re
from dataclasses import dataclass, field

from notetranslate.exceptions import ParseError

_SEPARATOR_CELL = re.compile(r"^:?-+:?$")


@dataclass
class TableData:
    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)
    sheet_name: str | None = field(default=None, compare=False)

    @property
    def width(self) -> int:
        return len(self.headers)

    def padded_rows(self) -> list[list[str]]:
        """Rows padded or truncated to the header width."""
        return [pad_row(row, self.width) for row in self.rows]


def pad_row(row: list[str], width: int) -> list[str]:
    return [row[i] if i < len(row) and row[i] is not None else "" for i in range(width)]


def parse_markdown_row(line: str) -> list[str]:
    trimmed = line.strip()
    if trimmed.startswith("|"):
        trimmed = trimmed[1:]
    if trimmed.endswith("|"):
        trimmed = trimmed[:-1]
    return [cell.strip() for cell in trimmed.split("|")]


def is_separator_row(line: str) -> bool:
    if "-" not in line:
        return False
    cells = parse_markdown_row(line)
    return all(_SEPARATOR_CELL.match(cell) for cell in cells)


def parse_markdown_table(markdown: str) -> TableData:
    """
    Parse a single pipe table.

    Short body rows are padded with empty cells; longer rows are kept as they are.

    Raises:
        ParseError: if there is no header row followed by a separator row.
    """
    lines = [line for line in markdown.strip().split("\n") if line.strip()]
    if len(lines) < 2 or "|" not in lines[0]:
        raise ParseError("Markdown table needs a header row and a separator row")
    if not is_separator_row(lines[1]):
        raise ParseError(f"Second table row is not a separator: {lines[1]!r}")

    headers = parse_markdown_row(lines[0])
    rows = []
    for line in lines[2:]:
        cells = parse_markdown_row(line)
        if len(cells) < len(headers):
            cells = pad_row(cells, len(headers))
        rows.append(cells)
    return TableData(headers=headers, rows=rows)


def generate_markdown(table: TableData) -> str:
    lines = ["| " + " | ".join(table.headers) + " |",
             "| " + " | ".join("---" for _ in table.headers) + " |"]
    for row in table.padded_rows():
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines) + "\n"


def merge_tables(tables: list[TableData]) -> TableData | None:
    """
    Concatenate the rows of every table whose headers equal the first table's.

    Tables with other headers are left out. The result keeps the first table's
    sheet name. Returns None for an empty list.
    """
    if not tables:
        return None
    headers = tables[0].headers
    rows = []
    for table in tables:
        if table.headers == headers:
            rows.extend(table.rows)
    return TableData(headers=list(headers), rows=rows, sheet_name=tables[0].sheet_name)
