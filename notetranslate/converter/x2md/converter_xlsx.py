# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import csv
import io
from dataclasses import dataclass
from datetime import date, datetime, time
from io import BytesIO

import openpyxl

from notetranslate.converter.x2md.base import X2MarkdownConverter, X2MarkdownConverterConfig
from notetranslate.exceptions import ParseError
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.table import TableData, generate_markdown


@dataclass(kw_only=True)
class ConverterXlsxConfig(X2MarkdownConverterConfig):
    # Sheets with this name get no "## <name>" heading.
    default_sheet_name: str = "Sheet1"


class ConverterXlsx(X2MarkdownConverter):
    def __init__(self, config: ConverterXlsxConfig | None = None):
        config = config or ConverterXlsxConfig()
        super().__init__(config=config)
        self.default_sheet_name = config.default_sheet_name

    def read_tables(self, document: Document) -> list[TableData]:
        """One TableData per sheet, in workbook order. Row 0 is the header."""
        if document.suffix == ".csv":
            return [self._csv_table(document)]
        try:
            workbook = openpyxl.load_workbook(BytesIO(document.content), read_only=True, data_only=True)
        except Exception as e:
            raise ParseError(f"Unable to read workbook {document.name}: {e}") from e
        try:
            tables = []
            for sheet in workbook.worksheets:
                rows = [
                    [cell_to_text(value) for value in row]
                    for row in sheet.iter_rows(values_only=True)
                ]
                tables.append(_to_table(rows, sheet.title))
            return tables
        finally:
            workbook.close()

    def _csv_table(self, document: Document) -> TableData:
        text = self.decode(document)
        rows = [[cell_to_text(cell) for cell in row] for row in csv.reader(io.StringIO(text))]
        return _to_table(rows, None)

    def convert(self, document: Document) -> MarkdownDocument:
        tables = self.read_tables(document)
        self.logger.info(f"Read {len(tables)} sheet(s) from {document.name}")
        parts = []
        for table in tables:
            if table.sheet_name and table.sheet_name != self.default_sheet_name:
                parts.append(f"## {table.sheet_name}\n")
            if table.headers:
                parts.append(generate_markdown(table))
        return MarkdownDocument.from_text("\n".join(parts), stem=document.stem)

    def support_format(self) -> list[str]:
        return [".xlsx", ".csv"]


def _to_table(rows: list[list[str]], sheet_name: str | None) -> TableData:
    rows = [row for row in rows if any(cell for cell in row)]
    if not rows:
        return TableData(headers=[], rows=[], sheet_name=sheet_name)
    return TableData(headers=rows[0], rows=rows[1:], sheet_name=sheet_name)


def cell_to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    # A pipe table cell cannot hold a line break.
    return " ".join(str(value).splitlines())
