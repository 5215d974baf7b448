# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass
from io import BytesIO

import openpyxl
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from notetranslate.exporter.table.base import TableExporter, TableExporterConfig, TableSource
from notetranslate.ir.document import Document
from notetranslate.markup.table import TableData


@dataclass(kw_only=True)
class Table2XlsxExporterConfig(TableExporterConfig):
    max_column_width: int = 50


class Table2XlsxExporter(TableExporter):
    """One sheet per table: headers in row 1, body rows below, padded to the header width."""

    def __init__(self, config: Table2XlsxExporterConfig | None = None):
        config = config or Table2XlsxExporterConfig()
        super().__init__(config=config)
        self.max_column_width = config.max_column_width

    def build(self, tables: list[TableData]) -> openpyxl.Workbook:
        workbook = openpyxl.Workbook()
        workbook.remove(workbook.active)
        if not tables:
            workbook.create_sheet("Sheet1")
            return workbook
        used_names = set()
        for index, table in enumerate(tables, start=1):
            name = table.sheet_name if table.sheet_name and table.sheet_name not in used_names else f"Sheet{index}"
            used_names.add(name)
            sheet = workbook.create_sheet(name)
            sheet.append(table.headers)
            for row in table.padded_rows():
                sheet.append(row)
            self._fit_columns(sheet, table)
        return workbook

    def _fit_columns(self, sheet: Worksheet, table: TableData):
        for col_index in range(table.width):
            values = [table.headers[col_index]] + [row[col_index] for row in table.padded_rows()]
            width = max(len(value) for value in values)
            sheet.column_dimensions[get_column_letter(col_index + 1)].width = min(width + 2, self.max_column_width)

    def export(self, document: TableSource) -> Document:
        tables = self.collect_tables(document)
        self.logger.info(f"Writing {len(tables)} table(s) to xlsx")
        workbook = self.build(tables)
        workbook_output_stream = BytesIO()
        workbook.save(workbook_output_stream)
        return Document.from_bytes(content=workbook_output_stream.getvalue(), suffix=".xlsx", stem=self.stem_of(document))
