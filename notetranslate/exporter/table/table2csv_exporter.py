# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import csv
import io
from dataclasses import dataclass

from notetranslate.exporter.table.base import TableExporter, TableExporterConfig, TableSource
from notetranslate.ir.document import Document
from notetranslate.markup.table import TableData


@dataclass(kw_only=True)
class Table2CsvExporterConfig(TableExporterConfig):
    encoding: str = "utf-8"


class Table2CsvExporter(TableExporter):
    """Every field quoted, embedded quotes doubled, rows padded to the header width."""

    def __init__(self, config: Table2CsvExporterConfig | None = None):
        config = config or Table2CsvExporterConfig()
        super().__init__(config=config)
        self.encoding = config.encoding

    def to_csv(self, tables: list[TableData]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for index, table in enumerate(tables):
            # Tables after the first are separated by an empty line.
            if index:
                buffer.write("\n")
            writer.writerow(table.headers)
            writer.writerows(table.padded_rows())
        return buffer.getvalue()

    def export(self, document: TableSource) -> Document:
        tables = self.collect_tables(document)
        content = self.to_csv(tables).encode(self.encoding)
        return Document.from_bytes(content=content, suffix=".csv", stem=self.stem_of(document))
