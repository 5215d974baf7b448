# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass

from notetranslate.exporter.base import Exporter, ExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.block import extract_tables
from notetranslate.markup.table import TableData, merge_tables

TableSource = TableData | list[TableData] | MarkdownDocument


@dataclass(kw_only=True)
class TableExporterConfig(ExporterConfig):
    # Combine tables sharing the first table's header into one before writing.
    merge_tables: bool = False


class TableExporter(Exporter[TableSource]):
    """
    Exports tabular data. Accepts a single table, a list of tables, or a
    markdown document whose pipe tables are extracted first.
    """

    def __init__(self, config: TableExporterConfig | None = None):
        super().__init__(config=config or TableExporterConfig())
        self.merge_tables = self.config.merge_tables

    def collect_tables(self, source: TableSource) -> list[TableData]:
        if isinstance(source, TableData):
            tables = [source]
        elif isinstance(source, MarkdownDocument):
            tables = extract_tables(source.text)
            if not tables:
                self.logger.warning(f"No pipe table found in {source.name}")
        else:
            tables = list(source)
        if self.merge_tables and len(tables) > 1:
            merged = merge_tables(tables)
            skipped = sum(1 for table in tables if table.headers != merged.headers)
            if skipped:
                self.logger.warning(f"{skipped} table(s) with a different header left out of the merge")
            tables = [merged]
        return tables

    @staticmethod
    def stem_of(source: TableSource) -> str | None:
        if isinstance(source, Document):
            return source.stem
        return None

    def export(self, document: TableSource) -> Document:
        ...
