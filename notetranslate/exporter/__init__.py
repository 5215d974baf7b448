# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.exporter.base import Exporter, ExporterConfig
from notetranslate.exporter.html.html2docx_exporter import HTML2DocxExporter, HTML2DocxExporterConfig
from notetranslate.exporter.md.md2docx_exporter import MD2DocxExporter, MD2DocxExporterConfig
from notetranslate.exporter.md.md2html_exporter import MD2HTMLExporter, MD2HTMLExporterConfig, MD2PrintHTMLExporter
from notetranslate.exporter.md.md2md_exporter import MD2MDExporter
from notetranslate.exporter.table.base import TableExporterConfig
from notetranslate.exporter.table.table2csv_exporter import Table2CsvExporter, Table2CsvExporterConfig
from notetranslate.exporter.table.table2xlsx_exporter import Table2XlsxExporter, Table2XlsxExporterConfig

__all__ = [
    "Exporter",
    "ExporterConfig",
    "HTML2DocxExporter",
    "HTML2DocxExporterConfig",
    "MD2DocxExporter",
    "MD2DocxExporterConfig",
    "MD2HTMLExporter",
    "MD2HTMLExporterConfig",
    "MD2MDExporter",
    "MD2PrintHTMLExporter",
    "Table2CsvExporter",
    "Table2CsvExporterConfig",
    "Table2XlsxExporter",
    "Table2XlsxExporterConfig",
    "TableExporterConfig",
]
