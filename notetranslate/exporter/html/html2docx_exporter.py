# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass

from notetranslate.exceptions import FileIOError
from notetranslate.exporter.base import Exporter
from notetranslate.exporter.md.md2docx_exporter import MD2DocxExporter, MD2DocxExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.html2md import HtmlToMarkdown


@dataclass(kw_only=True)
class HTML2DocxExporterConfig(MD2DocxExporterConfig):
    encoding: str = "utf-8"


class HTML2DocxExporter(Exporter[Document]):
    """
    Word export for editor HTML. The HTML is read into canonical markdown
    first, so the result has the same title, divider and paragraph layout as
    a markdown export.
    """

    def __init__(self, config: HTML2DocxExporterConfig | None = None):
        config = config or HTML2DocxExporterConfig()
        super().__init__(config=config)
        self.encoding = config.encoding
        self.html2md = HtmlToMarkdown()
        self.md2docx = MD2DocxExporter(config)

    def export(self, document: Document) -> Document:
        try:
            html = document.content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise FileIOError(f"Unable to decode {document.name} as {self.encoding}: {e}") from e
        markdown = self.html2md.convert(html)
        self.logger.debug(f"Read {document.name} as markdown for docx export: {len(markdown)} chars")
        return self.md2docx.export(MarkdownDocument.from_text(markdown, stem=document.stem))
