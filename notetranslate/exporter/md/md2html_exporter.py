# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass, replace

import jinja2

from notetranslate.exporter.md.base import MDExporter, MDExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.block import BlockConverter
from notetranslate.utils.resource_utils import resource_path


@dataclass(kw_only=True)
class MD2HTMLExporterConfig(MDExporterConfig):
    lang: str = "zh-CN"
    print_mode: bool = False
    page_margin: str = "2cm"


class MD2HTMLExporter(MDExporter):
    def __init__(self, config: MD2HTMLExporterConfig | None = None):
        config = config or MD2HTMLExporterConfig()
        super().__init__(config=config)
        self.lang = config.lang
        self.print_mode = config.print_mode
        self.page_margin = config.page_margin
        self.block_converter = BlockConverter()

    def render(self, canonical: str, title: str) -> str:
        html_template = resource_path("template/document.html").read_text(encoding="utf-8")
        return jinja2.Template(html_template).render(
            lang=self.lang,
            title=title,
            body=self.block_converter.to_html(canonical),
            print_mode=self.print_mode,
            page_margin=self.page_margin,
        )

    def export(self, document: MarkdownDocument) -> Document:
        render = self.render(document.text, self.resolve_title(document))
        return Document.from_bytes(content=render.encode("utf-8"), suffix=".html", stem=document.stem)


class MD2PrintHTMLExporter(MD2HTMLExporter):
    """
    Print-ready HTML standing in for PDF export. Rasterizing it is left to the
    host's print pipeline.
    """

    def __init__(self, config: MD2HTMLExporterConfig | None = None):
        super().__init__(config=replace(config or MD2HTMLExporterConfig(), print_mode=True))
