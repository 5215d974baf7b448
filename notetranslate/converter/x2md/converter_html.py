# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.converter.x2md.base import X2MarkdownConverter, X2MarkdownConverterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.html2md import HtmlToMarkdown


class ConverterHtml(X2MarkdownConverter):
    def __init__(self, config: X2MarkdownConverterConfig | None = None):
        super().__init__(config=config)
        self.html2md = HtmlToMarkdown()

    def convert(self, document: Document) -> MarkdownDocument:
        html = self.decode(document)
        markdown = self.html2md.convert(html)
        self.logger.debug(f"Converted {document.name} from html: {len(html)} -> {len(markdown)} chars")
        return MarkdownDocument.from_text(markdown, stem=document.stem)

    def support_format(self) -> list[str]:
        return [".html", ".htm"]
