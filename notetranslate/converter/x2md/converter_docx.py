# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0

from io import BytesIO

import mammoth

from notetranslate.converter.x2md.base import X2MarkdownConverter, X2MarkdownConverterConfig
from notetranslate.exceptions import ParseError
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup.html2md import HtmlToMarkdown


class ConverterDocx(X2MarkdownConverter):
    """
    Word documents go through mammoth's HTML rendering and then the HTML reader,
    so tables end up as the ``[表格]`` placeholder.
    """

    def __init__(self, config: X2MarkdownConverterConfig | None = None):
        super().__init__(config=config)
        self.html2md = HtmlToMarkdown()

    def docx_to_html(self, content: bytes) -> str:
        try:
            result = mammoth.convert_to_html(BytesIO(content))
        except Exception as e:
            raise ParseError(f"Unable to read Word document: {e}") from e
        for message in result.messages:
            self.logger.warning(f"mammoth: {message.message}")
        return result.value

    def convert(self, document: Document) -> MarkdownDocument:
        self.logger.info(f"Converting {document.name} to markdown")
        html = self.docx_to_html(document.content)
        return MarkdownDocument.from_text(self.html2md.convert(html), stem=document.stem)

    def support_format(self) -> list[str]:
        return [".docx"]
