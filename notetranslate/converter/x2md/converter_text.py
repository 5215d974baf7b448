# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.converter.x2md.base import X2MarkdownConverter
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument


class ConverterText(X2MarkdownConverter):
    """Plain text and markdown are already canonical."""

    def convert(self, document: Document) -> MarkdownDocument:
        text = self.decode(document)
        return MarkdownDocument.from_text(text, stem=document.stem)

    def support_format(self) -> list[str]:
        return [".md", ".markdown", ".txt"]
