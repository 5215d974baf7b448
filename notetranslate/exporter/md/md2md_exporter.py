# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.exporter.md.base import MDExporter
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument


class MD2MDExporter(MDExporter):
    """Canonical text is already markdown."""

    def export(self, document: MarkdownDocument) -> Document:
        return Document.from_bytes(suffix=".md", content=document.content, stem=document.stem)
