# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass

from notetranslate.exporter.base import Exporter, ExporterConfig
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument


@dataclass(kw_only=True)
class MDExporterConfig(ExporterConfig):
    # Document title; the document stem is used when unset.
    title: str | None = None


class MDExporter(Exporter[MarkdownDocument]):
    def __init__(self, config: MDExporterConfig | None = None):
        super().__init__(config=config or MDExporterConfig())
        self.title = self.config.title

    def resolve_title(self, document: MarkdownDocument) -> str:
        return self.title or document.stem

    def export(self, document: MarkdownDocument) -> Document:
        ...
