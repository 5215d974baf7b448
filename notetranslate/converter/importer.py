# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Extension-based dispatch from raw input to canonical markdown.

Note: binary converters (mammoth, openpyxl, PyMuPDF) are imported lazily
inside _get_converter_factory so importing plain text never pulls them in.
"""
from dataclasses import dataclass
from logging import Logger
from pathlib import Path
from typing import Type

from notetranslate.converter.x2md.base import X2MarkdownConverter, X2MarkdownConverterConfig
from notetranslate.exceptions import UnsupportedFormatError
from notetranslate.ir.document import Document, normalize_suffix
from notetranslate.logger import global_logger

SUPPORTED_IMPORT_FORMATS = (
    ".md", ".markdown", ".txt", ".html", ".htm", ".docx", ".xlsx", ".csv", ".pdf", ".json",
)


@dataclass(frozen=True)
class ImportResult:
    text: str
    extension: str  # without the leading dot


@dataclass(kw_only=True)
class FormatImporterConfig:
    logger: Logger = global_logger
    encoding: str = "utf-8"


class FormatImporter:
    def __init__(self, config: FormatImporterConfig | None = None):
        self.config = config or FormatImporterConfig()
        self.logger = self.config.logger
        self._converters: dict[str, X2MarkdownConverter] = {}

    @staticmethod
    def supported_formats() -> list[str]:
        return list(SUPPORTED_IMPORT_FORMATS)

    def _get_converter_factory(self, suffix: str) -> tuple[Type[X2MarkdownConverter], Type[X2MarkdownConverterConfig]]:
        if suffix in (".md", ".markdown", ".txt"):
            from notetranslate.converter.x2md.converter_text import ConverterText
            return ConverterText, X2MarkdownConverterConfig
        if suffix in (".html", ".htm"):
            from notetranslate.converter.x2md.converter_html import ConverterHtml
            return ConverterHtml, X2MarkdownConverterConfig
        if suffix == ".docx":
            from notetranslate.converter.x2md.converter_docx import ConverterDocx
            return ConverterDocx, X2MarkdownConverterConfig
        if suffix in (".xlsx", ".csv"):
            from notetranslate.converter.x2md.converter_xlsx import ConverterXlsx, ConverterXlsxConfig
            return ConverterXlsx, ConverterXlsxConfig
        if suffix == ".pdf":
            from notetranslate.converter.x2md.converter_pdf import ConverterPdf, ConverterPdfConfig
            return ConverterPdf, ConverterPdfConfig
        if suffix == ".json":
            from notetranslate.converter.x2md.converter_json import ConverterJson
            return ConverterJson, X2MarkdownConverterConfig
        raise UnsupportedFormatError(f"Unsupported file format: {suffix or '(none)'}")

    def get_converter(self, extension: str) -> X2MarkdownConverter:
        suffix = normalize_suffix(extension)
        if suffix not in self._converters:
            converter_class, config_class = self._get_converter_factory(suffix)
            config = config_class(logger=self.logger, encoding=self.config.encoding)
            self._converters[suffix] = converter_class(config)
        return self._converters[suffix]

    def import_document(self, document: Document) -> ImportResult:
        converter = self.get_converter(document.suffix)
        markdown_document = converter.convert(document)
        return ImportResult(text=markdown_document.text, extension=document.extension)

    def import_bytes(self, content: bytes, extension: str, stem: str | None = None) -> ImportResult:
        return self.import_document(Document.from_bytes(content=content, suffix=extension, stem=stem))

    def import_path(self, path: Path | str) -> ImportResult:
        document = Document.from_path(path)
        self.logger.info(f"Importing {document.name}")
        return self.import_document(document)

    async def import_bytes_async(self, content: bytes, extension: str, stem: str | None = None) -> ImportResult:
        document = Document.from_bytes(content=content, suffix=extension, stem=stem)
        converter = self.get_converter(document.suffix)
        markdown_document = await converter.convert_async(document)
        return ImportResult(text=markdown_document.text, extension=document.extension)
