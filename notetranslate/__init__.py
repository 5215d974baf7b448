# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
__version__ = "0.1.0"

from notetranslate.converter.importer import FormatImporter, ImportResult
from notetranslate.exceptions import (
    ConfigurationError,
    FileIOError,
    NoteTranslateError,
    ParseError,
    ProviderError,
    UnsupportedFormatError,
)
from notetranslate.ir.document import Document
from notetranslate.ir.markdown_document import MarkdownDocument
from notetranslate.markup import BlockConverter, InlineFormatter, TableData, html_to_markdown
from notetranslate.translator import (
    EngineConfig,
    LanguageDetector,
    TranslationCache,
    TranslationResult,
    TranslationRouter,
)

__all__ = [
    "BlockConverter",
    "ConfigurationError",
    "Document",
    "EngineConfig",
    "FileIOError",
    "FormatImporter",
    "ImportResult",
    "InlineFormatter",
    "LanguageDetector",
    "MarkdownDocument",
    "NoteTranslateError",
    "ParseError",
    "ProviderError",
    "TableData",
    "TranslationCache",
    "TranslationResult",
    "TranslationRouter",
    "UnsupportedFormatError",
    "__version__",
]
