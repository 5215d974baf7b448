# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Exception classes for notetranslate.

All library exceptions inherit from NoteTranslateError, so callers can
catch every library error in one place:

    >>> try:
    ...     importer.import_bytes(data, "xyz")
    ... except UnsupportedFormatError as e:
    ...     print(f"Format not supported: {e}")
    ... except NoteTranslateError as e:
    ...     print(f"Import failed: {e}")
"""


class NoteTranslateError(Exception):
    """Base exception for all notetranslate errors."""


class UnsupportedFormatError(NoteTranslateError):
    """
    Raised when an import extension has no converter.

    Example:
        >>> importer.import_bytes(b"...", "pptx")
        UnsupportedFormatError: Unsupported file format: .pptx
    """


class ParseError(NoteTranslateError):
    """Raised for a corrupt binary container or malformed structured input (docx, xlsx, pdf, json)."""


class FileIOError(NoteTranslateError):
    """Raised when input bytes cannot be read or decoded."""


class ConfigurationError(NoteTranslateError):
    """
    Raised when a translation engine is selected without what it needs.

    This is a caller bug, so it is raised instead of being folded into a
    failed TranslationResult.

    Example:
        >>> TranslationRouter(EngineConfig(engine="deepl")).translate("Hi", "en", "de")
        ConfigurationError: DeepL API key not configured
    """


class ProviderError(NoteTranslateError):
    """
    Raised by an engine adapter when the provider call fails.

    The router catches it and returns a TranslationResult with success=False.
    """
