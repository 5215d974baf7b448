# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Script-range language detection with a fallback translation engine.

Ranges are tested in a fixed order, so text mixing kanji and kana is
reported as Chinese. When no range matches, the fallback engine is asked to
translate with ``source_lang="auto"``. By default its answer is discarded
and ``default_language`` is returned; pass ``use_detected_language=True`` to
return the language the provider reports instead.
"""
import re
from logging import Logger

import httpx

from notetranslate.exceptions import NoteTranslateError
from notetranslate.logger import global_logger
from notetranslate.translator.engine.base import TranslationEngine
from notetranslate.translator.types import AUTO, TranslationRequest

SCRIPT_RANGES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"[一-龥]"), "zh-CN"),
    (re.compile(r"[぀-ゟ゠-ヿ]"), "ja"),
    (re.compile(r"[가-힯]"), "ko"),
    (re.compile(r"[؀-ۿ]"), "ar"),
]


def detect_script(text: str) -> str | None:
    for pattern, language in SCRIPT_RANGES:
        if pattern.search(text):
            return language
    return None


class LanguageDetector:
    def __init__(self, fallback_engine: TranslationEngine | None = None, *,
                 use_detected_language: bool = False,
                 default_language: str = "en",
                 client: httpx.Client | None = None,
                 async_client: httpx.AsyncClient | None = None,
                 logger: Logger = global_logger):
        self.fallback_engine = fallback_engine
        self.use_detected_language = use_detected_language
        self.default_language = default_language
        self.client = client
        self.async_client = async_client
        self.logger = logger

    def _detect_request(self, text: str) -> TranslationRequest:
        return TranslationRequest(text=text, source_lang=AUTO, target_lang=self.default_language,
                                  engine=self.fallback_engine.name)

    def detect(self, text: str) -> str:
        language = detect_script(text)
        if language is not None:
            return language
        if self.fallback_engine is None or not text.strip():
            return self.default_language
        try:
            result = self.fallback_engine.translate(self._detect_request(text), client=self.client)
        except (NoteTranslateError, httpx.HTTPError) as e:
            self.logger.warning(f"Language fallback failed, using {self.default_language}: {e}")
            return self.default_language
        return self._from_fallback(result.detected_lang)

    async def detect_async(self, text: str) -> str:
        language = detect_script(text)
        if language is not None:
            return language
        if self.fallback_engine is None or not text.strip():
            return self.default_language
        try:
            result = await self.fallback_engine.translate_async(self._detect_request(text), client=self.async_client)
        except (NoteTranslateError, httpx.HTTPError) as e:
            self.logger.warning(f"Language fallback failed, using {self.default_language}: {e}")
            return self.default_language
        return self._from_fallback(result.detected_lang)

    def _from_fallback(self, detected: str | None) -> str:
        if self.use_detected_language and detected:
            return detected
        return self.default_language
