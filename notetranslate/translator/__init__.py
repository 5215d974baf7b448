# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from notetranslate.translator.cache import TranslationCache
from notetranslate.translator.engine import ENGINE_REGISTRY, EngineConfig
from notetranslate.translator.language import LanguageDetector, detect_script
from notetranslate.translator.router import TranslationRouter
from notetranslate.translator.types import (
    SUPPORTED_LANGUAGES,
    EngineType,
    LanguageInfo,
    TranslationRequest,
    TranslationResult,
)

__all__ = [
    "ENGINE_REGISTRY",
    "EngineConfig",
    "EngineType",
    "LanguageDetector",
    "LanguageInfo",
    "SUPPORTED_LANGUAGES",
    "TranslationCache",
    "TranslationRequest",
    "TranslationResult",
    "TranslationRouter",
    "detect_script",
]
