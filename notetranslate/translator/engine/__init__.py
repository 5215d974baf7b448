# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from typing import Type

from notetranslate.translator.engine.ai_engine import AIEngine
from notetranslate.translator.engine.baidu_engine import BaiduEngine
from notetranslate.translator.engine.base import EngineConfig, EngineRequest, TranslationEngine
from notetranslate.translator.engine.deepl_engine import DeepLEngine
from notetranslate.translator.engine.google_engine import GoogleEngine
from notetranslate.translator.engine.youdao_engine import YoudaoEngine

ENGINE_REGISTRY: dict[str, Type[TranslationEngine]] = {
    engine.name: engine
    for engine in (BaiduEngine, YoudaoEngine, GoogleEngine, DeepLEngine, AIEngine)
}

__all__ = [
    "AIEngine",
    "BaiduEngine",
    "DeepLEngine",
    "ENGINE_REGISTRY",
    "EngineConfig",
    "EngineRequest",
    "GoogleEngine",
    "TranslationEngine",
    "YoudaoEngine",
]
