# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from typing import Any

from notetranslate.exceptions import ConfigurationError
from notetranslate.translator.engine.base import EngineRequest, TranslationEngine
from notetranslate.translator.types import AUTO, TranslationRequest, TranslationResult

DEEPL_LANG_MAP = {
    "zh-CN": "ZH",
    "zh-TW": "ZH",
    "en": "EN",
    "ja": "JA",
    "ko": "KO",
    "fr": "FR",
    "de": "DE",
    "es": "ES",
    "it": "IT",
    "ru": "RU",
    "pt": "PT",
    "nl": "NL",
    "pl": "PL",
}


def to_deepl_lang(lang: str) -> str:
    return DEEPL_LANG_MAP.get(lang, "EN")


class DeepLEngine(TranslationEngine):
    name = "deepl"
    default_base_url = "https://api-free.deepl.com"

    def check_config(self):
        if not self.config.api_key:
            raise ConfigurationError("DeepL API key not configured")

    def build_request(self, request: TranslationRequest) -> EngineRequest:
        data = {"text": request.text, "target_lang": to_deepl_lang(request.target_lang)}
        if request.source_lang != AUTO:
            data["source_lang"] = to_deepl_lang(request.source_lang)
        return EngineRequest(
            method="POST",
            url=f"{self.base_url}/v2/translate",
            data=data,
            headers={"Authorization": f"DeepL-Auth-Key {self.config.api_key}"},
        )

    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        translation = data["translations"][0]
        return self.success(request, translation["text"], detected_lang=translation.get("detected_source_language"))
