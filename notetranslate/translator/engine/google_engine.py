# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from typing import Any

from notetranslate.translator.engine.base import EngineRequest, TranslationEngine
from notetranslate.translator.types import AUTO, TranslationRequest, TranslationResult


class GoogleEngine(TranslationEngine):
    """Unauthenticated public endpoint; no credentials to check."""
    name = "google"
    default_base_url = "https://translate.googleapis.com"

    def build_request(self, request: TranslationRequest) -> EngineRequest:
        return EngineRequest(
            method="GET",
            url=f"{self.base_url}/translate_a/single",
            params={
                "client": "gtx",
                "sl": AUTO if request.source_lang == AUTO else request.source_lang,
                "tl": request.target_lang,
                "dt": "t",
                "q": request.text,
            },
        )

    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        # [[["译文", "source", ...], ...], null, "en", ...]
        segments = data[0] or []
        text = "".join(segment[0] for segment in segments if segment and segment[0]) or request.text
        detected = data[2] if len(data) > 2 and isinstance(data[2], str) else None
        return self.success(request, text, detected_lang=detected)
