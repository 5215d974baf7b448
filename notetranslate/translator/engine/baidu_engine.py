# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Baidu general translation API.

Requests are signed with ``md5(appid + q + salt + secret)``. When the host
supplies a bridge callable (a desktop shell forwarding the call to avoid
browser CORS), the bridge is used instead of HTTP.
"""
import hashlib
import inspect
import time
from typing import Any, Awaitable, Callable, Mapping

import httpx

from notetranslate.exceptions import ConfigurationError, ProviderError
from notetranslate.translator.engine.base import EngineConfig, EngineRequest, TranslationEngine, run_sync
from notetranslate.translator.types import AUTO, TranslationRequest, TranslationResult

# (text, source_lang, target_lang, app_id, secret_key) -> {"success", "text", "error"}
BaiduBridge = Callable[[str, str, str, str, str], Mapping[str, Any] | Awaitable[Mapping[str, Any]]]

BAIDU_LANG_MAP = {
    "zh-CN": "zh",
    "zh-TW": "cht",
    "en": "en",
    "ja": "jp",
    "ko": "kor",
    "fr": "fra",
    "de": "de",
    "es": "spa",
    "it": "it",
    "ru": "ru",
    "pt": "pt",
    "nl": "nl",
    "pl": "pl",
    "tr": "tr",
    "ar": "ara",
    "hi": "hi",
    "th": "th",
    "vi": "vie",
    "id": "id",
}


def md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def baidu_sign(app_id: str, text: str, salt: str, secret_key: str) -> str:
    return md5_hex(f"{app_id}{text}{salt}{secret_key}")


def to_baidu_source(lang: str) -> str:
    if lang == AUTO:
        return AUTO
    return BAIDU_LANG_MAP.get(lang, AUTO)


def to_baidu_target(lang: str) -> str:
    return BAIDU_LANG_MAP.get(lang, "zh")


class BaiduEngine(TranslationEngine):
    name = "baidu"
    default_base_url = "https://fanyi-api.baidu.com"

    def __init__(self, config: EngineConfig, bridge: BaiduBridge | None = None):
        super().__init__(config)
        self.bridge = bridge

    def check_config(self):
        if not self.config.app_id or not self.config.secret_key:
            raise ConfigurationError("Baidu API credentials not configured")

    def build_request(self, request: TranslationRequest) -> EngineRequest:
        salt = str(int(time.time() * 1000))
        return EngineRequest(
            method="POST",
            url=f"{self.base_url}/api/trans/vip/translate",
            data={
                "q": request.text,
                "from": to_baidu_source(request.source_lang),
                "to": to_baidu_target(request.target_lang),
                "appid": self.config.app_id,
                "salt": salt,
                "sign": baidu_sign(self.config.app_id, request.text, salt, self.config.secret_key),
            },
        )

    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        if data.get("error_code") and str(data["error_code"]) != "52000":
            raise ProviderError(f"百度翻译错误: {data.get('error_msg', data['error_code'])}")
        segments = data.get("trans_result") or []
        # One segment per input line.
        text = "\n".join(segment["dst"] for segment in segments) or request.text
        return self.success(request, text, detected_lang=data.get("from"))

    def translate(self, request: TranslationRequest, client: httpx.Client | None = None) -> TranslationResult:
        if self.bridge is None:
            return super().translate(request, client)
        try:
            reply = self._call_bridge(request)
            if inspect.isawaitable(reply):
                reply = run_sync(reply)
        except Exception as e:
            self.logger.error(f"Baidu bridge failed: {e!r}")
            raise ProviderError(f"Baidu bridge failed: {e}") from e
        return self._bridge_result(request, reply)

    async def translate_async(self, request: TranslationRequest,
                              client: httpx.AsyncClient | None = None) -> TranslationResult:
        if self.bridge is None:
            return await super().translate_async(request, client)
        try:
            reply = self._call_bridge(request)
            if inspect.isawaitable(reply):
                reply = await reply
        except Exception as e:
            self.logger.error(f"Baidu bridge failed (async): {e!r}")
            raise ProviderError(f"Baidu bridge failed: {e}") from e
        return self._bridge_result(request, reply)

    def _call_bridge(self, request: TranslationRequest):
        return self.bridge(request.text, request.source_lang, request.target_lang,
                           self.config.app_id, self.config.secret_key)

    def _bridge_result(self, request: TranslationRequest, reply: Any) -> TranslationResult:
        if not isinstance(reply, Mapping):
            raise ProviderError(f"Unexpected Baidu bridge reply: {reply!r}")
        if not reply.get("success"):
            raise ProviderError(reply.get("error") or "翻译失败")
        return self.success(request, reply.get("text") or request.text)
