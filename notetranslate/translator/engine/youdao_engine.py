# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import time
import uuid
from typing import Any

from notetranslate.exceptions import ConfigurationError
from notetranslate.translator.engine.baidu_engine import md5_hex
from notetranslate.translator.engine.base import EngineRequest, TranslationEngine
from notetranslate.translator.types import AUTO, TranslationRequest, TranslationResult

YOUDAO_LANG_MAP = {
    "zh-CN": "zh-CHS",
    "zh-TW": "zh-CHT",
}


def to_youdao_lang(lang: str) -> str:
    return YOUDAO_LANG_MAP.get(lang, lang)


def youdao_sign(app_key: str, text: str, salt: str, curtime: str, secret_key: str) -> str:
    """v3 signature: ``md5(appKey + md5(q) + salt + curtime + secret)``."""
    return md5_hex(f"{app_key}{md5_hex(text)}{salt}{curtime}{secret_key}")


class YoudaoEngine(TranslationEngine):
    name = "youdao"
    default_base_url = "https://openapi.youdao.com"

    def check_config(self):
        if not self.config.app_id or not self.config.secret_key:
            raise ConfigurationError("Youdao API credentials not configured")

    def build_request(self, request: TranslationRequest) -> EngineRequest:
        salt = uuid.uuid4().hex[:8]
        curtime = str(int(time.time()))
        return EngineRequest(
            method="POST",
            url=f"{self.base_url}/api",
            params={
                "q": request.text,
                "from": AUTO if request.source_lang == AUTO else to_youdao_lang(request.source_lang),
                "to": to_youdao_lang(request.target_lang),
                "appKey": self.config.app_id,
                "salt": salt,
                "curtime": curtime,
                "sign": youdao_sign(self.config.app_id, request.text, salt, curtime, self.config.secret_key),
                "signType": "v3",
            },
        )

    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        error_code = str(data.get("errorCode", ""))
        if error_code != "0":
            # A provider-level refusal, reported as a result rather than raised.
            self.logger.warning(f"youdao returned error code {error_code}")
            return TranslationResult.failure(request, f"Error code: {error_code}")
        translation = data.get("translation") or [request.text]
        return self.success(request, translation[0])
