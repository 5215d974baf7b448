# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass
from typing import Literal, NamedTuple

EngineType = Literal["baidu", "youdao", "google", "deepl", "ai"]

AUTO = "auto"


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source_lang: str
    target_lang: str
    engine: str


@dataclass(frozen=True)
class TranslationResult:
    success: bool
    text: str
    source_lang: str
    target_lang: str
    engine: str
    error: str | None = None
    # Language reported by the provider, when it reports one.
    detected_lang: str | None = None

    @classmethod
    def failure(cls, request: TranslationRequest, error: str) -> "TranslationResult":
        return cls(
            success=False,
            text="",
            source_lang=request.source_lang,
            target_lang=request.target_lang,
            engine=request.engine,
            error=error,
        )


class LanguageInfo(NamedTuple):
    code: str
    name: str
    name_cn: str


SUPPORTED_LANGUAGES: list[LanguageInfo] = [
    LanguageInfo("auto", "Auto Detect", "自动检测"),
    LanguageInfo("zh-CN", "Chinese (Simplified)", "简体中文"),
    LanguageInfo("zh-TW", "Chinese (Traditional)", "繁体中文"),
    LanguageInfo("en", "English", "英语"),
    LanguageInfo("ja", "Japanese", "日语"),
    LanguageInfo("ko", "Korean", "韩语"),
    LanguageInfo("fr", "French", "法语"),
    LanguageInfo("de", "German", "德语"),
    LanguageInfo("es", "Spanish", "西班牙语"),
    LanguageInfo("it", "Italian", "意大利语"),
    LanguageInfo("ru", "Russian", "俄语"),
    LanguageInfo("pt", "Portuguese", "葡萄牙语"),
    LanguageInfo("nl", "Dutch", "荷兰语"),
    LanguageInfo("pl", "Polish", "波兰语"),
    LanguageInfo("tr", "Turkish", "土耳其语"),
    LanguageInfo("ar", "Arabic", "阿拉伯语"),
    LanguageInfo("hi", "Hindi", "印地语"),
    LanguageInfo("th", "Thai", "泰语"),
    LanguageInfo("vi", "Vietnamese", "越南语"),
    LanguageInfo("id", "Indonesian", "印尼语"),
    LanguageInfo("uk", "Ukrainian", "乌克兰语"),
    LanguageInfo("cs", "Czech", "捷克语"),
    LanguageInfo("sv", "Swedish", "瑞典语"),
    LanguageInfo("da", "Danish", "丹麦语"),
    LanguageInfo("fi", "Finnish", "芬兰语"),
    LanguageInfo("no", "Norwegian", "挪威语"),
    LanguageInfo("hu", "Hungarian", "匈牙利语"),
    LanguageInfo("el", "Greek", "希腊语"),
    LanguageInfo("he", "Hebrew", "希伯来语"),
    LanguageInfo("ro", "Romanian", "罗马尼亚语"),
]
