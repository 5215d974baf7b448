# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

import os

MESSAGES = {
    "en": {
        "generated": "Generated: {path}",
        "file_not_found": "File not found: {path}",
        "unsupported_format": "Unsupported format: {error}",
        "import_failed": "Import failed: {error}",
        "export_failed": "Export {ftype} failed: {error}",
        "no_tables": "No table found in {path}; the {ftype} file is empty.",
        "config_error": "Configuration error: {error}",
        "translate_failed": "Translation failed ({engine}): {error}",
        "detected_language": "Detected language: {code}",
        "env_loaded": "Loaded {count} variable(s) from {path}",
    },
    "zh": {
        "generated": "已生成: {path}",
        "file_not_found": "找不到文件: {path}",
        "unsupported_format": "不支持的格式: {error}",
        "import_failed": "导入失败: {error}",
        "export_failed": "导出 {ftype} 失败: {error}",
        "no_tables": "{path} 中没有表格，生成的 {ftype} 文件为空。",
        "config_error": "配置错误: {error}",
        "translate_failed": "翻译失败 ({engine}): {error}",
        "detected_language": "检测到的语言: {code}",
        "env_loaded": "已从 {path} 加载 {count} 个变量",
    },
}


def t(key: str, *, lang: str | None = None, **kwargs) -> str:
    l = (lang or os.getenv("NOTETRANSLATE_LANG") or "en").lower()
    if l not in MESSAGES:
        l = "en"
    msg = MESSAGES[l].get(key) or MESSAGES["en"].get(key) or key
    try:
        return msg.format(**kwargs)
    except (KeyError, IndexError):
        return msg
