# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
"""
Delegates translation to a caller-supplied callback, typically backed by an LLM.
The callback takes ``(text, source_lang, target_lang)`` and returns the
translated text, either directly or as an awaitable.
"""
import asyncio
import inspect
from typing import Any, Awaitable, Callable

import httpx

from notetranslate.exceptions import ConfigurationError, ProviderError
from notetranslate.translator.engine.base import EngineConfig, EngineRequest, TranslationEngine, run_sync
from notetranslate.translator.types import TranslationRequest, TranslationResult

AITranslateFn = Callable[[str, str, str], str | Awaitable[str]]


class AIEngine(TranslationEngine):
    name = "ai"

    def __init__(self, config: EngineConfig, translate_fn: AITranslateFn | None = None):
        super().__init__(config)
        self.translate_fn = translate_fn

    def check_config(self):
        if self.translate_fn is None:
            raise ConfigurationError("AI translation function not configured")

    def build_request(self, request: TranslationRequest) -> EngineRequest:
        raise NotImplementedError("The AI engine has no HTTP contract")

    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        return self.success(request, str(data))

    def translate(self, request: TranslationRequest, client: httpx.Client | None = None) -> TranslationResult:
        self.check_config()
        try:
            text = self.translate_fn(request.text, request.source_lang, request.target_lang)
            # Plain callables may still hand back a coroutine, e.g. a lambda around an async client.
            if inspect.isawaitable(text):
                text = run_sync(text)
        except Exception as e:
            self.logger.error(f"AI translation failed: {e!r}")
            raise ProviderError(f"AI translation failed: {e}") from e
        return self.parse_response(request, text)

    async def translate_async(self, request: TranslationRequest,
                              client: httpx.AsyncClient | None = None) -> TranslationResult:
        self.check_config()
        try:
            if inspect.iscoroutinefunction(self.translate_fn):
                text = self.translate_fn(request.text, request.source_lang, request.target_lang)
            else:
                text = await asyncio.to_thread(self.translate_fn, request.text, request.source_lang,
                                               request.target_lang)
            if inspect.isawaitable(text):
                text = await text
        except Exception as e:
            self.logger.error(f"AI translation failed (async): {e!r}")
            raise ProviderError(f"AI translation failed: {e}") from e
        return self.parse_response(request, text)
