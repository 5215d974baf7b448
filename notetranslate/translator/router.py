# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import httpx

from notetranslate.exceptions import ConfigurationError, ProviderError
from notetranslate.translator.cache import TranslationCache
from notetranslate.translator.engine import ENGINE_REGISTRY, EngineConfig, TranslationEngine
from notetranslate.translator.engine.ai_engine import AIEngine, AITranslateFn
from notetranslate.translator.engine.baidu_engine import BaiduBridge, BaiduEngine
from notetranslate.translator.engine.google_engine import GoogleEngine
from notetranslate.translator.language import LanguageDetector
from notetranslate.translator.types import TranslationRequest, TranslationResult


class TranslationRouter:
    """
    Sends free text to the engine named by ``config.engine``.

    Missing credentials raise ConfigurationError. Provider failures never
    raise: they come back as a TranslationResult with ``success=False`` and
    are not cached.
    """

    def __init__(self, config: EngineConfig | None = None, *,
                 cache: TranslationCache | None = None,
                 ai_translate_fn: AITranslateFn | None = None,
                 client: httpx.Client | None = None,
                 async_client: httpx.AsyncClient | None = None,
                 baidu_bridge: BaiduBridge | None = None):
        self.config = config or EngineConfig()
        self.logger = self.config.logger
        self.cache = cache if cache is not None else TranslationCache()
        self.ai_translate_fn = ai_translate_fn
        self.client = client
        self.async_client = async_client
        self.baidu_bridge = baidu_bridge
        _check_engine(self.config.engine)

    @property
    def engine(self) -> str:
        return self.config.engine

    def update_config(self, **changes):
        config = replace(self.config, **changes)
        _check_engine(config.engine)
        self.config = config
        self.logger = config.logger

    def set_ai_translate_fn(self, fn: AITranslateFn | None):
        self.ai_translate_fn = fn

    def clear_cache(self):
        self.cache.clear()

    def create_engine(self, engine: str | None = None) -> TranslationEngine:
        engine = engine or self.config.engine
        engine_class = _check_engine(engine)
        config = self.config if engine == self.config.engine else replace(self.config, engine=engine)
        if engine_class is AIEngine:
            return AIEngine(config, translate_fn=self.ai_translate_fn)
        if engine_class is BaiduEngine:
            return BaiduEngine(config, bridge=self.baidu_bridge)
        return engine_class(config)

    # single request

    def _prepare(self, engine: TranslationEngine, text: str, source_lang: str,
                 target_lang: str) -> tuple[TranslationRequest, str, TranslationResult | None]:
        request = TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang, engine=engine.name)
        key = self.cache.make_key(engine.name, source_lang, target_lang, text)
        if not text.strip():
            return request, key, TranslationResult.failure(request, "Empty text")
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.debug(f"Cache hit for {engine.name}:{source_lang}:{target_lang}")
            return request, key, cached
        engine.check_config()
        return request, key, None

    def _finish(self, engine: TranslationEngine, key: str, result: TranslationResult) -> TranslationResult:
        if result.success:
            self.cache.set(key, result)
        else:
            self.logger.warning(f"Translation with {engine.name} failed: {result.error}")
        return result

    def _translate_with(self, engine: TranslationEngine, text: str, source_lang: str, target_lang: str,
                        client: httpx.Client | None) -> TranslationResult:
        request, key, early = self._prepare(engine, text, source_lang, target_lang)
        if early is not None:
            return early
        try:
            result = engine.translate(request, client=client)
        except (ProviderError, httpx.HTTPError) as e:
            result = TranslationResult.failure(request, str(e))
        return self._finish(engine, key, result)

    async def _translate_with_async(self, engine: TranslationEngine, text: str, source_lang: str,
                                    target_lang: str, client: httpx.AsyncClient | None) -> TranslationResult:
        request, key, early = self._prepare(engine, text, source_lang, target_lang)
        if early is not None:
            return early
        try:
            result = await engine.translate_async(request, client=client)
        except (ProviderError, httpx.HTTPError) as e:
            result = TranslationResult.failure(request, str(e))
        return self._finish(engine, key, result)

    def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        return self._translate_with(self.create_engine(), text, source_lang, target_lang, self.client)

    async def translate_async(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        return await self._translate_with_async(self.create_engine(), text, source_lang, target_lang,
                                                self.async_client)

    # batch

    def translate_batch(self, texts: list[str], source_lang: str, target_lang: str) -> list[TranslationResult]:
        """Translate in a thread pool. Results follow the order of ``texts``."""
        if not texts:
            return []
        engine = self.create_engine()
        self.logger.info(f"Scheduling {len(texts)} requests; engine: {engine.name}, concurrency: {self.config.concurrent}")
        if self.client is not None:
            return self._run_batch(engine, texts, source_lang, target_lang, self.client)
        with engine.new_client() as client:
            return self._run_batch(engine, texts, source_lang, target_lang, client)

    def _run_batch(self, engine: TranslationEngine, texts: list[str], source_lang: str, target_lang: str,
                   client: httpx.Client) -> list[TranslationResult]:
        with ThreadPoolExecutor(max_workers=max(1, self.config.concurrent)) as executor:
            results_iterator = executor.map(
                lambda text: self._translate_with(engine, text, source_lang, target_lang, client), texts
            )
            return list(results_iterator)

    async def translate_batch_async(self, texts: list[str], source_lang: str,
                                    target_lang: str) -> list[TranslationResult]:
        """Translate concurrently on the event loop. Results follow the order of ``texts``."""
        if not texts:
            return []
        engine = self.create_engine()
        self.logger.info(f"Scheduling {len(texts)} requests (async); engine: {engine.name}, concurrency: {self.config.concurrent}")
        if self.async_client is not None:
            return await self._gather(engine, texts, source_lang, target_lang, self.async_client)
        async with engine.new_async_client() as client:
            return await self._gather(engine, texts, source_lang, target_lang, client)

    async def _gather(self, engine: TranslationEngine, texts: list[str], source_lang: str, target_lang: str,
                      client: httpx.AsyncClient) -> list[TranslationResult]:
        semaphore = asyncio.Semaphore(max(1, self.config.concurrent))

        async def send_with_semaphore(text: str) -> TranslationResult:
            async with semaphore:
                return await self._translate_with_async(engine, text, source_lang, target_lang, client)

        tasks = [asyncio.create_task(send_with_semaphore(text)) for text in texts]
        return await asyncio.gather(*tasks)

    # language detection

    def language_detector(self, use_detected_language: bool = False) -> LanguageDetector:
        engine = GoogleEngine(replace(self.config, engine=GoogleEngine.name))
        return LanguageDetector(engine, use_detected_language=use_detected_language, client=self.client,
                                async_client=self.async_client, logger=self.logger)

    def detect_language(self, text: str) -> str:
        return self.language_detector().detect(text)

    async def detect_language_async(self, text: str) -> str:
        return await self.language_detector().detect_async(text)


def _check_engine(engine: str) -> type[TranslationEngine]:
    engine_class = ENGINE_REGISTRY.get(engine)
    if engine_class is None:
        raise ConfigurationError(f"Unknown translation engine: {engine}")
    return engine_class
