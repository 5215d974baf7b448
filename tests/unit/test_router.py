"""
Unit tests for the translation router: dispatch, caching and batching.
"""

import asyncio

import httpx
import pytest

from notetranslate.exceptions import ConfigurationError
from notetranslate.translator.cache import TranslationCache
from notetranslate.translator.engine.base import EngineConfig
from notetranslate.translator.router import TranslationRouter


def echo_google(request: httpx.Request) -> httpx.Response:
    """Reply like the public Google endpoint, prefixing the query."""
    text = request.url.params["q"]
    return httpx.Response(200, json=[[[f"T:{text}", text]], None, "en"])


@pytest.fixture
def google_config() -> EngineConfig:
    return EngineConfig(engine="google", concurrent=4)


class TestConfiguration:
    def test_unknown_engine(self):
        with pytest.raises(ConfigurationError, match="Unknown translation engine: bing"):
            TranslationRouter(EngineConfig(engine="bing"))

    def test_update_config(self, google_config):
        router = TranslationRouter(google_config)
        router.update_config(engine="deepl", api_key="k")
        assert router.engine == "deepl"
        assert router.config.api_key == "k"

    def test_update_config_rejects_unknown_engine(self, google_config):
        router = TranslationRouter(google_config)
        with pytest.raises(ConfigurationError):
            router.update_config(engine="bing")
        assert router.engine == "google"

    def test_missing_credentials_raise(self):
        router = TranslationRouter(EngineConfig(engine="deepl"))
        with pytest.raises(ConfigurationError):
            router.translate("Hello", "en", "de")

    def test_ai_without_callback_raises(self):
        with pytest.raises(ConfigurationError):
            TranslationRouter(EngineConfig(engine="ai")).translate("Hello", "en", "zh-CN")

    def test_create_engine_for_other_provider(self, google_config):
        engine = TranslationRouter(google_config).create_engine("youdao")
        assert engine.name == "youdao"
        assert engine.config.concurrent == 4


class TestTranslate:
    """Single translations."""

    def test_success(self, google_config, recording_handler):
        handler = recording_handler([[["你好", "Hello"]], None, "en"])
        router = TranslationRouter(google_config, client=handler.client())
        result = router.translate("Hello", "auto", "zh-CN")
        assert result.success
        assert result.text == "你好"
        assert result.engine == "google"
        assert result.source_lang == "auto"
        assert result.target_lang == "zh-CN"

    def test_cache_hit_skips_network(self, google_config, recording_handler):
        handler = recording_handler([[["你好", "Hello"]], None, "en"])
        router = TranslationRouter(google_config, client=handler.client())
        first = router.translate("Hello", "auto", "zh-CN")
        second = router.translate("Hello", "auto", "zh-CN")
        assert second == first
        assert handler.calls == 1

    def test_cache_key_includes_languages(self, google_config, recording_handler):
        handler = recording_handler([[["x", "Hello"]], None, "en"])
        router = TranslationRouter(google_config, client=handler.client())
        router.translate("Hello", "auto", "zh-CN")
        router.translate("Hello", "auto", "ja")
        assert handler.calls == 2

    def test_clear_cache(self, google_config, recording_handler):
        handler = recording_handler([[["x", "Hello"]], None, "en"])
        router = TranslationRouter(google_config, client=handler.client())
        router.translate("Hello", "auto", "zh-CN")
        router.clear_cache()
        router.translate("Hello", "auto", "zh-CN")
        assert handler.calls == 2

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty_text(self, text, recording_handler):
        handler = recording_handler({})
        router = TranslationRouter(EngineConfig(engine="deepl"), client=handler.client())
        result = router.translate(text, "en", "de")
        assert not result.success
        assert result.error == "Empty text"
        assert handler.calls == 0

    def test_provider_failure_is_a_result(self, google_config, recording_handler):
        handler = recording_handler({"error": "boom"}, status_code=503)
        router = TranslationRouter(google_config, client=handler.client())
        result = router.translate("Hello", "auto", "zh-CN")
        assert not result.success
        assert "HTTP 503" in result.error
        assert len(router.cache) == 0

    def test_failure_is_not_cached(self):
        attempts = []

        def flaky(text, source, target):
            attempts.append(text)
            if len(attempts) == 1:
                raise RuntimeError("rate limited")
            return "ok"

        router = TranslationRouter(EngineConfig(engine="ai"), ai_translate_fn=flaky)
        assert not router.translate("Hello", "en", "zh-CN").success
        assert router.translate("Hello", "en", "zh-CN").text == "ok"
        assert len(attempts) == 2

    def test_set_ai_translate_fn(self):
        router = TranslationRouter(EngineConfig(engine="ai"))
        router.set_ai_translate_fn(lambda text, source, target: text.upper())
        assert router.translate("hi", "en", "zh-CN").text == "HI"

    def test_baidu_bridge(self):
        calls = []

        def bridge(text, source, target, app_id, secret_key):
            calls.append(text)
            return {"success": False, "error": "百度翻译错误: Invalid Sign"}

        config = EngineConfig(engine="baidu", app_id="app", secret_key="secret")
        result = TranslationRouter(config, baidu_bridge=bridge).translate("Hello", "en", "zh-CN")
        assert not result.success
        assert result.error == "百度翻译错误: Invalid Sign"
        assert calls == ["Hello"]

    def test_lambda_wrapped_async_callback(self):
        async def llm(text, source, target, tone):
            return f"{tone}:{text}"

        router = TranslationRouter(EngineConfig(engine="ai"),
                                   ai_translate_fn=lambda text, source, target: llm(text, source, target, "formal"))
        result = router.translate("Hi", "en", "zh-CN")
        assert result.success
        assert result.text == "formal:Hi"
        assert router.cache.get(router.cache.make_key("ai", "en", "zh-CN", "Hi")).text == "formal:Hi"

    def test_raising_async_bridge_is_a_result(self):
        async def bridge(text, source, target, app_id, secret_key):
            raise ConnectionError("ipc channel closed")

        config = EngineConfig(engine="baidu", app_id="app", secret_key="secret")
        router = TranslationRouter(config, baidu_bridge=bridge)
        result = router.translate("Hi", "en", "zh-CN")
        assert not result.success
        assert "ipc channel closed" in result.error
        assert not asyncio.run(router.translate_async("Hi", "en", "zh-CN")).success
        assert len(router.cache) == 0

    def test_non_object_body_is_a_result(self, recording_handler):
        handler = recording_handler(["unexpected"])
        config = EngineConfig(engine="baidu", app_id="app", secret_key="secret")
        result = TranslationRouter(config, client=handler.client()).translate("Hi", "en", "zh-CN")
        assert not result.success
        assert "Unexpected baidu response format" in result.error

    def test_async(self, google_config):
        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(echo_google)) as client:
                router = TranslationRouter(google_config, async_client=client)
                return await router.translate_async("Hello", "auto", "zh-CN")

        assert asyncio.run(run()).text == "T:Hello"

    def test_shared_cache(self, google_config, recording_handler):
        handler = recording_handler([[["你好", "Hello"]], None, "en"])
        cache = TranslationCache()
        TranslationRouter(google_config, cache=cache, client=handler.client()).translate("Hello", "auto", "zh-CN")
        TranslationRouter(google_config, cache=cache, client=handler.client()).translate("Hello", "auto", "zh-CN")
        assert handler.calls == 1


class TestBatch:
    """Concurrent translation keeps input order."""

    TEXTS = [f"text {i}" for i in range(12)]

    def test_batch_order(self, google_config):
        with httpx.Client(transport=httpx.MockTransport(echo_google)) as client:
            router = TranslationRouter(google_config, client=client)
            results = router.translate_batch(self.TEXTS, "auto", "zh-CN")
        assert [result.text for result in results] == [f"T:{text}" for text in self.TEXTS]

    def test_batch_async_order(self, google_config):
        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(echo_google)) as client:
                router = TranslationRouter(google_config, async_client=client)
                return await router.translate_batch_async(self.TEXTS, "auto", "zh-CN")

        results = asyncio.run(run())
        assert [result.text for result in results] == [f"T:{text}" for text in self.TEXTS]

    def test_batch_with_empty_entry(self, google_config):
        with httpx.Client(transport=httpx.MockTransport(echo_google)) as client:
            results = TranslationRouter(google_config, client=client).translate_batch(["a", "", "b"], "auto", "en")
        assert [result.success for result in results] == [True, False, True]

    def test_empty_batch(self, google_config):
        assert TranslationRouter(google_config).translate_batch([], "auto", "en") == []
