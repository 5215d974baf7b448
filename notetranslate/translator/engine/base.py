# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import asyncio
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from logging import Logger
from typing import Any, Self

import httpx

from notetranslate.exceptions import ConfigurationError, ProviderError
from notetranslate.logger import global_logger
from notetranslate.translator.types import TranslationRequest, TranslationResult

ENV_PREFIX = "NOTETRANSLATE_"


def run_sync(awaitable):
    """Drive an awaitable to completion from synchronous code. Fails inside a running event loop."""

    async def wait():
        return await awaitable

    return asyncio.run(wait())


@dataclass(kw_only=True)
class EngineConfig:
    logger: Logger = global_logger
    engine: str = "baidu"
    api_key: str | None = None
    app_id: str | None = None
    secret_key: str | None = None
    # Overrides the provider endpoint, e.g. DeepL Pro or a proxy.
    base_url: str | None = None
    timeout: float = 10.0  # seconds, per request
    concurrent: int = 8
    system_proxy_enable: bool = False

    @classmethod
    def from_env(cls, engine: str | None = None, **overrides) -> Self:
        """
        Build a config from NOTETRANSLATE_* variables (ENGINE, API_KEY, APP_ID,
        SECRET_KEY, BASE_URL, TIMEOUT). Keyword overrides win over the environment.
        """
        values: dict[str, Any] = {
            "engine": engine or os.getenv(f"{ENV_PREFIX}ENGINE") or "baidu",
            "api_key": os.getenv(f"{ENV_PREFIX}API_KEY"),
            "app_id": os.getenv(f"{ENV_PREFIX}APP_ID"),
            "secret_key": os.getenv(f"{ENV_PREFIX}SECRET_KEY"),
            "base_url": os.getenv(f"{ENV_PREFIX}BASE_URL"),
        }
        timeout = os.getenv(f"{ENV_PREFIX}TIMEOUT")
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(f"{ENV_PREFIX}TIMEOUT must be a number, got {timeout!r}") from e
        values.update(overrides)
        return cls(**values)


@dataclass
class EngineRequest:
    """A provider call, independent of the sync or async client that sends it."""
    method: str
    url: str
    params: dict[str, Any] | None = None
    data: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)


class TranslationEngine(ABC):
    """
    One translation provider. Subclasses describe the wire protocol with
    build_request/parse_response; sending and error mapping live here.
    """
    name: str = ""
    default_base_url: str | None = None

    def __init__(self, config: EngineConfig):
        self.config = config
        self.logger = config.logger
        base_url = config.base_url or self.default_base_url or ""
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = httpx.Timeout(config.timeout, connect=min(5.0, config.timeout))

    def check_config(self):
        """Raise ConfigurationError when credentials the provider needs are missing."""

    @abstractmethod
    def build_request(self, request: TranslationRequest) -> EngineRequest:
        ...

    @abstractmethod
    def parse_response(self, request: TranslationRequest, data: Any) -> TranslationResult:
        ...

    def new_client(self) -> httpx.Client:
        return httpx.Client(trust_env=self.config.system_proxy_enable, timeout=self.timeout)

    def new_async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(trust_env=self.config.system_proxy_enable, timeout=self.timeout)

    def translate(self, request: TranslationRequest, client: httpx.Client | None = None) -> TranslationResult:
        engine_request = self.build_request(request)
        if client is None:
            with self.new_client() as client:
                return self._send(client, request, engine_request)
        return self._send(client, request, engine_request)

    async def translate_async(self, request: TranslationRequest,
                              client: httpx.AsyncClient | None = None) -> TranslationResult:
        engine_request = self.build_request(request)
        if client is None:
            async with self.new_async_client() as client:
                return await self._send_async(client, request, engine_request)
        return await self._send_async(client, request, engine_request)

    def _send(self, client: httpx.Client, request: TranslationRequest,
              engine_request: EngineRequest) -> TranslationResult:
        try:
            response = client.request(
                engine_request.method,
                engine_request.url,
                params=engine_request.params,
                data=engine_request.data,
                headers=engine_request.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            self.logger.error(f"{self.name} HTTP status error: {e.response.status_code} - {e.response.text}")
            raise ProviderError(f"HTTP {e.response.status_code}: {e.response.text}") from e
        except httpx.RequestError as e:
            self.logger.error(f"{self.name} request error: {e!r}")
            raise ProviderError(f"Request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid response body from {self.name}: {e}") from e
        return self._parse(request, data)

    async def _send_async(self, client: httpx.AsyncClient, request: TranslationRequest,
                          engine_request: EngineRequest) -> TranslationResult:
        try:
            response = await client.request(
                engine_request.method,
                engine_request.url,
                params=engine_request.params,
                data=engine_request.data,
                headers=engine_request.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            self.logger.error(f"{self.name} HTTP status error (async): {e.response.status_code} - {e.response.text}")
            raise ProviderError(f"HTTP {e.response.status_code}: {e.response.text}") from e
        except httpx.RequestError as e:
            self.logger.error(f"{self.name} request error (async): {e!r}")
            raise ProviderError(f"Request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid response body from {self.name}: {e}") from e
        return self._parse(request, data)

    def _parse(self, request: TranslationRequest, data: Any) -> TranslationResult:
        try:
            return self.parse_response(request, data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderError(f"Unexpected {self.name} response format: {e!r}") from e

    def success(self, request: TranslationRequest, text: str, detected_lang: str | None = None) -> TranslationResult:
        return TranslationResult(
            success=True,
            text=text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
            engine=self.name,
            detected_lang=detected_lang,
        )
