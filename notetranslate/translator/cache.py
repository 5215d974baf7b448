# SPDX-FileCopyrightText: 2025 RealTimeX
# SPDX-License-Identifier: MPL-2.0
import time
from collections import OrderedDict
from threading import Lock
from typing import Callable

from notetranslate.translator.types import TranslationResult


class TranslationCache:
    """
    Bounded LRU of successful translations keyed by
    ``engine:source_lang:target_lang:text``, with an optional TTL.
    All operations hold one lock, so batch translation from a thread pool is safe.
    """

    def __init__(self, max_entries: int | None = 1000, ttl: float | None = None,
                 clock: Callable[[], float] = time.monotonic):
        self.max_entries = max_entries
        self.ttl = ttl
        self.clock = clock
        self.lock = Lock()
        self._entries: OrderedDict[str, tuple[float, TranslationResult]] = OrderedDict()

    @staticmethod
    def make_key(engine: str, source_lang: str, target_lang: str, text: str) -> str:
        return f"{engine}:{source_lang}:{target_lang}:{text}"

    def get(self, key: str) -> TranslationResult | None:
        with self.lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, result = entry
            if self.ttl is not None and self.clock() - stored_at > self.ttl:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return result

    def set(self, key: str, result: TranslationResult):
        with self.lock:
            self._entries[key] = (self.clock(), result)
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)

    def clear(self):
        with self.lock:
            self._entries.clear()

    def __len__(self):
        with self.lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
