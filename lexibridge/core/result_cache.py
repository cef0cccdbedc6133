"""
In-process cache of finished translation results.

Entries expire after a TTL that is checked again on every read, and the
oldest-inserted entries are evicted once the cache is full. Values are
deep-copied in and out so callers can never mutate a cached result.
"""

import copy
import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from lexibridge.models.internal_models import CacheEntry

T = TypeVar("T")

CACHE_KEY_TEXT_PREFIX = 100


def make_cache_key(text: str, source_language: str, target_language: str) -> str:
    """Key on the language pair, the first 100 characters and the full length"""
    return f"{source_language}:{target_language}:{text[:CACHE_KEY_TEXT_PREFIX]}:{len(text)}"


class ResultCache(Generic[T]):
    """
    TTL-bounded, size-bounded result cache.

    Args:
        ttl_seconds: Entry lifetime
        max_size: Entry count above which the oldest entries are evicted
        clock: Time source, injectable for tests
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        max_size: int = 10000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry[T]]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self.logger = logging.getLogger(__name__)

    def get(self, key: str) -> Optional[T]:
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if not entry.is_valid(self._clock(), self.ttl_seconds):
            del self._entries[key]
            self._misses += 1
            return None

        self._hits += 1
        return copy.deepcopy(entry.data)

    def set(self, key: str, value: T) -> None:
        if key in self._entries:
            del self._entries[key]
        self._entries[key] = CacheEntry(data=copy.deepcopy(value), timestamp=self._clock())

        while len(self._entries) > self.max_size:
            evicted_key, _ = self._entries.popitem(last=False)
            self._evictions += 1
            self.logger.debug(f"Evicted cache entry {evicted_key[:40]}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def stats(self) -> Dict[str, Any]:
        lookups = self._hits + self._misses
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "ttl_seconds": self.ttl_seconds,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate": self._hits / lookups if lookups else 0.0,
        }
