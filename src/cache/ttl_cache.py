# src/cache/ttl_cache.py — v1
"""Single-slot time-based caches.

A ``TtlCache`` remembers one value together with the key it was built for.
The value is rebuilt when the key changes or when ``ttl`` seconds have
elapsed on the injected clock. There is no invalidation on content change:
edits made inside the freshness window stay invisible until it expires.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from xlhover.cache.base_cache_store import BaseCacheStore
from xlhover.cache.models import CacheEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]


class TtlCache(BaseCacheStore[T]):
    """Key + timestamp guarded cache holding a single value."""

    def __init__(
        self, ttl: float = 5.0, clock: Clock | None = None, name: str = "cache"
    ) -> None:
        if ttl < 0:
            raise ValueError("ttl must be >= 0")
        self._ttl = ttl
        self._clock = clock or time.monotonic
        self._name = name
        self._entry: CacheEntry | None = None

    @property
    def ttl(self) -> float:
        return self._ttl

    def get_or_refresh(self, key: str, loader: Callable[[], T | None]) -> T | None:
        """Return the fresh value for key, reloading on miss.

        A loader result of None is returned but not stored, so the next call
        tries again.
        """
        now = self._clock()
        entry = self._entry
        if entry is not None and entry.key == key and entry.is_fresh(now, self._ttl):
            logger.debug("%s hit for %s", self._name, key)
            return entry.value

        logger.debug("%s miss for %s", self._name, key)
        value = loader()
        if value is None:
            return None

        self._entry = CacheEntry(key=key, value=value, stored_at=now)
        return value

    def peek(self) -> CacheEntry | None:
        return self._entry

    def invalidate(self) -> None:
        self._entry = None


class NullCache(BaseCacheStore[T]):
    """Cache that never remembers anything; every call runs the loader."""

    def get_or_refresh(self, key: str, loader: Callable[[], T | None]) -> T | None:
        return loader()

    def peek(self) -> CacheEntry | None:
        return None

    def invalidate(self) -> None:
        return None
