# src/cache/base_cache_store.py — v1
"""Abstract cache store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from xlhover.cache.models import CacheEntry

T = TypeVar("T")


class BaseCacheStore(ABC, Generic[T]):
    """Unified interface for the in-memory caches owned by resolver components."""

    @abstractmethod
    def get_or_refresh(self, key: str, loader: Callable[[], T | None]) -> T | None:
        """Return the cached value for key, or call loader and cache its result."""

    @abstractmethod
    def peek(self) -> CacheEntry | None:
        """Return the current entry without refreshing it."""

    @abstractmethod
    def invalidate(self) -> None:
        """Drop the cached entry."""
