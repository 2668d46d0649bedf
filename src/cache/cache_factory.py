# src/cache/cache_factory.py — v1
"""Factory for cache store instantiation."""

from __future__ import annotations

from xlhover.cache.base_cache_store import BaseCacheStore
from xlhover.cache.ttl_cache import Clock, NullCache, TtlCache
from xlhover.config.settings import Settings


def create_cache(
    settings: Settings | None = None,
    clock: Clock | None = None,
    name: str = "cache",
) -> BaseCacheStore:
    """Instantiate the configured cache.

    Args:
        settings: Application settings. Defaults to a 5 second TTL cache.
        clock: Time source in seconds. Defaults to time.monotonic.
        name: Label used in debug logs.

    Returns:
        TtlCache, or NullCache when caching is disabled.
    """
    if settings is not None and not settings.cache_enabled:
        return NullCache()

    ttl = 5.0 if settings is None else settings.cache_ttl_seconds
    return TtlCache(ttl=ttl, clock=clock, name=name)
