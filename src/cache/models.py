# src/cache/models.py — v1
"""Cache domain models: CacheEntry."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CacheEntry(BaseModel):
    """Single cached value with the key it was built for and its capture time.

    ``stored_at`` is expressed in the owning cache's clock (seconds).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: str
    value: Any
    stored_at: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        """True while the entry is younger than ttl seconds."""
        return now - self.stored_at < ttl
