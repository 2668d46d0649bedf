# src/metadata/store.py — v1
"""Selector metadata accessor.

Loads ``element_selectors.json`` (identifier -> descriptor) and keeps the
parsed table for one cache window. Never raises to the caller: a missing
file or malformed JSON yields None.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from xlhover.cache.base_cache_store import BaseCacheStore
from xlhover.cache.ttl_cache import TtlCache
from xlhover.core.models import MetadataTable, SelectorDescriptor

logger = logging.getLogger(__name__)


def _read_metadata_file(path: Path) -> str:
    """Read the raw metadata document."""
    return path.read_text(encoding="utf-8")


def parse_metadata(raw: str, source: str = "<metadata>") -> MetadataTable | None:
    """Parse a metadata document into a table of descriptors.

    Entries that are not valid descriptor objects are skipped with a warning.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse selector metadata %s: %s", source, e)
        return None

    if not isinstance(data, dict):
        logger.warning(
            "Selector metadata %s must be a JSON object, got %s",
            source, type(data).__name__,
        )
        return None

    table: MetadataTable = {}
    for name, entry in data.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object descriptor %r in %s", name, source)
            continue
        try:
            table[name] = SelectorDescriptor.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping invalid descriptor %r in %s: %s", name, source, e)
    return table


class MetadataStore:
    """Cached access to the selector metadata table."""

    def __init__(self, cache: BaseCacheStore | None = None) -> None:
        self._cache: BaseCacheStore = cache if cache is not None else TtlCache(
            name="metadata"
        )

    def load(self, path: Path) -> MetadataTable | None:
        """Return the metadata table stored at path, or None."""
        return self._cache.get_or_refresh(str(path), lambda: self._load_from_disk(path))

    def _load_from_disk(self, path: Path) -> MetadataTable | None:
        if not path.is_file():
            logger.debug("No selector metadata at %s", path)
            return None
        try:
            raw = _read_metadata_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read selector metadata %s: %s", path, e)
            return None

        table = parse_metadata(raw, source=str(path))
        if table is not None:
            logger.debug("Loaded %d descriptors from %s", len(table), path)
        return table
