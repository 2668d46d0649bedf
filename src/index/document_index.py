# src/index/document_index.py — v1
"""Whole-document assignment index.

One forward pass over the document records, for every identifier that is
assigned a literal somewhere, the value of its FIRST assignment. Later
assignments to the same name are never reconsidered.

The index is the authoritative resolution strategy. ``scan_for_assignment``
keeps the older behaviour (cursor line first, then the first assignment from
the top of the document) for setups that configure
``RESOLUTION_STRATEGY=scan``. The two only disagree when the cursor line
reassigns a name that was already assigned above it.
"""

from __future__ import annotations

import logging
import re

from xlhover.cache.base_cache_store import BaseCacheStore
from xlhover.cache.ttl_cache import TtlCache
from xlhover.core.models import LanguageMode, TextDocument
from xlhover.extraction.assignment import value_of
from xlhover.extraction.identifier import BRACKET_VARIABLE_RE

logger = logging.getLogger(__name__)

WORD_ASSIGNMENT_RE = re.compile(r"([A-Za-z_$][A-Za-z0-9_$]*)\s*=")


def build_assignment_index(
    lines: list[str], language_mode: LanguageMode
) -> dict[str, str]:
    """Scan lines in order and map each identifier to its first literal value."""
    pattern = BRACKET_VARIABLE_RE if language_mode == "bracket" else WORD_ASSIGNMENT_RE
    index: dict[str, str] = {}

    for line in lines:
        for match in pattern.finditer(line):
            name = match.group(1)
            if name in index:
                continue
            value = value_of(line, name, language_mode)
            if value is not None:
                index[name] = value

    return index


def scan_for_assignment(
    document: TextDocument,
    identifier: str,
    language_mode: LanguageMode,
    current_line: int | None = None,
) -> str | None:
    """Current line first, then the first matching line from the top."""
    if current_line is not None:
        value = value_of(document.line_at(current_line), identifier, language_mode)
        if value is not None:
            return value

    for line in document.lines:
        value = value_of(line, identifier, language_mode)
        if value is not None:
            return value
    return None


class DocumentAssignmentIndex:
    """Assignment index for the most recently hovered document.

    Rebuilt when a different document is queried or the cache window has
    elapsed.
    """

    def __init__(self, cache: BaseCacheStore | None = None) -> None:
        self._cache: BaseCacheStore = cache if cache is not None else TtlCache(
            name="assignment index"
        )

    def assignments_for(
        self, document: TextDocument, language_mode: LanguageMode
    ) -> dict[str, str]:
        """Return identifier -> first assigned value for the document."""

        def _build() -> dict[str, str]:
            lines = document.lines
            index = build_assignment_index(lines, language_mode)
            logger.debug(
                "Indexed %d assignments over %d lines of %s",
                len(index), len(lines), document.key,
            )
            return index

        # Same path read in another mode yields a different index.
        key = f"{document.key}\0{language_mode}"
        result = self._cache.get_or_refresh(key, _build)
        return result if result is not None else {}

    def lookup(
        self, document: TextDocument, identifier: str, language_mode: LanguageMode
    ) -> str | None:
        """Return the first assigned value of identifier in the document."""
        return self.assignments_for(document, language_mode).get(identifier)
