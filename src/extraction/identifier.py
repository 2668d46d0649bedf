# src/extraction/identifier.py — v1
"""Identifier under the cursor.

Pure functions of (line text, cursor offset, language mode). Offsets are
zero-based character indexes into the line.
"""

from __future__ import annotations

import re

from xlhover.core.models import LanguageMode

BRACKET_VARIABLE_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
WORD_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_WORD_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$"
)


def identifier_at(
    line_text: str, cursor_offset: int, language_mode: LanguageMode
) -> str | None:
    """Return the identifier at cursor_offset, or None."""
    if cursor_offset < 0 or cursor_offset > len(line_text):
        return None
    if language_mode == "bracket":
        return _bracket_identifier_at(line_text, cursor_offset)
    return _word_identifier_at(line_text, cursor_offset)


def _bracket_identifier_at(line_text: str, offset: int) -> str | None:
    # Span runs from "$" through "}" inclusive.
    for match in BRACKET_VARIABLE_RE.finditer(line_text):
        if match.start() <= offset < match.end():
            return match.group(1)
    return None


def word_range_at(line_text: str, offset: int) -> tuple[int, int] | None:
    """Return [start, end) of the word run touching offset.

    A cursor sitting right after a word still touches it.
    """
    if offset < len(line_text) and line_text[offset] in _WORD_CHARS:
        anchor = offset
    elif offset > 0 and line_text[offset - 1] in _WORD_CHARS:
        anchor = offset - 1
    else:
        return None

    start = anchor
    while start > 0 and line_text[start - 1] in _WORD_CHARS:
        start -= 1
    end = anchor + 1
    while end < len(line_text) and line_text[end] in _WORD_CHARS:
        end += 1
    return start, end


def _word_identifier_at(line_text: str, offset: int) -> str | None:
    span = word_range_at(line_text, offset)
    if span is None:
        return None
    word = line_text[span[0]:span[1]]
    if not WORD_IDENTIFIER_RE.match(word):
        return None
    return word
