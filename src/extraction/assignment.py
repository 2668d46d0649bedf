# src/extraction/assignment.py — v1
"""Single-line assignment value extraction.

Lexical and best-effort: ``name = "literal"`` in word mode, ``${NAME}  value``
in bracket mode. Anything else (concatenation, f-strings, multi-line values)
is not recognised.
"""

from __future__ import annotations

import re

from xlhover.core.models import LanguageMode

# Tried in this order; the first non-empty capture wins.
_QUOTE_PATTERNS: tuple[str, ...] = (
    r'"([^"]*)"',
    r"'([^']*)'",
    r"`([^`]*)`",
)


def value_of(
    line_text: str, identifier: str, language_mode: LanguageMode = "word"
) -> str | None:
    """Return the literal value assigned to identifier on this line, or None."""
    if not identifier:
        return None
    if language_mode == "bracket":
        return _bracket_value_of(line_text, identifier)
    return _quoted_value_of(line_text, identifier)


def _quoted_value_of(line_text: str, identifier: str) -> str | None:
    name = re.escape(identifier)
    for quoted in _QUOTE_PATTERNS:
        # Must not be the tail of a longer identifier ("max" for "x").
        match = re.search(rf"(?<![A-Za-z0-9_$]){name}\s*=\s*{quoted}", line_text)
        if match and match.group(1):
            return match.group(1)
    return None


def _bracket_value_of(line_text: str, identifier: str) -> str | None:
    match = re.search(rf"\$\{{{re.escape(identifier)}\}}\s+(.+)$", line_text)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None
