# src/extraction/language.py — v1
"""Language-id resolution and routing to a lexical mode.

Word mode covers the C-like and Python-like syntaxes, where a variable is a
plain identifier assigned with ``name = "literal"``. Bracket mode covers
Robot Framework, where variables are written ``${NAME}`` and the value
follows the token after whitespace.
"""

from __future__ import annotations

from pathlib import Path

from xlhover.config.settings import Settings
from xlhover.core.models import LanguageMode

_EXTENSION_LANGUAGE_IDS: dict[str, str] = {
    ".py": "python",
    ".pyw": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".robot": "robotframework",
    ".resource": "robotframework",
}

DEFAULT_WORD_LANGUAGES = frozenset(
    {"python", "javascript", "typescript", "javascriptreact", "typescriptreact"}
)
DEFAULT_BRACKET_LANGUAGES = frozenset({"robotframework"})


def language_id_for_path(file_path: str | Path | None, *, default: str = "plaintext") -> str:
    """Return a normalized language id for a file path."""
    path_text = str(file_path or "").strip()
    if not path_text:
        return default
    return _EXTENSION_LANGUAGE_IDS.get(Path(path_text).suffix.lower(), default)


def language_mode_for(
    language_id: str, settings: Settings | None = None
) -> LanguageMode | None:
    """Map a language id to its lexical mode, None if unsupported."""
    lang = language_id.strip().lower()
    if settings is None:
        word, bracket = DEFAULT_WORD_LANGUAGES, DEFAULT_BRACKET_LANGUAGES
    else:
        word = frozenset(settings.word_languages_list)
        bracket = frozenset(settings.bracket_languages_list)

    if lang in bracket:
        return "bracket"
    if lang in word:
        return "word"
    return None
