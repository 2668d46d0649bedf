# src/core/models.py — v1
"""Core domain models: SelectorDescriptor, TextDocument, Position,
HoverPayload, ResolutionOutcome.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LanguageMode = Literal["word", "bracket"]

# Editor line breaks only; str.splitlines() also splits on \f, \v and \u2028.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

OutcomeStatus = Literal[
    "shown",
    "unsupported_language",
    "no_identifier",
    "no_workspace",
    "no_metadata_file",
    "metadata_unavailable",
    "unknown_identifier",
    "no_assignment",
    "value_mismatch",
    "no_photo",
    "error",
]


class SelectorDescriptor(BaseModel):
    """Metadata record for one captured UI element.

    ``photo`` is a file name relative to the photos directory. A descriptor
    without ``xpath`` and ``css`` can never match a resolved value.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tag: str | None = None
    text: str | None = None
    xpath: str | None = None
    css: str | None = None
    photo: str | None = None

    def matches(self, value: str) -> bool:
        """True if value equals the xpath or css selector exactly."""
        return bool(
            (self.xpath and self.xpath == value) or (self.css and self.css == value)
        )

    @property
    def has_selector(self) -> bool:
        return bool(self.xpath or self.css)


MetadataTable = dict[str, SelectorDescriptor]


class Position(BaseModel):
    """Zero-based cursor position."""

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class TextDocument(BaseModel):
    """Snapshot of an editor buffer."""

    model_config = ConfigDict(frozen=True)

    path: Path
    text: str
    language_id: str = "plaintext"

    @classmethod
    def from_file(cls, path: Path, language_id: str | None = None) -> TextDocument:
        """Read a document from disk, deriving the language id from its name."""
        from xlhover.extraction.language import language_id_for_path

        return cls(
            path=path,
            text=path.read_text(encoding="utf-8"),
            language_id=language_id or language_id_for_path(path),
        )

    @property
    def key(self) -> str:
        """Cache identity of the document."""
        return str(self.path)

    @property
    def lines(self) -> list[str]:
        return _LINE_BREAK_RE.split(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, line: int) -> str:
        """Return the text of a line, empty for out-of-range lines."""
        if 0 <= line < len(self.lines):
            return self.lines[line]
        return ""


class HoverPayload(BaseModel):
    """Content of one hover card: screenshot plus descriptor fields."""

    identifier: str
    value: str
    image_path: Path
    tag: str | None = None
    text: str | None = None
    xpath: str | None = None
    css: str | None = None

    @property
    def image_uri(self) -> str:
        return self.image_path.resolve().as_uri()


class ResolutionOutcome(BaseModel):
    """Result of one resolution chain, including where it stopped."""

    status: OutcomeStatus
    identifier: str | None = None
    value: str | None = None
    payload: HoverPayload | None = None
    detail: str | None = None

    @property
    def shown(self) -> bool:
        return self.status == "shown" and self.payload is not None
