# tests/unit/core/test_unit_core_models.py — v1
"""Tests for core/models.py — descriptors, documents, outcomes."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from xlhover.core.models import (
    HoverPayload,
    Position,
    ResolutionOutcome,
    SelectorDescriptor,
    TextDocument,
)


class TestSelectorDescriptor:
    def test_matches_xpath_or_css(self):
        d = SelectorDescriptor(tag="a", xpath="//a", css="a.x")
        assert d.matches("//a")
        assert d.matches("a.x")
        assert not d.matches("//A")

    def test_empty_selectors_never_match(self):
        d = SelectorDescriptor(tag="a", xpath="", css=None)
        assert not d.matches("")
        assert d.has_selector is False

    def test_frozen(self):
        d = SelectorDescriptor(tag="a")
        with pytest.raises(ValidationError):
            d.tag = "b"  # type: ignore[misc]


class TestTextDocument:
    def test_lines_and_line_at(self):
        doc = TextDocument(path=Path("/w/a.py"), text="a\nb\r\nc", language_id="python")
        assert doc.lines == ["a", "b", "c"]
        assert doc.line_count == 3
        assert doc.line_at(1) == "b"
        assert doc.line_at(9) == ""

    def test_only_editor_line_breaks_split(self):
        doc = TextDocument(
            path=Path("/w/a.py"),
            text="import x\n\f\nBTN = \"//button[1]\"\x0b\u2028tail\n",
            language_id="python",
        )
        assert doc.line_count == 4
        assert doc.line_at(1) == "\f"
        assert doc.line_at(2).startswith("BTN = ")

    def test_mixed_line_endings(self):
        doc = TextDocument(path=Path("/w/a.py"), text="a\rb\r\nc\nd")
        assert doc.lines == ["a", "b", "c", "d"]

    def test_key_is_path(self):
        assert TextDocument(path=Path("/w/a.py"), text="").key == str(Path("/w/a.py"))

    def test_from_file_detects_language(self, tmp_path: Path):
        f = tmp_path / "login.robot"
        f.write_text("${BTN}    //b\n", encoding="utf-8")
        doc = TextDocument.from_file(f)
        assert doc.language_id == "robotframework"
        assert doc.lines == ["${BTN}    //b", ""]

    def test_from_file_language_override(self, tmp_path: Path):
        f = tmp_path / "page.txt"
        f.write_text("", encoding="utf-8")
        assert TextDocument.from_file(f, language_id="python").language_id == "python"


class TestPosition:
    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Position(line=-1, character=0)


class TestResolutionOutcome:
    def test_shown_requires_payload(self, tmp_path: Path):
        payload = HoverPayload(identifier="A", value="v", image_path=tmp_path / "a.png")
        assert ResolutionOutcome(status="shown", payload=payload).shown is True
        assert ResolutionOutcome(status="value_mismatch").shown is False

    def test_image_uri(self, tmp_path: Path):
        payload = HoverPayload(identifier="A", value="v", image_path=tmp_path / "a.png")
        assert payload.image_uri.startswith("file://")
