# tests/unit/logging/test_unit_handlers.py — v1
"""Tests for logging/handlers.py — rotating file handler."""

from __future__ import annotations

import pytest

from xlhover.logging.handlers import _parse_size, create_rotating_handler


class TestParseSize:
    @pytest.mark.parametrize("text,expected", [
        ("10KB", 10 * 1024),
        ("10MB", 10 * 1024**2),
        ("1 gb", 1024**3),
    ])
    def test_valid(self, text: str, expected: int):
        assert _parse_size(text) == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid size"):
            _parse_size("ten megabytes")


class TestCreateRotatingHandler:
    def test_creates_parent_dir(self, tmp_path):
        handler = create_rotating_handler(
            str(tmp_path / "a" / "b.log"), rotation="1KB", retention=2
        )
        try:
            assert handler.maxBytes == 1024
            assert handler.backupCount == 2
            assert (tmp_path / "a").is_dir()
        finally:
            handler.close()
