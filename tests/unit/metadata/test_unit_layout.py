# tests/unit/metadata/test_unit_layout.py — v1
"""Tests for metadata/layout.py — workspace path conventions."""

from __future__ import annotations

from pathlib import Path

from xlhover.config.settings import Settings
from xlhover.metadata.layout import metadata_path, photo_path, photos_dir


class TestLayout:
    def test_defaults(self):
        root = Path("/ws")
        assert photos_dir(root) == Path("/ws/.photos")
        assert metadata_path(root) == Path("/ws/.photos/element_selectors.json")
        assert photo_path(root, "btn.png") == Path("/ws/.photos/btn.png")

    def test_configured_names(self):
        s = Settings(
            _env_file=None, photos_dir_name="shots", metadata_file_name="sel.json"
        )
        assert metadata_path(Path("/ws"), s) == Path("/ws/shots/sel.json")
