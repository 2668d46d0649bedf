# src/metadata/layout.py — v1
"""Workspace path conventions for selector metadata and screenshots.

    <workspace>/.photos/element_selectors.json
    <workspace>/.photos/<photo>
"""

from __future__ import annotations

from pathlib import Path

from xlhover.config.settings import Settings

PHOTOS_DIR = ".photos"
METADATA_FILE = "element_selectors.json"


def photos_dir(workspace_root: Path, settings: Settings | None = None) -> Path:
    """Return the screenshot directory of a workspace."""
    name = PHOTOS_DIR if settings is None else settings.photos_dir_name
    return workspace_root / name


def metadata_path(workspace_root: Path, settings: Settings | None = None) -> Path:
    """Return the selector metadata file of a workspace."""
    name = METADATA_FILE if settings is None else settings.metadata_file_name
    return photos_dir(workspace_root, settings) / name


def photo_path(
    workspace_root: Path, photo: str, settings: Settings | None = None
) -> Path:
    """Return the path of a screenshot referenced by a descriptor."""
    return photos_dir(workspace_root, settings) / photo
