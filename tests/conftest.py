# tests/conftest.py — v1
"""Shared test fixtures for unit and integration tests.

Provides a fake clock, a workspace with a photos directory and selector
metadata, and sample documents. All I/O stays under tmp_path.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from xlhover.config.settings import Settings
from xlhover.core.models import TextDocument


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# === FIXTURES: Clock and settings ===


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


# === FIXTURES: Workspace ===


SAMPLE_METADATA: dict[str, dict[str, str]] = {
    "BTN": {"tag": "button", "xpath": "//button[1]", "photo": "btn.png"},
    "SEARCH_INPUT": {
        "tag": "input",
        "text": "Search",
        "xpath": "//input[@name='q']",
        "css": "input[name=q]",
        "photo": "search.png",
    },
    "LOGIN_LINK": {"tag": "a", "css": "a.login", "photo": "login.png"},
    "NO_PHOTO": {"tag": "div", "xpath": "//div[@id='x']", "photo": "missing.png"},
}


def write_metadata(workspace: Path, data: object) -> Path:
    """Write element_selectors.json into the workspace photos directory."""
    photos = workspace / ".photos"
    photos.mkdir(parents=True, exist_ok=True)
    path = photos / "element_selectors.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with metadata and screenshots for BTN, SEARCH_INPUT, LOGIN_LINK."""
    root = tmp_path / "project"
    write_metadata(root, SAMPLE_METADATA)
    for name in ("btn.png", "search.png", "login.png"):
        (root / ".photos" / name).write_bytes(b"\x89PNG\r\n\x1a\n")
    return root


# === FIXTURES: Documents ===


PYTHON_SOURCE = '''\
from selenium.webdriver.common.by import By

BTN = "//button[1]"
SEARCH_INPUT = 'input[name=q]'
LOGIN_LINK = "a.wrong"
NO_PHOTO = "//div[@id='x']"

def test_login(driver):
    driver.find_element(By.XPATH, BTN).click()
    BTN = "//button[2]"
'''

ROBOT_SOURCE = '''\
*** Variables ***
${BTN}    //button[1]
${LOGIN_LINK}        a.login

*** Test Cases ***
Login
    Click Element    ${BTN}
'''


@pytest.fixture
def python_document(workspace: Path) -> TextDocument:
    return TextDocument(
        path=workspace / "test_login.py", text=PYTHON_SOURCE, language_id="python"
    )


@pytest.fixture
def robot_document(workspace: Path) -> TextDocument:
    return TextDocument(
        path=workspace / "login.robot", text=ROBOT_SOURCE, language_id="robotframework"
    )


@pytest.fixture
def metadata_writer():
    """Callable writing selector metadata into a workspace."""
    return write_metadata


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    root = logging.getLogger("xlhover")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
