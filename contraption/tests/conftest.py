"""Shared pytest fixtures.

Rendering tests run headless: SDL is pointed at its ``dummy`` drivers before
pygame is first imported by the UI toolkit.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from contraption.grid import Grid

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

INPUT_ROOT = Path(__file__).resolve().parents[1] / "inputs"


@pytest.fixture
def input_root() -> Path:
    return INPUT_ROOT


@pytest.fixture
def example_grid() -> Grid:
    return Grid.from_text((INPUT_ROOT / "example.txt").read_text())


@pytest.fixture(autouse=True)
def clear_search_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "CONTRAPTION_WORKERS",
        "CONTRAPTION_BATCH_SIZE",
        "CONTRAPTION_BACKEND",
        "CONTRAPTION_INPUT_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
