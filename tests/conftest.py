"""Shared test fixtures and configuration."""

import base64
from pathlib import Path

import pytest


@pytest.fixture
def image_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two small distinct image files on disk."""
    first = tmp_path / "first.png"
    second = tmp_path / "second.png"
    first.write_bytes(base64.b64decode("iVBORw0KGgoAAAANSUhEUgAAAAE="))
    second.write_bytes(b"\x89PNG\r\n\x1a\n-second-image")
    return first, second
