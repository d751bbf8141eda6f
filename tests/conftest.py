"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


class FakeMetadataTool:
    """In-memory MetadataTool returning canned exiftool JSON per path."""

    def __init__(self, outputs: dict[str, str] | None = None, fail_on: set[str] | None = None) -> None:
        self.outputs = outputs or {}
        self.fail_on = fail_on or set()
        self.dumped: list[str] = []
        self.passed_through: list[str] = []

    def dump_json(self, path: str) -> str:
        from archive_man.core.errors import ExternalToolError

        self.dumped.append(path)
        if path in self.fail_on:
            msg = f"exiftool failed for {path}: boom"
            raise ExternalToolError(msg)
        return self.outputs.get(path, "[{}]")

    def passthrough(self, path: str) -> None:
        self.passed_through.append(path)


@pytest.fixture
def fake_tool() -> Callable[..., FakeMetadataTool]:
    """Factory for FakeMetadataTool instances."""
    return FakeMetadataTool


@pytest.fixture
def make_tree() -> Callable[[Path, list[str]], Path]:
    """Build a directory tree from a list of relative paths.

    Paths ending in "/" become directories; anything else becomes a file
    whose content is its own relative path.
    """

    def _make(root: Path, paths: list[str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel in paths:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(rel)
        return root

    return _make


@pytest.fixture
def exif_jpeg(tmp_path: Path) -> Path:
    """A small JPEG carrying Make, Model and DateTime EXIF tags."""
    path = tmp_path / "IMG_0001.jpg"
    img = Image.new("RGB", (8, 6), color="red")
    exif = Image.Exif()
    exif[0x010F] = "Canon"  # Make
    exif[0x0110] = "EOS 5D"  # Model
    exif[0x0132] = "2020:01:02 03:04:05"  # DateTime
    img.save(path, "JPEG", exif=exif)
    return path


@pytest.fixture
def plain_jpeg(tmp_path: Path) -> Path:
    """A small JPEG without any EXIF data."""
    path = tmp_path / "plain.jpg"
    Image.new("RGB", (4, 4), color="blue").save(path, "JPEG")
    return path
