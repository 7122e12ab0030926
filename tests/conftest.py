"""Shared pytest fixtures for the catstream test suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

TEXT_CONTENT = b"hello\nworld\n"
MARKDOWN_CONTENT = b"world"
BINARY_CONTENT = bytes(range(256)) * 300

skip_without_symlinks = pytest.mark.skipif(
    sys.platform == "win32", reason="symbolic links need privileges on Windows"
)


# ── File Fixtures ─────────────────────────────────────────────────


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "a.txt"
    path.write_bytes(TEXT_CONTENT)
    return path


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "b.md"
    path.write_bytes(MARKDOWN_CONTENT)
    return path


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    """Larger than one copy buffer, with every byte value present."""
    path = tmp_path / "x.png"
    path.write_bytes(BINARY_CONTENT)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    return path


@pytest.fixture
def link_to_text_file(tmp_path: Path, text_file: Path) -> Path:
    """c.txt -> a.txt, stored as a relative target."""
    link = tmp_path / "c.txt"
    os.symlink(text_file.name, link)
    return link


@pytest.fixture
def dangling_link(tmp_path: Path) -> Path:
    """d.txt -> none.txt, which does not exist."""
    link = tmp_path / "d.txt"
    os.symlink("none.txt", link)
    return link


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "catstream.yaml"
