# tests/conftest.py - v2
"""Shared test fixtures: sample strings and temp files in several encodings.

No fixture touches anything outside pytest's tmp_path.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mbchunker.logging.context import clear_context

TWO_BYTE = "\u00a2"    # cent sign, 2 bytes in UTF-8
THREE_BYTE = "\u20ac"  # euro sign, 3 bytes in UTF-8

SINGLE_BYTE_STRING = "foo bar baz qux quux corge"
MULTI_BYTE_STRING = f"foo {TWO_BYTE} bar {THREE_BYTE} baz {TWO_BYTE} {THREE_BYTE}"


def write_file(directory: Path, name: str, content: str, encoding: str = "utf-8") -> Path:
    path = directory / name
    path.write_bytes(content.encode(encoding))
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers and log context left behind by setup_logging or the CLI."""
    yield
    clear_context()
    root = logging.getLogger("mbchunker")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run from an empty cwd so no stray .env or MBCHUNKER_* var leaks in."""
    for var in (
        "MBCHUNKER_DEFAULT_ENCODING",
        "MBCHUNKER_TEXT_CHUNK_SIZE",
        "MBCHUNKER_FILE_CHUNK_SIZE",
        "MBCHUNKER_LOG_LEVEL",
        "MBCHUNKER_LOG_FORMAT",
        "MBCHUNKER_LOG_FILE",
        "MBCHUNKER_LOG_ROTATION",
        "MBCHUNKER_LOG_RETENTION",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    return write_file(tmp_path, "empty.txt", "")


@pytest.fixture
def single_byte_file(tmp_path: Path) -> Path:
    return write_file(tmp_path, "single.txt", SINGLE_BYTE_STRING)


@pytest.fixture
def multi_byte_file(tmp_path: Path) -> Path:
    return write_file(tmp_path, "multi.txt", MULTI_BYTE_STRING)


@pytest.fixture
def cent_euro_file(tmp_path: Path) -> Path:
    """¢€ in UTF-8: five bytes, the euro straddles byte 4."""
    return write_file(tmp_path, "cent_euro.txt", TWO_BYTE + THREE_BYTE)
