# tests/unit/core/test_unit_models.py - v2
"""Tests for core/models.py - Chunk and NoChunk results."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mbchunker.core.models import Chunk, NoChunk


class TestChunk:
    def test_fields(self):
        chunk = Chunk(text="foo", offset=8)
        assert chunk.text == "foo"
        assert chunk.offset == 8
        assert chunk.kind == "chunk"
        assert chunk.char_count == 3
        assert str(chunk) == "foo"

    def test_empty_chunk_is_truthy(self):
        assert Chunk(text="", offset=0)

    def test_frozen(self):
        chunk = Chunk(text="foo", offset=0)
        with pytest.raises(ValidationError):
            chunk.text = "bar"  # type: ignore[misc]

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(text="foo", offset=-1)

    def test_serializes(self):
        assert Chunk(text="€", offset=4).model_dump() == {"kind": "chunk", "text": "€", "offset": 4}


class TestNoChunk:
    def test_falsy(self):
        assert not NoChunk()
        assert not NoChunk(offset=12)

    def test_distinct_from_empty_chunk(self):
        assert NoChunk(offset=0) != Chunk(text="", offset=0)
        assert isinstance(NoChunk(), NoChunk)
        assert not isinstance(Chunk(text="", offset=0), NoChunk)

    def test_equality(self):
        assert NoChunk(offset=3) == NoChunk(offset=3)
