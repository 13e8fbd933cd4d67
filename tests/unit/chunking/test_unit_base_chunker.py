# tests/unit/chunking/test_unit_base_chunker.py - v2
"""Tests for chunking/base_chunker.py - BaseChunkSource ABC."""

from __future__ import annotations

import pytest

from mbchunker.chunking.base_chunker import BaseChunkSource
from mbchunker.core.errors import InvalidOffsetError, InvalidSizeError, UnsupportedEncodingError
from mbchunker.core.models import Chunk, NoChunk


class _FixedSource(BaseChunkSource):
    """Minimal concrete source: 10 units of content."""

    min_size = 2

    @property
    def unit(self) -> str:
        return "units"

    def count_chunks(self) -> int:
        return self._ceil_div(10, self.size)

    def fetch_chunk_at(self, offset: int):
        self._validate_offset(offset)
        if offset >= 10:
            return NoChunk(offset=offset)
        return Chunk(text="x" * min(self.size, 10 - offset), offset=offset)


class TestBaseChunkSource:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseChunkSource(4, "utf-8")  # type: ignore[abstract]

    def test_has_required_methods(self):
        assert hasattr(BaseChunkSource, "fetch_chunk_at")
        assert hasattr(BaseChunkSource, "count_chunks")
        assert hasattr(BaseChunkSource, "unit")

    def test_accessors(self):
        source = _FixedSource(3, "UTF8")
        assert source.size == 3
        assert source.encoding == "utf-8"
        assert source.profile.family == "utf-8"

    def test_ceil_count(self):
        assert _FixedSource(3, "utf-8").count_chunks() == 4
        assert _FixedSource(5, "utf-8").count_chunks() == 2
        assert _FixedSource(10, "utf-8").count_chunks() == 1

    @pytest.mark.parametrize("size", [0, 1, -3, 2.5, "4", True])
    def test_rejects_bad_size(self, size):
        with pytest.raises(InvalidSizeError):
            _FixedSource(size, "utf-8")

    def test_rejects_bad_encoding(self):
        with pytest.raises(UnsupportedEncodingError):
            _FixedSource(4, "foo")

    def test_negative_offset_is_programming_error(self):
        with pytest.raises(InvalidOffsetError):
            _FixedSource(4, "utf-8").fetch_chunk_at(-1)

    def test_invalid_offset_is_value_error(self):
        with pytest.raises(ValueError):
            _FixedSource(4, "utf-8").fetch_chunk_at(-4)
