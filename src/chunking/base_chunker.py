# src/chunking/base_chunker.py - v2
"""Abstract chunk source interface.

A source knows how to fetch the chunk at an offset and how many chunks
it holds. It does not track any cursor; navigation lives in
``chunking.chunker.Chunker`` and only ever hands a source
``index * size``. The unit of ``size`` (characters or bytes) is the
source's own business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mbchunker.core.errors import InvalidOffsetError, InvalidSizeError
from mbchunker.core.models import ChunkResult
from mbchunker.encoding.registry import EncodingProfile, resolve_encoding


class BaseChunkSource(ABC):
    """Unified interface for text and file chunk sources."""

    #: Smallest accepted chunk size.
    min_size: int = 1

    def __init__(self, size: int, encoding: str) -> None:
        self._size = self._validate_size(size)
        self._profile = resolve_encoding(encoding)

    @property
    @abstractmethod
    def unit(self) -> str:
        """Unit of ``size`` and offsets ('chars' or 'bytes')."""

    @property
    def size(self) -> int:
        return self._size

    @property
    def encoding(self) -> str:
        """Canonical codec name."""
        return self._profile.name

    @property
    def profile(self) -> EncodingProfile:
        return self._profile

    @abstractmethod
    def count_chunks(self) -> int:
        """Number of chunks, ``ceil(length / size)``; 0 when empty."""

    @abstractmethod
    def fetch_chunk_at(self, offset: int) -> ChunkResult:
        """Return the chunk starting at ``offset`` or a NoChunk."""

    def _validate_offset(self, offset: int) -> None:
        if offset < 0:
            raise InvalidOffsetError(offset)

    def _validate_size(self, size: int) -> int:
        if isinstance(size, bool) or not isinstance(size, int) or size < self.min_size:
            raise InvalidSizeError(size, self.min_size)
        return size

    @staticmethod
    def _ceil_div(length: int, size: int) -> int:
        return -(-length // size)
