# src/chunking/chunker.py - v1
"""Cursor-based navigation over a chunk source.

Every operation is built on ``source.fetch_chunk_at(index * size)``.
Moving past either end returns a NoChunk and leaves the cursor where
it was, so callers can probe the edges as often as they like.
"""

from __future__ import annotations

from typing import Iterator

from mbchunker.chunking.base_chunker import BaseChunkSource
from mbchunker.core.models import Chunk, ChunkResult, NoChunk


class Chunker:
    """Forward/backward iteration over the chunks of one source.

    Example:
        chunker = create_text_chunker("foo", size=1)
        chunker.current_chunk().text   # "f"
        chunker.next_chunk().text      # "o"
    """

    def __init__(self, source: BaseChunkSource) -> None:
        self._source = source
        self._index = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={type(self._source).__name__}, "
            f"size={self.size}, encoding={self.encoding!r}, index={self._index})"
        )

    # --- Accessors ---

    @property
    def source(self) -> BaseChunkSource:
        return self._source

    @property
    def size(self) -> int:
        return self._source.size

    @property
    def encoding(self) -> str:
        return self._source.encoding

    @property
    def index(self) -> int:
        return self._index

    # --- Navigation ---

    def current_chunk(self) -> ChunkResult:
        """Return the chunk under the cursor."""
        return self._source.fetch_chunk_at(self._index * self.size)

    def count_chunks(self) -> int:
        return self._source.count_chunks()

    def next_chunk(self) -> ChunkResult:
        """Advance the cursor and return the new chunk.

        Returns a NoChunk without moving when already at the last chunk.
        """
        if not self.has_next_chunk():
            return NoChunk(offset=(self._index + 1) * self.size)
        self._index += 1
        return self.current_chunk()

    def previous_chunk(self) -> ChunkResult:
        """Move the cursor back and return the new chunk.

        Returns a NoChunk without moving when already at the first chunk.
        """
        if not self.has_previous_chunk():
            return NoChunk(offset=0)
        self._index -= 1
        return self.current_chunk()

    def has_chunk(self) -> bool:
        """True iff there is exactly one chunk."""
        return self.count_chunks() == 1

    def has_chunks(self) -> bool:
        return self.count_chunks() > 0

    def has_next_chunk(self) -> bool:
        return self._index + 1 < self.count_chunks()

    def has_previous_chunk(self) -> bool:
        return self._index - 1 >= 0

    def reset(self) -> None:
        self._index = 0

    # Short aliases
    current = current_chunk
    next = next_chunk
    previous = previous_chunk

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.count_chunks()

    def __iter__(self) -> Iterator[Chunk]:
        """Yield every chunk from the first, leaving the cursor alone."""
        for i in range(self.count_chunks()):
            result = self._source.fetch_chunk_at(i * self.size)
            if not result:
                return
            yield result
