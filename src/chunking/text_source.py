# src/chunking/text_source.py - v1
"""Chunk source over an in-memory string.

Offsets and ``size`` count characters (code points), never bytes, so a
slice can not land inside a multi-byte sequence.
"""

from __future__ import annotations

from mbchunker.chunking.base_chunker import BaseChunkSource
from mbchunker.core.errors import ConfigurationError
from mbchunker.core.models import Chunk, ChunkResult, NoChunk


class TextSource(BaseChunkSource):
    """Character-sized chunks of a string.

    ``text`` may be given as bytes, in which case it is decoded with the
    configured encoding. It can be replaced wholesale through the
    ``text`` setter; it is never changed in place.
    """

    min_size = 1

    def __init__(self, text: str | bytes, size: int = 2000, *, encoding: str) -> None:
        super().__init__(size, encoding)
        self._text = self._coerce(text)

    @property
    def unit(self) -> str:
        return "chars"

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | bytes) -> None:
        self._text = self._coerce(value)

    def count_chunks(self) -> int:
        return self._ceil_div(len(self._text), self.size)

    def fetch_chunk_at(self, offset: int) -> ChunkResult:
        self._validate_offset(offset)
        if offset >= len(self._text):
            return NoChunk(offset=offset)
        return Chunk(text=self._text[offset : offset + self.size], offset=offset)

    def _coerce(self, value: str | bytes) -> str:
        if isinstance(value, (bytes, bytearray)):
            try:
                return self.profile.decode(bytes(value))
            except UnicodeDecodeError as e:
                raise ConfigurationError(f"text is not valid {self.encoding}: {e}") from e
        if not isinstance(value, str):
            raise ConfigurationError(f"text must be str or bytes, got {type(value).__name__}")
        return value
