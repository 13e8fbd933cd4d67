# src/chunking/file_source.py - v1
"""Chunk source over a file on disk.

Offsets and ``size`` count bytes. Each fetch reads one short, padded
byte range and trims it to whole characters:

    file:    AAAABBBBCCCC      (three 4-byte characters)
    window:  ----------        (10-byte chunk, would end inside C)
    read:    ----------pppp    (window plus 4 bytes of trailing padding)
    result:  AAAABBBB          (partial C left for the next chunk)

Later chunks also get 4 bytes of leading padding so a character that
straddles the window start can be pulled in whole. The first chunk has
nothing before it and is read without leading padding.

Nothing is cached: the file is re-measured and re-read on every call.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mbchunker.chunking.base_chunker import BaseChunkSource
from mbchunker.core.errors import UnreadableFileError
from mbchunker.core.models import Chunk, ChunkResult, NoChunk
from mbchunker.encoding.cut import cut
from mbchunker.encoding.registry import MAX_CHARACTER_SIZE
from mbchunker.io.file_reader import file_size, is_readable, read_range

logger = logging.getLogger(__name__)


class FileSource(BaseChunkSource):
    """Byte-sized, multi-byte-safe chunks of a file."""

    min_size = MAX_CHARACTER_SIZE

    def __init__(self, path: str | Path, size: int = 8192, *, encoding: str) -> None:
        if not is_readable(path):
            raise UnreadableFileError(path)
        self._path = Path(path)
        super().__init__(size, encoding)

    @property
    def unit(self) -> str:
        return "bytes"

    @property
    def path(self) -> Path:
        return self._path

    def count_chunks(self) -> int:
        return self._ceil_div(file_size(self._path), self.size)

    def fetch_chunk_at(self, offset: int) -> ChunkResult:
        self._validate_offset(offset)

        # First chunk has no leading padding.
        lead = min(offset, MAX_CHARACTER_SIZE)
        origin = offset - lead

        raw = read_range(self._path, origin, lead + self.size + MAX_CHARACTER_SIZE)
        if not raw or len(raw) <= lead:
            return NoChunk(offset=offset)

        well_formed = cut(raw, lead, self.size, self.profile, origin=origin)
        try:
            text = self.profile.decode(well_formed)
        except UnicodeDecodeError as e:
            logger.warning(
                "Chunk at byte %d of %s is not valid %s: %s",
                offset, self._path, self.encoding, e,
            )
            return NoChunk(offset=offset)

        return Chunk(text=text, offset=offset)
