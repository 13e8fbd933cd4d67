# src/chunking/chunker_factory.py - v2
"""Factory for chunkers over text or files.

Explicit arguments win; anything left as None is taken from the given
settings, or from a fresh ``Settings()`` when none is passed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mbchunker.chunking.chunker import Chunker
from mbchunker.chunking.file_source import FileSource
from mbchunker.chunking.text_source import TextSource
from mbchunker.config.settings import Settings

logger = logging.getLogger(__name__)


def create_text_chunker(
    text: str | bytes,
    size: int | None = None,
    encoding: str | None = None,
    settings: Settings | None = None,
) -> Chunker:
    """Build a chunker over an in-memory string.

    Args:
        text: Content to split; bytes are decoded with ``encoding``.
        size: Chunk size in characters.
        encoding: Codec name of the text.
        settings: Defaults for missing arguments.

    Returns:
        Chunker positioned at the first chunk.
    """
    if size is None or encoding is None:
        settings = settings or Settings()
    source = TextSource(
        text,
        size if size is not None else settings.text_chunk_size,
        encoding=encoding if encoding is not None else settings.default_encoding,
    )
    logger.debug("Text chunker: %d chars, size=%d, encoding=%s",
                 len(source.text), source.size, source.encoding)
    return Chunker(source)


def create_file_chunker(
    path: str | Path,
    size: int | None = None,
    encoding: str | None = None,
    settings: Settings | None = None,
) -> Chunker:
    """Build a chunker over a file on disk.

    Args:
        path: Readable file.
        size: Chunk size in bytes, at least 4.
        encoding: Codec name of the file.
        settings: Defaults for missing arguments.

    Returns:
        Chunker positioned at the first chunk.
    """
    if size is None or encoding is None:
        settings = settings or Settings()
    source = FileSource(
        path,
        size if size is not None else settings.file_chunk_size,
        encoding=encoding if encoding is not None else settings.default_encoding,
    )
    logger.debug("File chunker: %s, size=%d, encoding=%s",
                 source.path, source.size, source.encoding)
    return Chunker(source)
