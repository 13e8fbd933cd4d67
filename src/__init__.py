# src/__init__.py - v1
"""mbchunker: multi-byte-safe chunked reading of large strings and files.

Quick start:
    from mbchunker import create_file_chunker

    chunker = create_file_chunker("big.log", size=8192, encoding="utf-8")
    for chunk in chunker:
        handle(chunk.text)
"""

from mbchunker.chunking.chunker import Chunker
from mbchunker.chunking.chunker_factory import create_file_chunker, create_text_chunker
from mbchunker.chunking.file_source import FileSource
from mbchunker.chunking.text_source import TextSource
from mbchunker.core.errors import (
    ChunkerError,
    ConfigurationError,
    InvalidOffsetError,
    InvalidSizeError,
    UnreadableFileError,
    UnsupportedEncodingError,
)
from mbchunker.core.models import Chunk, ChunkResult, NoChunk
from mbchunker.version import __version__

__all__ = [
    "Chunk",
    "ChunkResult",
    "Chunker",
    "ChunkerError",
    "ConfigurationError",
    "FileSource",
    "InvalidOffsetError",
    "InvalidSizeError",
    "NoChunk",
    "TextSource",
    "UnreadableFileError",
    "UnsupportedEncodingError",
    "__version__",
    "create_file_chunker",
    "create_text_chunker",
]
