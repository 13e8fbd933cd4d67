# src/core/errors.py - v1
"""Exception hierarchy shared by every chunker module.

Configuration errors are raised at construction and never corrected.
Content boundaries (no next chunk, offset past the end) are not errors;
they surface as NoChunk results instead.
"""

from __future__ import annotations


class ChunkerError(Exception):
    """Root of all mbchunker errors."""


class ConfigurationError(ChunkerError):
    """Raised when a chunker or settings object is built with bad parameters."""


class InvalidSizeError(ConfigurationError):
    """Chunk size is not a positive int, or too small for a file chunker."""

    def __init__(self, size: object, minimum: int) -> None:
        self.size = size
        self.minimum = minimum
        super().__init__(f"size must be an int >= {minimum}, got {size!r}")


class UnsupportedEncodingError(ConfigurationError):
    """Encoding name is unknown to Python or not multi-byte safe here."""

    def __init__(self, encoding: object, reason: str = "") -> None:
        self.encoding = encoding
        message = f"unsupported encoding: {encoding!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnreadableFileError(ConfigurationError):
    """File path does not exist, is not a regular file, or cannot be read."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"file, {path}, must exist and be readable")


class InvalidOffsetError(ChunkerError, ValueError):
    """Negative offset handed to a source's fetch primitive."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"offset must be a positive int or zero, got {offset}")
