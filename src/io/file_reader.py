# src/io/file_reader.py - v1
"""Bounded byte-range reads.

Every call opens, seeks, reads and closes; no handle is kept between
calls, so several readers can share one file safely.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def is_readable(path: str | Path) -> bool:
    """Check that ``path`` is an existing regular file we may read."""
    p = Path(path)
    return p.is_file() and os.access(p, os.R_OK)


def file_size(path: str | Path) -> int:
    """Byte length of ``path``; 0 when it is missing or unreadable."""
    try:
        return Path(path).stat().st_size
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return 0


def read_range(path: str | Path, start: int, length: int) -> bytes | None:
    """Read up to ``length`` bytes of ``path`` from ``start``.

    Args:
        path: File to read.
        start: Absolute byte position, must be >= 0.
        length: Maximum number of bytes to return.

    Returns:
        The bytes read, or None if the read failed or ``start`` is at or
        past the end of the file.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be >= 0")
    try:
        with open(path, "rb") as fh:
            fh.seek(start)
            data = fh.read(length)
    except OSError as e:
        logger.warning("Failed to read %d bytes at %d from %s: %s", length, start, path, e)
        return None
    if not data and length > 0:
        return None
    return data
