# src/encoding/cut.py - v1
"""Multi-byte-safe byte window trimming.

Given raw bytes and a byte window inside them, return the slice that
holds only whole characters:

    raw:     ZZZZAAAABBBBCCCC   (four 4-byte characters)
    window:    ----------       (starts inside Z, ends inside C)
    result:  ZZZZAAAABBBB       (start moved left, partial C dropped)

The start moves left to the first byte of the character it falls in.
The end moves left to the last character boundary at or before it, so
a character straddling the end belongs to the next window.
"""

from __future__ import annotations

from mbchunker.encoding.registry import EncodingProfile


def cut(
    raw: bytes,
    start: int,
    length: int,
    profile: EncodingProfile,
    origin: int = 0,
) -> bytes:
    """Cut ``raw[start:start + length]`` on character boundaries.

    Args:
        raw: Bytes read from the source.
        start: Window start inside ``raw``.
        length: Window length in bytes.
        profile: Boundary rules of the source encoding.
        origin: Absolute position of ``raw[0]`` in the source.

    Returns:
        The well-formed slice; empty when no whole character fits.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be >= 0")
    if start >= len(raw):
        return b""

    begin = start
    while begin > 0 and not profile.is_boundary(raw, begin, origin):
        begin -= 1

    end = min(start + length, len(raw))
    while end > begin and not profile.is_boundary(raw, end, origin):
        end -= 1

    return raw[begin:end]
