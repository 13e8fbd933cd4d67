# src/encoding/registry.py - v1
"""Supported encodings and their character-boundary rules.

Names are normalized through Python's codec registry, so ``UTF8``,
``utf_8`` and ``utf-8`` all resolve to the same profile. Only codecs
whose character boundaries can be found from a few neighbouring bytes
are supported; stateful or lead-byte-ambiguous codecs (``utf-16`` with a
BOM, ``shift_jis``, ``gb18030``...) are rejected.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Literal

from mbchunker.core.errors import UnsupportedEncodingError

# Widest character in any supported encoding (UTF-8 and UTF-32 top out at 4).
MAX_CHARACTER_SIZE = 4

AUTO_DETECT = "auto"

EncodingFamily = Literal["utf-8", "utf-16", "utf-32", "single-byte"]


@dataclass(frozen=True)
class EncodingProfile:
    """Boundary rules for one codec.

    Attributes:
        name: Canonical Python codec name.
        family: Which boundary rule applies.
        unit: Code unit width in bytes.
        big_endian: Byte order for UTF-16/UTF-32.
    """

    name: str
    family: EncodingFamily
    unit: int = 1
    big_endian: bool = False

    def is_boundary(self, raw: bytes, pos: int, origin: int = 0) -> bool:
        """Return True if a character starts at ``raw[pos]``.

        Args:
            raw: Bytes read from the source.
            pos: Position inside ``raw``.
            origin: Absolute position of ``raw[0]`` in the source, used to
                keep fixed-width code units aligned.
        """
        if pos <= 0 and origin == 0:
            return True
        if pos >= len(raw):
            return True
        if self.family == "single-byte":
            return True
        if self.family == "utf-8":
            return (raw[pos] & 0xC0) != 0x80
        if (origin + pos) % self.unit:
            return False
        if self.family == "utf-16" and pos + 1 < len(raw):
            high = raw[pos] if self.big_endian else raw[pos + 1]
            # Low surrogate: second half of a pair.
            return not 0xDC <= high <= 0xDF
        return True

    def decode(self, raw: bytes) -> str:
        return raw.decode(self.name)

    def encode(self, text: str) -> bytes:
        return text.encode(self.name)


_PROFILES: dict[str, EncodingProfile] = {
    p.name: p
    for p in (
        EncodingProfile("utf-8", "utf-8"),
        EncodingProfile("utf-16-le", "utf-16", unit=2),
        EncodingProfile("utf-16-be", "utf-16", unit=2, big_endian=True),
        EncodingProfile("utf-32-le", "utf-32", unit=4),
        EncodingProfile("utf-32-be", "utf-32", unit=4, big_endian=True),
        EncodingProfile("ascii", "single-byte"),
        EncodingProfile("iso8859-1", "single-byte"),
        EncodingProfile("iso8859-15", "single-byte"),
        EncodingProfile("cp1252", "single-byte"),
    )
}


def canonical_name(name: str) -> str:
    """Normalize an encoding name via ``codecs.lookup``.

    Raises:
        UnsupportedEncodingError: If Python does not know the codec.
    """
    if not isinstance(name, str) or not name.strip():
        raise UnsupportedEncodingError(name, "encoding name must be a non-empty string")
    try:
        return codecs.lookup(name.strip()).name
    except LookupError:
        raise UnsupportedEncodingError(name, "unknown codec") from None


def resolve_encoding(name: str) -> EncodingProfile:
    """Return the boundary profile for ``name``.

    Raises:
        UnsupportedEncodingError: Unknown codec, the auto-detect sentinel,
            or a codec without local boundary rules.
    """
    if isinstance(name, str) and name.strip().lower() == AUTO_DETECT:
        raise UnsupportedEncodingError(name, "encoding auto-detection is not supported")
    canonical = canonical_name(name)
    profile = _PROFILES.get(canonical)
    if profile is None:
        raise UnsupportedEncodingError(name, f"supported: {', '.join(supported_encodings())}")
    return profile


def supported_encodings() -> list[str]:
    """Canonical names of all supported encodings, sorted."""
    return sorted(_PROFILES)
