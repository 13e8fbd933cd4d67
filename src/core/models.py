# src/core/models.py - v2
"""Result models returned by every chunk fetch.

A fetch yields either a Chunk (possibly with empty text) or a NoChunk.
Both are frozen pydantic models; NoChunk is falsy so traversal loops can
be written as ``while chunk := chunker.next_chunk(): ...``.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """A decoded piece of content starting at ``offset``.

    ``offset`` is the requested position in the source's unit: characters
    for text sources, bytes for file sources.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["chunk"] = "chunk"
    text: str
    offset: int = Field(ge=0)

    def __bool__(self) -> bool:
        # An empty chunk is still a chunk.
        return True

    def __str__(self) -> str:
        return self.text

    @property
    def char_count(self) -> int:
        return len(self.text)


class NoChunk(BaseModel):
    """No content exists at ``offset``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"
    offset: int = Field(default=0, ge=0)

    def __bool__(self) -> bool:
        return False


ChunkResult = Union[Chunk, NoChunk]
