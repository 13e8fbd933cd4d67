# src/logging/context.py - v2
"""Contextual logging: attach the current source and command to records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_source: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "source", default=None
)
_command: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command", default=None
)


@dataclass
class LogContext:
    """Snapshot of the current logging context."""

    source: str | None = None
    command: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    return LogContext(source=_source.get(), command=_command.get())


def set_source_context(source: str, command: str | None = None) -> None:
    """Set the file (or '<text>') and CLI command being processed."""
    _source.set(source)
    _command.set(command)


def clear_context() -> None:
    _source.set(None)
    _command.set(None)
