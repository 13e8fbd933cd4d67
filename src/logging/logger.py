# src/logging/logger.py - v3
"""Log output for the chunker and its CLI.

Modules log through ``logging.getLogger(__name__)``, which places them
under the ``mbchunker`` root configured here. What they emit:

    WARNING  io.file_reader        file vanished or failed mid-read
    WARNING  chunking.file_source  chunk bytes not valid in the encoding
    DEBUG    chunking.*            chunker built (size, encoding, path)
    INFO     main                  split summary
    ERROR    main                  bad index, configuration or fatal errors

Every line carries the file being chunked and the CLI command, taken
from the log context that ``main`` sets before opening a chunker.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mbchunker.logging.context import get_context

ROOT_LOGGER = "mbchunker"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with source and command under ``context``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``time [LEVEL] logger [command] (source) - message``."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        parts = [
            datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
        ]
        if ctx.command:
            parts.append(f"[{ctx.command}]")
        if ctx.source:
            parts.append(f"({ctx.source})")
        parts.append(f"- {record.getMessage()}")
        line = " ".join(parts)
        if record.exc_info and record.exc_info[1] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | Path | None = None,
    rotation: str = "10MB",
    retention: int = 5,
) -> logging.Logger:
    """Send package logs to stderr and, optionally, a rotating file.

    stdout is left to the chunk text printed by ``show`` and ``split``.
    Calling this again replaces the previous handlers.

    Args:
        level: DEBUG, INFO, WARNING or ERROR.
        log_format: "json" or "text".
        log_file: Optional rotating log file in addition to stderr.
        rotation: Size before the log file rolls over.
        retention: Number of rolled-over files kept.

    Returns:
        The configured ``mbchunker`` logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    formatter: logging.Formatter = JsonFormatter() if log_format == "json" else TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        from mbchunker.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(log_file, rotation=rotation, retention=retention)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger
