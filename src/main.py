# src/main.py - v3
"""CLI entry point: count, show and split commands.

Usage:
    mbchunker count <file> [--size N] [--encoding E] [--text]
    mbchunker show <file> [--index I] [--size N] [--encoding E] [--text]
    mbchunker split <file> -o <dir> [--size N] [--encoding E]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from mbchunker.core.errors import ConfigurationError
from mbchunker.version import __version__

if TYPE_CHECKING:
    from mbchunker.chunking.chunker import Chunker
    from mbchunker.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _setup_logging(args.verbose)
        return args.func(args, settings)
    except (ConfigurationError, ValidationError) as exc:
        logger.error("Configuration error: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mbchunker",
        description=f"mbchunker v{__version__} - multi-byte-safe chunked reading",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    # Shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("source", help="File path (or literal text with --text)")
    common.add_argument(
        "-s", "--size", type=int, default=None,
        help="Chunk size: bytes for files, characters for text",
    )
    common.add_argument(
        "-e", "--encoding", default=None,
        help="Source encoding (default: MBCHUNKER_DEFAULT_ENCODING or utf-8)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- count ---
    p_count = subparsers.add_parser(
        "count", parents=[common], help="Print the number of chunks",
    )
    p_count.add_argument(
        "--text", action="store_true",
        help="Treat SOURCE as literal text",
    )
    p_count.set_defaults(func=_cmd_count)

    # --- show ---
    p_show = subparsers.add_parser(
        "show", parents=[common], help="Print one chunk",
    )
    p_show.add_argument(
        "-i", "--index", type=int, default=0,
        help="Chunk index, 0-based (default: 0)",
    )
    p_show.add_argument(
        "--text", action="store_true",
        help="Treat SOURCE as literal text",
    )
    p_show.set_defaults(func=_cmd_show)

    # --- split ---
    p_split = subparsers.add_parser(
        "split", parents=[common], help="Write every chunk of a file to its own file",
    )
    p_split.add_argument(
        "-o", "--output", type=Path, default=Path("./chunks"),
        help="Output directory (default: ./chunks)",
    )
    p_split.set_defaults(func=_cmd_split)

    return parser


def _cmd_count(args: argparse.Namespace, settings: Settings) -> int:
    """Print the chunk count."""
    chunker = _open_chunker(args, settings)
    count = chunker.count_chunks()
    logger.debug("%d chunks of %d %s", count, chunker.size, chunker.source.unit)
    print(count)
    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    """Fetch the chunk at ``--index`` and print it."""
    chunker = _open_chunker(args, settings)
    if args.index < 0:
        logger.error("Index must be >= 0, got %d", args.index)
        return 1

    count = chunker.count_chunks()
    if args.index >= count:
        logger.error("No chunk at index %d (%d chunks)", args.index, count)
        return 1

    chunk = chunker.source.fetch_chunk_at(args.index * chunker.size)
    if not chunk:
        logger.error("Chunk %d of %s could not be read", args.index, args.source)
        return 1

    logger.debug("Chunk %d: %d characters", args.index, chunk.char_count)
    sys.stdout.write(chunk.text)
    sys.stdout.write("\n")
    return 0


def _cmd_split(args: argparse.Namespace, settings: Settings) -> int:
    """Write chunk_00000.txt, chunk_00001.txt, ... into the output directory."""
    from mbchunker.chunking.chunker_factory import create_file_chunker
    from mbchunker.logging.context import set_source_context

    set_source_context(args.source, args.command)
    chunker = create_file_chunker(args.source, args.size, args.encoding, settings=settings)
    output: Path = args.output
    output.mkdir(parents=True, exist_ok=True)

    profile = chunker.source.profile
    written = 0
    for chunk in chunker:
        target = output / f"chunk_{written:05d}.txt"
        target.write_bytes(profile.encode(chunk.text))
        written += 1

    logger.info("Wrote %d chunks of %s to %s", written, args.source, output)
    print(f"{written} chunks -> {output}")
    return 0


def _open_chunker(args: argparse.Namespace, settings: Settings) -> Chunker:
    """Build a text or file chunker from the shared arguments."""
    from mbchunker.chunking.chunker_factory import (
        create_file_chunker,
        create_text_chunker,
    )
    from mbchunker.logging.context import set_source_context

    if getattr(args, "text", False):
        set_source_context("<text>", args.command)
        return create_text_chunker(args.source, args.size, args.encoding, settings=settings)

    set_source_context(args.source, args.command)
    return create_file_chunker(args.source, args.size, args.encoding, settings=settings)


def _setup_logging(verbose: bool) -> Settings:
    """Configure logging from settings; --verbose forces DEBUG."""
    from mbchunker.config.settings import load_settings
    from mbchunker.logging.logger import setup_logging

    settings = load_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    return settings


if __name__ == "__main__":
    sys.exit(main())
