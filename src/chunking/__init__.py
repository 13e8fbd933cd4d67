"""Chunk sources, cursor navigation and factory."""
