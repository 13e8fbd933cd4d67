"""Encoding registry and multi-byte-safe byte cutting."""
