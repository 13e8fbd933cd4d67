"""Logging setup, formatters and context."""
