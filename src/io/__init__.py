"""Bounded file reads."""
