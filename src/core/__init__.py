"""Shared result models and errors."""
