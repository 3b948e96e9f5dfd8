"""Command line interface for the campus assistant."""

from .app import main

__all__ = ["main"]
