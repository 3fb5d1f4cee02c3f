"""Command line interface for linnlights."""

from .main import cli, main

__all__ = ["cli", "main"]
