"""Command-line interface for quick-lookup."""

from .main import cli

__all__ = ["cli"]
