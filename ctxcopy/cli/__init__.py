"""Command-line interface."""

from ctxcopy.cli.main import main

__all__ = ["main"]
