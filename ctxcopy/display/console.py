"""Shared Rich Console instance for ctxcopy."""

from __future__ import annotations

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get the shared Console instance.

    Status output goes to stderr so stdout stays clean for OSC 52
    sequences and for editors capturing the command's output.
    """
    global _console
    if _console is None:
        _console = Console(highlight=False, markup=True, stderr=True)
    return _console


def set_console(console: Console) -> None:
    """Set a custom Console instance.

    Useful for testing or custom configurations.
    """
    global _console
    _console = console
