"""Console status/error channel."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from ctxcopy.display.console import get_console
from ctxcopy.display.theme import DEFAULT_THEME, Theme


class ConsoleNotifier:
    """Notifier that prints to a Rich console.

    Messages are escaped before printing, so paths like "src/[id]/page.tsx"
    render verbatim instead of being read as markup.
    """

    def __init__(self, console: Console | None = None, theme: Theme | None = None) -> None:
        self.console = console or get_console()
        self.theme = theme or DEFAULT_THEME

    def notify(self, message: str) -> None:
        self.console.print(f"[{self.theme.status}]{escape(message)}[/]")

    def notify_error(self, message: str) -> None:
        self.console.print(f"[{self.theme.error}]Error:[/] {escape(message)}")
