"""Display: shared console, theme and notifier."""

from ctxcopy.display.console import get_console, set_console
from ctxcopy.display.notifier import ConsoleNotifier
from ctxcopy.display.theme import DEFAULT_THEME, Theme

__all__ = [
    "ConsoleNotifier",
    "DEFAULT_THEME",
    "Theme",
    "get_console",
    "set_console",
]
