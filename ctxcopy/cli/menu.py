"""Interactive menu for choosing what to copy.

Example:
    $ ctxcopy --file src/main.py --line 42

    Copy context

      n) File name
      f) Full path
      ...
      g) Git branch (unavailable)
      ...

    [n/f/d/r/l/p/b/i/u/q]:
"""

from dataclasses import dataclass
from enum import Enum, auto

from rich.console import Console
from rich.text import Text

from ctxcopy.context.dispatcher import Dispatcher
from ctxcopy.core.constants import QUIT_KEY
from ctxcopy.core.types import ContextValue
from ctxcopy.display.theme import DEFAULT_THEME, Theme


class MenuChoice(Enum):
    """Outcome of a menu interaction."""

    COPIED = auto()  # Provider ran and the value was copied
    FAILED = auto()  # Provider ran but failed (already reported)
    QUIT = auto()  # Dismissed without side effect


@dataclass
class MenuResult:
    """Result from menu interaction.

    Attributes:
        choice: What happened.
        provider: Name of the provider that ran, if any.
        value: Copied value for COPIED.
    """

    choice: MenuChoice
    provider: str | None = None
    value: ContextValue | None = None


def render_menu(
    dispatcher: Dispatcher,
    keys: dict[str, str],
    console: Console,
    theme: Theme = DEFAULT_THEME,
) -> list[str]:
    """Print the menu and return the keys of the enabled entries.

    Availability is evaluated fresh on every call.
    """
    availability = dispatcher.availability()
    enabled: list[str] = []

    console.print()
    console.print(Text("Copy context", style=theme.title))
    console.print()

    for provider in dispatcher.providers:
        key = keys[provider.name]
        line = Text("  ")
        if availability[provider.name]:
            enabled.append(key)
            line.append(key, style=theme.key)
            line.append(") ")
            line.append(provider.label, style=theme.label)
        else:
            line.append(f"{key}) {provider.label} (unavailable)", style=theme.disabled)
        console.print(line)

    console.print()
    return enabled


def show_menu(
    dispatcher: Dispatcher,
    keys: dict[str, str],
    console: Console,
    theme: Theme = DEFAULT_THEME,
) -> MenuResult:
    """Display the menu, read a key and run the chosen provider.

    Args:
        dispatcher: Dispatcher holding the providers.
        keys: Provider name -> single-character key.
        console: Rich Console for output and input.
        theme: Styles for the entries.

    Returns:
        MenuResult describing what happened. `q`, EOF and Ctrl-C return
        QUIT without touching the register.
    """
    by_key = {key: name for name, key in keys.items()}

    enabled = render_menu(dispatcher, keys, console, theme)
    while True:
        prompt_text = f"[{'/'.join([*enabled, QUIT_KEY])}]: "
        try:
            choice = console.input(Text(prompt_text)).strip()
        except (EOFError, KeyboardInterrupt):
            return MenuResult(choice=MenuChoice.QUIT)

        if choice == QUIT_KEY:
            return MenuResult(choice=MenuChoice.QUIT)

        name = by_key.get(choice)
        if name is None:
            console.print(Text(f"Please enter one of {', '.join(enabled)} or {QUIT_KEY}", style=theme.hint))
            continue

        if choice not in enabled:
            # Re-render: state may have changed since the menu was drawn
            console.print(Text(f"{dispatcher.get(name).label} is not available here", style=theme.hint))
            enabled = render_menu(dispatcher, keys, console, theme)
            continue

        value = dispatcher.run(name)
        if value is None:
            return MenuResult(choice=MenuChoice.FAILED, provider=name)
        return MenuResult(choice=MenuChoice.COPIED, provider=name, value=value)
