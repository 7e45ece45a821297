"""Theme definitions for ctxcopy display."""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme configuration (Rich style strings).

    All styling in one place for easy customization.
    """

    title: str = "bold"
    key: str = "bold cyan"
    label: str = ""
    disabled: str = "dim"
    status: str = "green"
    error: str = "bold red"
    hint: str = "dim"


# Default theme instance
DEFAULT_THEME = Theme()
