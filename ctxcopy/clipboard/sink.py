"""Copy sink: writes a resolved value to the register and reports it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxcopy.core.constants import (
    DEFAULT_MESSAGE_TEMPLATE,
    DESCRIPTION_PLACEHOLDER,
    TEXT_PLACEHOLDER,
)

if TYPE_CHECKING:
    from ctxcopy.core.types import ContextValue
    from ctxcopy.host.interfaces import Notifier, Register


def render_message(template: str, value: ContextValue) -> str:
    """Substitute `{text}` and `{description}` in template.

    Every occurrence is replaced literally; nothing is escaped and the
    result is not scanned again, so placeholder-like strings inside the
    value survive untouched. Unknown braces are left as-is.

    Examples:
        >>> render_message("{description}: {text}", ContextValue("main.x", "file name"))
        'file name: main.x'
    """
    parts = template.split(TEXT_PLACEHOLDER)
    return value.text.join(
        part.replace(DESCRIPTION_PLACEHOLDER, value.description) for part in parts
    )


class CopySink:
    """Stores values in the register and emits a templated status message."""

    def __init__(
        self,
        register: Register,
        notifier: Notifier,
        template: str = DEFAULT_MESSAGE_TEMPLATE,
    ) -> None:
        self.register = register
        self.notifier = notifier
        self.template = template

    def set_template(self, template: str) -> None:
        """Replace the message template used for subsequent copies."""
        self.template = template

    def copy(self, value: ContextValue) -> str:
        """Write value.text to the register, then report it.

        Returns:
            The rendered status message.

        Raises:
            RegisterError: The register backend could not store the text.
                Nothing is reported in that case.
        """
        self.register.set(value.text)
        message = render_message(self.template, value)
        self.notifier.notify(message)
        return message
