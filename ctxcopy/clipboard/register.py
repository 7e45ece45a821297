"""Register backends: where copied text ends up.

Every backend fully replaces its content on set() (no history, no append)
and serializes writers with a lock; last writer wins.
"""

from __future__ import annotations

import base64
import logging
import sys
import threading
from typing import TextIO

import pyperclip

from ctxcopy.config.schema import ClipboardConfig
from ctxcopy.core.errors import RegisterError

logger = logging.getLogger(__name__)

# OSC 52 size limit (base64 encoded) - some terminals cap at ~74KB
OSC52_MAX_BYTES = 74994


class MemoryRegister:
    """In-process register. Used when embedding ctxcopy and in tests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._text: str | None = None

    @property
    def name(self) -> str:
        return "memory"

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text

    def get(self) -> str | None:
        with self._lock:
            return self._text


class SystemClipboardRegister:
    """OS clipboard via pyperclip (pbcopy, xclip/xsel/wl-copy, Windows API)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "system clipboard"

    def set(self, text: str) -> None:
        with self._lock:
            try:
                pyperclip.copy(text)
            except pyperclip.PyperclipException as e:
                raise RegisterError(f"Clipboard access failed: {e}") from e

    def get(self) -> str | None:
        try:
            return pyperclip.paste() or None
        except pyperclip.PyperclipException as e:
            logger.debug("Clipboard read failed: %s", e)
            return None


class OSC52Register:
    """Terminal clipboard using the OSC 52 escape sequence.

    Lets the terminal emulator set the system clipboard, which works over
    SSH with no clipboard tools installed. Supported by iTerm2, kitty,
    Alacritty, WezTerm, Windows Terminal and tmux (with set-clipboard on).
    The terminal never acknowledges, so get() returns what was last sent.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._lock = threading.Lock()
        self._stream = stream
        self._last: str | None = None

    @property
    def name(self) -> str:
        return "OSC 52"

    def set(self, text: str) -> None:
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        if len(encoded) > OSC52_MAX_BYTES:
            raise RegisterError(
                f"Text too large for OSC 52 ({len(encoded):,} encoded bytes, "
                f"limit {OSC52_MAX_BYTES:,})"
            )
        stream = self._stream or sys.stdout
        with self._lock:
            try:
                # ESC ] 52 ; c ; <base64> BEL  (c = clipboard selection)
                stream.write(f"\x1b]52;c;{encoded}\x07")
                stream.flush()
            except OSError as e:
                raise RegisterError(f"Terminal write failed: {e}") from e
            self._last = text

    def get(self) -> str | None:
        with self._lock:
            return self._last


def create_register(
    config: ClipboardConfig,
) -> MemoryRegister | SystemClipboardRegister | OSC52Register:
    """Factory to create a register backend from config."""
    if config.backend == "memory":
        register: MemoryRegister | SystemClipboardRegister | OSC52Register = MemoryRegister()
    elif config.backend == "system":
        register = SystemClipboardRegister()
    elif config.backend == "osc52":
        register = OSC52Register()
    else:
        raise ValueError(f"Unknown register backend: {config.backend}")
    logger.debug("Using %s register", register.name)
    return register
