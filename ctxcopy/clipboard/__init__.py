"""Register backends and the copy sink."""

from ctxcopy.clipboard.register import (
    OSC52_MAX_BYTES,
    MemoryRegister,
    OSC52Register,
    SystemClipboardRegister,
    create_register,
)
from ctxcopy.clipboard.sink import CopySink, render_message

__all__ = [
    "CopySink",
    "MemoryRegister",
    "OSC52Register",
    "OSC52_MAX_BYTES",
    "SystemClipboardRegister",
    "create_register",
    "render_message",
]
