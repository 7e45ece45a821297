"""Value types shared between providers and the copy sink."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextValue:
    """A resolved piece of context, consumed once by the copy sink.

    Attributes:
        text: The value written to the register. Never contains a newline.
        description: Short tag used in the status message (e.g. "file name").
    """

    text: str
    description: str

    def __post_init__(self) -> None:
        if "\n" in self.text or "\r" in self.text:
            raise ValueError(f"Context value for {self.description!r} must be a single line")
