"""Editor state supplied on the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ctxcopy.core.utils import with_trailing_separator

SCRATCH_BUFFER_NAME = "*scratch*"


@dataclass(frozen=True)
class StaticEditorState:
    """Snapshot of editor state passed in by an editor integration.

    Editors call ctxcopy as a subprocess (e.g. `ctxcopy copy file-with-line
    --file % --line 42`), so the state is fixed for the lifetime of the
    process.

    Attributes:
        cwd: Active working directory.
        file_path: Backing file, absolute or relative to cwd. None or ""
            means the buffer is not backed by a file.
        line: 1-based cursor line.
        buffer_name: Display name reported by the editor. Defaults to the
            file's base name, or "*scratch*" without a file.
    """

    cwd: str
    file_path: str | None = None
    line: int = 1
    buffer_name: str | None = None

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Line numbers are 1-based, got {self.line}")
        # Normalize on a frozen dataclass
        cwd = os.path.abspath(os.path.expanduser(self.cwd))
        object.__setattr__(self, "cwd", cwd)
        if self.file_path:
            path = os.path.expanduser(self.file_path)
            if not os.path.isabs(path):
                path = os.path.join(cwd, path)
            object.__setattr__(self, "file_path", os.path.normpath(path))
        else:
            object.__setattr__(self, "file_path", None)

    def current_file_path(self) -> str | None:
        return self.file_path

    def current_working_directory(self) -> str:
        return with_trailing_separator(self.cwd)

    def current_buffer_display_name(self) -> str:
        if self.buffer_name:
            return self.buffer_name
        if self.file_path:
            return os.path.basename(self.file_path)
        return SCRATCH_BUFFER_NAME

    def current_line(self) -> int:
        return self.line
