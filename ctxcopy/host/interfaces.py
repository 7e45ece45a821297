"""Host collaborator interfaces (protocols).

Providers and the copy sink depend only on these. Using Protocols enables
structural subtyping, so an editor integration can supply its own objects
without inheriting from anything in ctxcopy.
"""

from typing import Protocol


class EditorState(Protocol):
    """Read-only view of the active document.

    Example:
        class MyEditor:
            def current_file_path(self) -> str | None:
                return self.view.file_name()
            ...
    """

    def current_file_path(self) -> str | None:
        """Absolute path of the backing file, or None for unsaved buffers."""
        ...

    def current_working_directory(self) -> str:
        """Active working directory, with a trailing separator."""
        ...

    def current_buffer_display_name(self) -> str:
        """Display name of the active buffer."""
        ...

    def current_line(self) -> int:
        """1-based cursor line."""
        ...


class ProjectLocator(Protocol):
    """Finds the project root associated with a path."""

    def project_root_for(self, path: str) -> str | None:
        ...


class DefinitionLocator(Protocol):
    """Best-effort lookup of the function enclosing the cursor."""

    def enclosing_function_name(self) -> str | None:
        ...


class Register(Protocol):
    """Clipboard-like slot the copy sink writes into."""

    @property
    def name(self) -> str:
        """Human-readable backend name for logs and listings."""
        ...

    def set(self, text: str) -> None:
        """Replace the register content. Raises RegisterError on failure."""
        ...

    def get(self) -> str | None:
        """Most recently stored text, or None if unknown/empty."""
        ...


class Notifier(Protocol):
    """Status and error reporting channel. Fire-and-forget."""

    def notify(self, message: str) -> None:
        ...

    def notify_error(self, message: str) -> None:
        ...
