"""Context providers: each derives one ContextValue from host state.

The provider set is closed. build_providers() returns every provider in
menu order; there is no runtime registration.

Each provider exposes:
- is_available(): cheap, side-effect free check used to gray out menu
  entries. Never spawns subprocesses.
- resolve(): the actual lookup. Raises NotApplicableError when its
  precondition does not hold (state may have changed since the check) and
  ResolutionFailedError when the lookup yields nothing usable.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ctxcopy.context.git import BranchQueryError
from ctxcopy.core.errors import NotApplicableError, ResolutionFailedError
from ctxcopy.core.types import ContextValue
from ctxcopy.core.utils import last_path_segment, with_trailing_separator

if TYPE_CHECKING:
    from ctxcopy.host.context import HostContext

logger = logging.getLogger(__name__)

NO_FILE_REASON = "buffer is not visiting a file"


class BaseProvider(ABC):
    """Base class for context providers.

    Subclasses pass their metadata to __init__ and implement compute().
    resolve() wraps the computed text in a ContextValue tagged with the
    provider's description.
    """

    def __init__(self, host: HostContext, name: str, label: str, description: str) -> None:
        """Initialize the provider.

        Args:
            host: Host collaborators to read state from.
            name: Stable identifier used on the command line (e.g. "file-name").
            label: Menu label.
            description: Tag substituted for `{description}` in status messages.
        """
        self.host = host
        self._name = name
        self._label = label
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def description(self) -> str:
        return self._description

    def is_available(self) -> bool:
        """Whether the provider can run in the current state. Default: always."""
        return True

    @abstractmethod
    def compute(self) -> str:
        """Compute the text value.

        Raises:
            NotApplicableError: Precondition does not hold.
            ResolutionFailedError: Lookup produced no usable value.
        """
        ...

    def resolve(self) -> ContextValue:
        text = self.compute()
        logger.debug("%s resolved to %r", self.name, text)
        # Host-supplied names (and POSIX file names) may contain newlines
        if "\n" in text or "\r" in text:
            raise self.failed("value spans multiple lines")
        return ContextValue(text=text, description=self.description)

    # --- helpers ---

    def not_applicable(self, reason: str) -> NotApplicableError:
        return NotApplicableError(self.name, reason)

    def failed(self, reason: str) -> ResolutionFailedError:
        return ResolutionFailedError(self.name, reason)

    def _has_file(self) -> bool:
        return self.host.editor.current_file_path() is not None

    def _require_file(self) -> str:
        path = self.host.editor.current_file_path()
        if path is None:
            raise self.not_applicable(NO_FILE_REASON)
        return path

    def _current_directory(self) -> str:
        """Containing directory of the backing file, else the working directory."""
        path = self.host.editor.current_file_path()
        if path is not None:
            return os.path.dirname(path)
        return self.host.editor.current_working_directory()


class FileNameProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "file-name", "File name", "file name")

    def is_available(self) -> bool:
        return self._has_file()

    def compute(self) -> str:
        return last_path_segment(self._require_file())


class FullPathProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "full-path", "Full path", "full path")

    def is_available(self) -> bool:
        return self._has_file()

    def compute(self) -> str:
        return self._require_file()


class DirectoryProvider(BaseProvider):
    """Directory of the backing file, or the working directory.

    Always ends with a path separator, e.g. "/home/u/proj/src/".
    """

    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "directory", "Directory", "directory")

    def compute(self) -> str:
        return with_trailing_separator(self._current_directory())


class RelativePathProvider(BaseProvider):
    """Path of the backing file relative to the project root.

    Without a project root, the path is made relative to the working
    directory instead.
    """

    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "relative-path", "Relative path", "relative path")

    def is_available(self) -> bool:
        return self._has_file()

    def compute(self) -> str:
        path = self._require_file()
        root = self.host.projects.project_root_for(path)
        if root is None:
            root = self.host.editor.current_working_directory()
        try:
            return os.path.relpath(path, root)
        except ValueError as e:
            # Windows: path and root on different drives
            raise self.failed(f"cannot make {path} relative to {root}") from e


class FileWithLineProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "file-with-line", "File with line", "file with line")

    def is_available(self) -> bool:
        return self._has_file()

    def compute(self) -> str:
        name = last_path_segment(self._require_file())
        return f"{name}:{self.host.editor.current_line()}"


class ProjectNameProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "project-name", "Project name", "project name")

    def is_available(self) -> bool:
        return self.host.projects.project_root_for(self._current_directory()) is not None

    def compute(self) -> str:
        root = self.host.projects.project_root_for(self._current_directory())
        if root is None:
            raise self.not_applicable("not inside a project")
        name = last_path_segment(root)
        if not name:
            raise self.failed(f"project root {root!r} has no name")
        return name


class BufferNameProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "buffer-name", "Buffer name", "buffer name")

    def compute(self) -> str:
        return self.host.editor.current_buffer_display_name()


class GitBranchProvider(BaseProvider):
    """Current branch via `git symbolic-ref --short HEAD`.

    Detached or unborn HEAD, a missing git binary and timeouts all fail
    with "could not determine branch" rather than copying an empty string.
    """

    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "git-branch", "Git branch", "git branch")

    def is_available(self) -> bool:
        return self.host.git.is_inside_work_tree(self._current_directory())

    def compute(self) -> str:
        directory = self._current_directory()
        if not self.host.git.is_inside_work_tree(directory):
            raise self.not_applicable("not inside a git repository")
        try:
            return self.host.git.current_branch(directory)
        except BranchQueryError as e:
            logger.debug("Branch query failed in %s: %s", directory, e)
            raise self.failed(f"could not determine branch ({e})") from e


class LineNumberProvider(BaseProvider):
    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "line-number", "Line number", "line number")

    def compute(self) -> str:
        return str(self.host.editor.current_line())


class FunctionNameProvider(BaseProvider):
    """Name of the function enclosing the cursor (best effort)."""

    def __init__(self, host: HostContext) -> None:
        super().__init__(host, "function-name", "Function name", "function name")

    def compute(self) -> str:
        name = self.host.definitions.enclosing_function_name()
        if not name:
            raise self.not_applicable("no enclosing function found")
        return name


PROVIDER_CLASSES: tuple[type[BaseProvider], ...] = (
    FileNameProvider,
    FullPathProvider,
    DirectoryProvider,
    RelativePathProvider,
    FileWithLineProvider,
    ProjectNameProvider,
    BufferNameProvider,
    GitBranchProvider,
    LineNumberProvider,
    FunctionNameProvider,
)


def build_providers(host: HostContext) -> list[BaseProvider]:
    """Instantiate every provider against the given host, in menu order."""
    return [cls(host) for cls in PROVIDER_CLASSES]
