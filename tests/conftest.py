"""Shared pytest fixtures and configuration for pytest."""

import sys
from pathlib import Path

import pytest

from ctxcopy.clipboard.register import MemoryRegister
from ctxcopy.context.git import GitQuery
from ctxcopy.host.context import HostContext
from ctxcopy.host.definitions import SourceDefinitionLocator
from ctxcopy.host.editor import StaticEditorState
from ctxcopy.host.project import MarkerProjectLocator


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


class RecordingNotifier:
    """Notifier that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.errors: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def notify_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def register() -> MemoryRegister:
    return MemoryRegister()


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Create <tmp>/home/u/proj, a git work tree holding src/main.x."""
    root = tmp_path / "home" / "u" / "proj"
    (root / "src").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "src" / "main.x").write_text("x\n" * 50, encoding="utf-8")
    return root


def make_host(
    cwd: str | Path,
    file_path: str | Path | None = None,
    line: int = 1,
    buffer_name: str | None = None,
    function: str | None = None,
    git: GitQuery | None = None,
) -> HostContext:
    """Build a HostContext the same way the CLI does."""
    editor = StaticEditorState(
        cwd=str(cwd),
        file_path=str(file_path) if file_path is not None else None,
        line=line,
        buffer_name=buffer_name,
    )
    return HostContext(
        editor=editor,
        projects=MarkerProjectLocator(),
        definitions=SourceDefinitionLocator(
            editor.current_file_path(), editor.current_line(), override=function
        ),
        git=git or GitQuery(),
    )


@pytest.fixture
def host_factory():
    """Factory fixture wrapping make_host()."""
    return make_host
