"""Tests for the context providers."""

import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from ctxcopy.context.providers import (
    PROVIDER_CLASSES,
    BufferNameProvider,
    DirectoryProvider,
    FileNameProvider,
    FileWithLineProvider,
    FullPathProvider,
    FunctionNameProvider,
    GitBranchProvider,
    LineNumberProvider,
    ProjectNameProvider,
    RelativePathProvider,
    build_providers,
)
from ctxcopy.core.constants import PROVIDER_NAMES
from ctxcopy.core.errors import NotApplicableError, ResolutionFailedError
from ctxcopy.core.types import ContextValue

FILE_PROVIDERS = [FileNameProvider, FullPathProvider, RelativePathProvider, FileWithLineProvider]


@pytest.fixture
def file_host(project_tree: Path, host_factory):
    """Editing <proj>/src/main.x at line 42."""
    return host_factory(cwd=project_tree, file_path=project_tree / "src" / "main.x", line=42)


@pytest.fixture
def scratch_host(tmp_path: Path, host_factory):
    """Unsaved buffer with working directory <tmp>/scratch."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    return host_factory(cwd=scratch, buffer_name="*scratch*")


class TestCatalogue:
    def test_build_providers_in_menu_order(self, file_host):
        providers = build_providers(file_host)
        assert [p.name for p in providers] == list(PROVIDER_NAMES)

    def test_descriptions(self, file_host):
        descriptions = {p.name: p.description for p in build_providers(file_host)}
        assert descriptions == {
            "file-name": "file name",
            "full-path": "full path",
            "directory": "directory",
            "relative-path": "relative path",
            "file-with-line": "file with line",
            "project-name": "project name",
            "buffer-name": "buffer name",
            "git-branch": "git branch",
            "line-number": "line number",
            "function-name": "function name",
        }

    def test_closed_set(self):
        assert len(PROVIDER_CLASSES) == 10


class TestRoundTrip:
    """File <proj>/src/main.x, line 42, inside a git tree rooted at <proj>."""

    def test_file_name(self, file_host):
        assert FileNameProvider(file_host).resolve() == ContextValue("main.x", "file name")

    def test_full_path(self, file_host, project_tree: Path):
        value = FullPathProvider(file_host).resolve()
        assert value.text == str(project_tree / "src" / "main.x")

    def test_directory(self, file_host, project_tree: Path):
        value = DirectoryProvider(file_host).resolve()
        assert value.text == str(project_tree / "src") + os.sep

    def test_relative_path(self, file_host):
        assert RelativePathProvider(file_host).resolve().text == os.path.join("src", "main.x")

    def test_file_with_line(self, file_host):
        assert FileWithLineProvider(file_host).resolve().text == "main.x:42"

    def test_project_name(self, file_host):
        assert ProjectNameProvider(file_host).resolve().text == "proj"

    def test_line_number(self, file_host):
        assert LineNumberProvider(file_host).resolve() == ContextValue("42", "line number")

    def test_buffer_name(self, file_host):
        assert BufferNameProvider(file_host).resolve().text == "main.x"

    def test_git_branch(self, file_host, project_tree: Path):
        completed = subprocess.CompletedProcess([], returncode=0, stdout="feature/ctx\n", stderr="")
        with patch("ctxcopy.context.git.subprocess.run", return_value=completed) as mock_run:
            value = GitBranchProvider(file_host).resolve()
        assert value == ContextValue("feature/ctx", "git branch")
        assert mock_run.call_args.kwargs["cwd"] == str(project_tree / "src")

    def test_all_available(self, file_host):
        for provider in build_providers(file_host):
            assert provider.is_available(), provider.name


class TestNonFileBuffer:
    """Buffer not backed by a file, working directory <tmp>/scratch/."""

    @pytest.mark.parametrize("cls", FILE_PROVIDERS)
    def test_file_providers_unavailable(self, scratch_host, cls):
        assert cls(scratch_host).is_available() is False

    @pytest.mark.parametrize("cls", FILE_PROVIDERS)
    def test_file_providers_not_applicable(self, scratch_host, cls):
        with pytest.raises(NotApplicableError, match="not visiting a file"):
            cls(scratch_host).resolve()

    def test_directory_is_working_directory(self, scratch_host, tmp_path: Path):
        assert DirectoryProvider(scratch_host).resolve().text == str(tmp_path / "scratch") + os.sep

    def test_buffer_name_from_host(self, scratch_host):
        assert BufferNameProvider(scratch_host).resolve().text == "*scratch*"

    def test_line_number_always_available(self, scratch_host):
        assert LineNumberProvider(scratch_host).resolve().text == "1"


class TestRelativePathFallback:
    def test_relative_to_working_directory_without_project(self, tmp_path: Path, host_factory):
        cwd = tmp_path / "loose"
        (cwd / "docs").mkdir(parents=True)
        host = host_factory(cwd=cwd, file_path=cwd / "docs" / "notes.txt")
        host.projects = type(host.projects)(markers=["NO_SUCH_MARKER_FILE"])

        assert RelativePathProvider(host).resolve().text == os.path.join("docs", "notes.txt")


class TestProjectName:
    def test_unavailable_without_project(self, tmp_path: Path, host_factory):
        host = host_factory(cwd=tmp_path)
        host.projects = type(host.projects)(markers=["NO_SUCH_MARKER_FILE"])
        provider = ProjectNameProvider(host)

        assert provider.is_available() is False
        with pytest.raises(NotApplicableError, match="not inside a project"):
            provider.resolve()

    def test_uses_working_directory_for_scratch_buffers(self, project_tree: Path, host_factory):
        host = host_factory(cwd=project_tree / "src")
        assert ProjectNameProvider(host).resolve().text == "proj"


class TestGitBranch:
    def test_unavailable_outside_repository(self, scratch_host):
        provider = GitBranchProvider(scratch_host)
        with patch("ctxcopy.context.git.subprocess.run") as mock_run:
            assert provider.is_available() is False
            with pytest.raises(NotApplicableError):
                provider.resolve()
            mock_run.assert_not_called()

    def test_detached_head_fails(self, file_host):
        completed = subprocess.CompletedProcess([], returncode=0, stdout="", stderr="")
        with patch("ctxcopy.context.git.subprocess.run", return_value=completed):
            with pytest.raises(ResolutionFailedError, match="could not determine branch"):
                GitBranchProvider(file_host).resolve()

    def test_timeout_fails(self, file_host):
        with patch(
            "ctxcopy.context.git.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=2.0),
        ):
            with pytest.raises(ResolutionFailedError, match="could not determine branch"):
                GitBranchProvider(file_host).resolve()

    def test_availability_never_runs_git(self, file_host):
        with patch("ctxcopy.context.git.subprocess.run") as mock_run:
            assert GitBranchProvider(file_host).is_available() is True
            mock_run.assert_not_called()


class TestFunctionName:
    def test_from_source(self, tmp_path: Path, host_factory):
        source = tmp_path / "app.py"
        source.write_text("def handler(event):\n    return event\n", encoding="utf-8")
        host = host_factory(cwd=tmp_path, file_path=source, line=2)

        assert FunctionNameProvider(host).resolve() == ContextValue("handler", "function name")

    def test_always_available(self, scratch_host):
        assert FunctionNameProvider(scratch_host).is_available() is True

    def test_no_enclosing_function(self, scratch_host):
        with pytest.raises(NotApplicableError, match="no enclosing function"):
            FunctionNameProvider(scratch_host).resolve()

    def test_explicit_name(self, tmp_path: Path, host_factory):
        host = host_factory(cwd=tmp_path, function="Greeter.greet")
        assert FunctionNameProvider(host).resolve().text == "Greeter.greet"


class TestIdempotence:
    def test_repeated_resolution_identical(self, file_host):
        for provider in build_providers(file_host):
            if provider.name in ("git-branch", "function-name"):
                continue
            assert provider.resolve() == provider.resolve(), provider.name

    def test_resolve_does_not_mutate_host(self, file_host):
        before = (
            file_host.editor.current_file_path(),
            file_host.editor.current_line(),
            file_host.editor.current_working_directory(),
        )
        for provider in build_providers(file_host):
            if provider.name == "git-branch":
                continue
            try:
                provider.resolve()
            except NotApplicableError:
                pass
        after = (
            file_host.editor.current_file_path(),
            file_host.editor.current_line(),
            file_host.editor.current_working_directory(),
        )
        assert before == after


class TestSingleLineValues:
    @pytest.mark.unix_only
    def test_file_name_with_newline_fails(self, tmp_path: Path, host_factory):
        host = host_factory(cwd=tmp_path, file_path=tmp_path / "odd\nname.x")

        with pytest.raises(ResolutionFailedError, match="spans multiple lines"):
            FileNameProvider(host).resolve()

    def test_carriage_return_in_buffer_name_fails(self, tmp_path: Path, host_factory):
        host = host_factory(cwd=tmp_path, buffer_name="left\rright")

        with pytest.raises(ResolutionFailedError, match="spans multiple lines"):
            BufferNameProvider(host).resolve()
