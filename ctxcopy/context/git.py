"""Git branch detection for the git-branch provider."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ctxcopy.core.constants import DEFAULT_GIT_TIMEOUT, ENCODING, ENCODING_ERRORS

logger = logging.getLogger(__name__)


class BranchQueryError(Exception):
    """Raised when `git symbolic-ref` gives no usable branch name."""


class GitQuery:
    """Structured git invocations with an explicit timeout.

    Arguments are passed as a list (no shell), so directory names and the
    executable path are never interpreted by a shell.
    """

    def __init__(self, executable: str = "git", timeout: float = DEFAULT_GIT_TIMEOUT) -> None:
        self.executable = executable
        self.timeout = timeout

    @staticmethod
    def is_inside_work_tree(directory: str | Path) -> bool:
        """Check for a `.git` entry in directory or any ancestor.

        Filesystem only, never spawns git, so it is cheap enough to gate
        menu entries. `.git` may be a file (worktrees, submodules).
        """
        start = Path(directory)
        for candidate in (start, *start.parents):
            if (candidate / ".git").exists():
                return True
        return False

    def current_branch(self, directory: str | Path) -> str:
        """Return the short symbolic name of HEAD.

        Args:
            directory: Directory inside the work tree. A directory that does
                not exist yet is replaced by its nearest existing ancestor.

        Returns:
            Branch name with surrounding whitespace stripped.

        Raises:
            BranchQueryError: git missing, timed out, exited non-zero, or
                printed nothing (detached or unborn HEAD).
        """
        # Unsaved buffers may live in a directory that does not exist yet
        start = Path(directory)
        run_dir = next((p for p in (start, *start.parents) if p.is_dir()), None)
        if run_dir is None:
            raise BranchQueryError(f"no existing directory above {directory}")

        args = [self.executable, "symbolic-ref", "--short", "HEAD"]
        try:
            result = subprocess.run(
                args,
                cwd=str(run_dir),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                encoding=ENCODING,
                errors=ENCODING_ERRORS,
            )
        except FileNotFoundError as e:
            raise BranchQueryError(f"git executable not found: {self.executable}") from e
        except subprocess.TimeoutExpired as e:
            raise BranchQueryError(f"git timed out after {self.timeout:g}s") from e
        except (OSError, ValueError) as e:
            raise BranchQueryError(f"git failed to run: {e}") from e

        if result.returncode != 0:
            logger.debug(
                "git symbolic-ref exited %d in %s: %s",
                result.returncode, directory, result.stderr.strip(),
            )
            raise BranchQueryError(f"git exited with status {result.returncode}")

        branch = result.stdout.strip()
        if not branch:
            raise BranchQueryError("git printed no branch name")
        return branch
