"""Core constants and paths for ctxcopy.

Single source of truth for global paths. All modules should import from here
instead of hardcoding paths like `Path.home() / ".ctxcopy"`.
"""

from pathlib import Path

CTXCOPY_DIR_NAME = ".ctxcopy"
CONFIG_FILE_NAME = "config.json"

DEFAULT_MESSAGE_TEMPLATE = "Copied {description}: {text}"

# Placeholders recognized in the message template
TEXT_PLACEHOLDER = "{text}"
DESCRIPTION_PLACEHOLDER = "{description}"

# Source files, git output and the console are all read as UTF-8. Undecodable
# bytes are replaced so a stray Latin-1 file never aborts a copy.
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"

# Seconds to wait for `git symbolic-ref` before giving up
DEFAULT_GIT_TIMEOUT = 2.0

DEFAULT_PROJECT_MARKERS = [
    ".git",
    ".hg",
    ".svn",
    "pyproject.toml",
    "setup.py",
    "package.json",
    "Cargo.toml",
    "go.mod",
    ".project",
]

# Menu key that dismisses without side effect
QUIT_KEY = "q"


def get_ctxcopy_dir() -> Path:
    """Get ~/.ctxcopy (global config directory)."""
    return Path.home() / CTXCOPY_DIR_NAME


# Provider names in menu order, mapped to their default menu key
DEFAULT_MENU_KEYS: dict[str, str] = {
    "file-name": "n",
    "full-path": "f",
    "directory": "d",
    "relative-path": "r",
    "file-with-line": "l",
    "project-name": "p",
    "buffer-name": "b",
    "git-branch": "g",
    "line-number": "i",
    "function-name": "u",
}

PROVIDER_NAMES: tuple[str, ...] = tuple(DEFAULT_MENU_KEYS)
