"""Path helpers shared by providers and host implementations."""

import os


def with_trailing_separator(path: str) -> str:
    """Return path with exactly the platform separator appended if missing."""
    if path.endswith(os.sep) or (os.altsep and path.endswith(os.altsep)):
        return path
    return path + os.sep


def last_path_segment(path: str) -> str:
    """Return the final component of path, ignoring trailing separators.

    Examples:
        >>> last_path_segment("/home/u/proj/")
        'proj'
        >>> last_path_segment("/home/u/proj/src/main.x")
        'main.x'
    """
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    return os.path.basename(stripped)
