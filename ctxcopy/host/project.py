"""Project root detection by marker files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ctxcopy.core.constants import DEFAULT_PROJECT_MARKERS

logger = logging.getLogger(__name__)


class MarkerProjectLocator:
    """Finds the nearest ancestor directory containing a project marker.

    Markers are plain names (".git", "pyproject.toml", ...) checked with
    a single `exists()` per candidate directory, so lookups stay cheap
    enough for availability checks.
    """

    def __init__(
        self,
        markers: Iterable[str] | None = None,
        override: str | None = None,
        cwd: str | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            markers: Marker names. Defaults to DEFAULT_PROJECT_MARKERS.
            override: Fixed project root (e.g. from --project-root). When set,
                it is returned for every path and detection is skipped.
            cwd: Directory a relative override is taken from, normally the
                editor's working directory rather than the process's.
        """
        self._markers = list(markers) if markers is not None else list(DEFAULT_PROJECT_MARKERS)
        self._override: str | None = None
        if override:
            root = Path(override).expanduser()
            if not root.is_absolute() and cwd is not None:
                root = Path(cwd).expanduser() / root
            self._override = os.path.abspath(root)

    def project_root_for(self, path: str) -> str | None:
        """Return the project root for path, or None if no marker is found.

        Args:
            path: File or directory. Files start the search at their parent.
        """
        if self._override is not None:
            return self._override

        start = Path(path)
        if not start.is_dir():
            start = start.parent

        for candidate in (start, *start.parents):
            for marker in self._markers:
                if (candidate / marker).exists():
                    logger.debug("Project root %s (marker %s)", candidate, marker)
                    return str(candidate)
        return None
