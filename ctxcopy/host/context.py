"""Bundle of host collaborators that providers read from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ctxcopy.context.git import GitQuery

if TYPE_CHECKING:
    from ctxcopy.host.interfaces import DefinitionLocator, EditorState, ProjectLocator


@dataclass
class HostContext:
    """Ambient host state shared by every provider.

    Attributes:
        editor: Active document accessor.
        projects: Project root locator.
        definitions: Enclosing function locator.
        git: Git query runner.
    """

    editor: EditorState
    projects: ProjectLocator
    definitions: DefinitionLocator
    git: GitQuery = field(default_factory=GitQuery)
