"""Host collaborators: editor state, project and definition lookup."""

from ctxcopy.host.context import HostContext
from ctxcopy.host.definitions import Definition, SourceDefinitionLocator
from ctxcopy.host.editor import SCRATCH_BUFFER_NAME, StaticEditorState
from ctxcopy.host.interfaces import (
    DefinitionLocator,
    EditorState,
    Notifier,
    ProjectLocator,
    Register,
)
from ctxcopy.host.project import MarkerProjectLocator

__all__ = [
    "Definition",
    "DefinitionLocator",
    "EditorState",
    "HostContext",
    "MarkerProjectLocator",
    "Notifier",
    "ProjectLocator",
    "Register",
    "SCRATCH_BUFFER_NAME",
    "SourceDefinitionLocator",
    "StaticEditorState",
]
