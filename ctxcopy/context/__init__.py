"""Context providers, git query and dispatch."""

from ctxcopy.context.dispatcher import Dispatcher
from ctxcopy.context.git import BranchQueryError, GitQuery
from ctxcopy.context.providers import (
    PROVIDER_CLASSES,
    BaseProvider,
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

__all__ = [
    "BaseProvider",
    "BranchQueryError",
    "BufferNameProvider",
    "DirectoryProvider",
    "Dispatcher",
    "FileNameProvider",
    "FileWithLineProvider",
    "FullPathProvider",
    "FunctionNameProvider",
    "GitBranchProvider",
    "GitQuery",
    "LineNumberProvider",
    "PROVIDER_CLASSES",
    "ProjectNameProvider",
    "RelativePathProvider",
    "build_providers",
]
