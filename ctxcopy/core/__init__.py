"""Core types, errors and helpers."""

from ctxcopy.core.errors import (
    ConfigError,
    CtxCopyError,
    NotApplicableError,
    ProviderError,
    RegisterError,
    ResolutionFailedError,
)
from ctxcopy.core.types import ContextValue

__all__ = [
    "CtxCopyError",
    "ConfigError",
    "ProviderError",
    "NotApplicableError",
    "ResolutionFailedError",
    "RegisterError",
    "ContextValue",
]
