"""Typed exception hierarchy for ctxcopy."""

from __future__ import annotations


class CtxCopyError(Exception):
    """Base class for all ctxcopy errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(CtxCopyError):
    """Raised for configuration issues (unreadable file, invalid JSON, validation failure)."""


class ProviderError(CtxCopyError):
    """Base class for context provider failures.

    Attributes:
        provider: Name of the provider that failed (e.g. "git-branch").
        reason: Human-readable reason without the provider prefix.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider}: {reason}")


class NotApplicableError(ProviderError):
    """Provider precondition is false in the active context.

    Examples: no backing file, not inside a repository, no project root.
    """


class ResolutionFailedError(ProviderError):
    """Precondition held but the lookup produced no usable value.

    Examples: empty branch output, git timed out, git not installed.
    """


class RegisterError(CtxCopyError):
    """Raised when a register backend cannot store text."""
