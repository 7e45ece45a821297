"""Pydantic models for ctxcopy configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ctxcopy.core.constants import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_MENU_KEYS,
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_PROJECT_MARKERS,
    PROVIDER_NAMES,
    QUIT_KEY,
)

# Supported register backends
RegisterBackend = Literal["memory", "system", "osc52"]


class ClipboardConfig(BaseModel):
    """Where copied text goes.

    Backends:
        - memory: in-process slot (embedding, tests)
        - system: OS clipboard via pyperclip
        - osc52: terminal clipboard escape sequence (works over SSH)
    """

    model_config = ConfigDict(extra="forbid")

    backend: RegisterBackend = "system"
    """Register backend: memory, system, osc52."""


class GitConfig(BaseModel):
    """Configuration for the git branch query."""

    model_config = ConfigDict(extra="forbid")

    executable: str = "git"
    """Git executable name or path."""

    timeout: float = Field(default=DEFAULT_GIT_TIMEOUT, gt=0)
    """Seconds to wait for `git symbolic-ref` before treating it as a failure."""


class ProjectConfig(BaseModel):
    """Project root detection."""

    model_config = ConfigDict(extra="forbid")

    markers: list[str] = Field(default_factory=lambda: list(DEFAULT_PROJECT_MARKERS))
    """File or directory names whose presence marks a project root."""

    @field_validator("markers")
    @classmethod
    def markers_not_empty(cls, v: list[str]) -> list[str]:
        cleaned = [m.strip() for m in v if m.strip()]
        if not cleaned:
            raise ValueError("project.markers must contain at least one marker")
        return cleaned


class MenuConfig(BaseModel):
    """Menu key bindings.

    Example in config.json:
        "menu": {"keys": {"git-branch": "B"}}

    Overrides are merged onto the default key map, so only changed
    entries need to be listed.
    """

    model_config = ConfigDict(extra="forbid")

    keys: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_MENU_KEYS))

    @field_validator("keys")
    @classmethod
    def validate_keys(cls, v: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(v) - set(PROVIDER_NAMES))
        if unknown:
            raise ValueError(f"Unknown provider(s) in menu.keys: {', '.join(unknown)}")

        merged = dict(DEFAULT_MENU_KEYS)
        merged.update(v)

        seen: dict[str, str] = {}
        for name in PROVIDER_NAMES:
            key = merged[name]
            if len(key) != 1:
                raise ValueError(f"Menu key for {name!r} must be a single character, got {key!r}")
            if key == QUIT_KEY:
                raise ValueError(f"Menu key {QUIT_KEY!r} is reserved for quitting")
            if key in seen:
                raise ValueError(
                    f"Menu key {key!r} is bound to both {seen[key]!r} and {name!r}"
                )
            seen[key] = name
        return merged


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    """Status message template. `{text}` and `{description}` are replaced verbatim."""

    ancestor_depth: int = Field(default=2, ge=0, le=10)
    """How many parent directories to search for .ctxcopy/config.json."""

    clipboard: ClipboardConfig = Field(default_factory=ClipboardConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    menu: MenuConfig = Field(default_factory=MenuConfig)
