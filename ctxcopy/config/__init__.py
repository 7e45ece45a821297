"""Configuration loading and validation."""

from ctxcopy.config.loader import ENV_OVERRIDES, env_overrides, load_config
from ctxcopy.config.schema import (
    ClipboardConfig,
    Config,
    GitConfig,
    MenuConfig,
    ProjectConfig,
)

__all__ = [
    "ClipboardConfig",
    "Config",
    "ENV_OVERRIDES",
    "GitConfig",
    "MenuConfig",
    "ProjectConfig",
    "env_overrides",
    "load_config",
]
