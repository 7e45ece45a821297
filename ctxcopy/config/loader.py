"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.ctxcopy/config.json)
2. Ancestor directories (up to `ancestor_depth` levels above cwd)
3. Project local config (cwd/.ctxcopy/config.json)
4. Environment variables (CTXCOPY_*)

Missing files are skipped. Broken files are fatal.
"""

import json
import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ctxcopy.config.schema import Config
from ctxcopy.core.constants import CONFIG_FILE_NAME, CTXCOPY_DIR_NAME, get_ctxcopy_dir
from ctxcopy.core.errors import ConfigError

logger = logging.getLogger(__name__)

# Environment variable -> dotted config key
ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "CTXCOPY_MESSAGE_TEMPLATE": ("message_template",),
    "CTXCOPY_REGISTER": ("clipboard", "backend"),
    "CTXCOPY_GIT_TIMEOUT": ("git", "timeout"),
}


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one config file. An empty file counts as `{}`.

    Raises:
        ConfigError: The file is missing, unreadable, not JSON, or not a
            JSON object.
    """
    try:
        # utf-8-sig: editors on Windows like to save a BOM
        content = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e.strerror or e}") from e

    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config {path} (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_layer(path: Path) -> dict[str, Any] | None:
    """read_config_file() for layers that may legitimately be absent."""
    if not path.is_file():
        return None
    logger.debug("Reading config layer %s", path)
    return read_config_file(path)


def merge_layer(merged: dict[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay one config layer onto the merged result so far.

    Sections (`git`, `menu.keys`, ...) merge key by key. Every other value
    is replaced outright, so a local `project.markers` list replaces the
    global one instead of extending it. Neither input is modified.
    """
    result = dict(merged)
    for key, value in layer.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            result[key] = merge_layer(current, value)
        else:
            result[key] = value
    return result


def ancestor_config_files(cwd: Path, depth: int, skip: Path | None = None) -> Iterator[Path]:
    """Yield existing `.ctxcopy/config.json` files above cwd, furthest first.

    Args:
        cwd: Directory whose parents are searched (cwd itself is not).
        depth: Number of parent levels to look at.
        skip: Config directory to leave out, normally the global one, so a
            project under the home directory doesn't load it twice.
    """
    skip_resolved = skip.resolve() if skip is not None else None
    parents = list(cwd.resolve().parents)[:max(depth, 0)]
    for parent in reversed(parents):
        config_dir = parent / CTXCOPY_DIR_NAME
        if skip_resolved is not None and config_dir.resolve() == skip_resolved:
            continue
        config_file = config_dir / CONFIG_FILE_NAME
        if config_file.is_file():
            yield config_file


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Build a nested override dict from CTXCOPY_* environment variables.

    Values are passed through as strings; pydantic coerces them during
    validation (e.g. "1.5" -> 1.5 for git.timeout). Empty values are ignored.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    for var, keys in ENV_OVERRIDES.items():
        value = env.get(var)
        if not value:
            continue
        section = overrides
        for key in keys[:-1]:
            section = section.setdefault(key, {})
        section[keys[-1]] = value
    return overrides


def load_config(
    path: Path | None = None,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load configuration with layered merging.

    Args:
        path: Explicit config file path. If provided, skips the file layers
            (environment overrides still apply).
        cwd: Working directory for ancestor/local lookup. Defaults to Path.cwd().
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file is unreadable or not a JSON object,
            or the merged config fails validation.
    """
    merged: dict[str, Any] = {}
    loaded_from: list[str] = []

    if path is not None:
        merged = read_config_file(path)
        loaded_from.append(str(path))
    else:
        effective_cwd = cwd or Path.cwd()
        global_dir = get_ctxcopy_dir()

        global_config = global_dir / CONFIG_FILE_NAME
        global_data = _optional_layer(global_config)
        if global_data:
            merged = merge_layer(merged, global_data)
            loaded_from.append(str(global_config))

        # Local config may change ancestor_depth, so peek at it first
        local_config = effective_cwd / CTXCOPY_DIR_NAME / CONFIG_FILE_NAME
        local_data = _optional_layer(local_config)
        ancestor_depth = (local_data or {}).get(
            "ancestor_depth", merged.get("ancestor_depth", 2)
        )
        if not isinstance(ancestor_depth, int):
            raise ConfigError(f"ancestor_depth must be an integer, got {ancestor_depth!r}")

        for ancestor_config in ancestor_config_files(effective_cwd, ancestor_depth, skip=global_dir):
            ancestor_data = read_config_file(ancestor_config)
            if ancestor_data:
                merged = merge_layer(merged, ancestor_data)
                loaded_from.append(str(ancestor_config))

        if local_data:
            merged = merge_layer(merged, local_data)
            loaded_from.append(str(local_config))

    env_data = env_overrides(environ)
    if env_data:
        merged = merge_layer(merged, env_data)
        loaded_from.append("environment")

    if loaded_from:
        logger.info("Config loaded from: %s", loaded_from)
    else:
        logger.debug("No config files found, using defaults")

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(loaded_from) or "defaults"
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e
