"""Configuration management.

TIER 1: May import from core only.

Reads .pumlink/config.jsonc (or config.json) from the project root.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import parse_jsonc
from core.types import DEFAULT_DESCRIPTOR_FILE, DEFAULT_DIAGRAM_FILE

# Cache for loaded config
_config_cache: dict | None = None
_project_root_cache: Path | None = None

CONFIG_DIR = ".pumlink"

# Config file names (priority order)
CONFIG_FILES = ["config.jsonc", "config.json"]

DEFAULTS: dict[str, Any] = {
    "verify.group_id": None,  # None means: the verified project's own group id
    "verify.relaxed_naming": True,
    "verify.diagram_file": DEFAULT_DIAGRAM_FILE,
    "verify.descriptor_file": DEFAULT_DESCRIPTOR_FILE,
}


def get_project_root() -> Path:
    """Get the project root directory.

    Looks for the PUMLINK_ROOT env var, then walks up from the
    working directory to the first .pumlink/ or .git/ folder.

    Returns:
        Project root path.

    Raises:
        ConfigError: If project root cannot be found.
    """
    global _project_root_cache

    if _project_root_cache is not None:
        return _project_root_cache

    if env_root := os.environ.get("PUMLINK_ROOT"):
        _project_root_cache = Path(env_root)
        return _project_root_cache

    current = Path.cwd()
    while current != current.parent:
        if (current / CONFIG_DIR).exists() or (current / ".git").exists():
            _project_root_cache = current
            return _project_root_cache
        current = current.parent

    raise ConfigError(f"Could not find project root (no {CONFIG_DIR}/ or .git/ found)")


def get_config_path() -> Path | None:
    """Find config file path.

    Returns:
        Path to config file, or None if there is no project root or no file.
    """
    try:
        config_dir = get_project_root() / CONFIG_DIR
    except ConfigError:
        return None

    for filename in CONFIG_FILES:
        config_path = config_dir / filename
        if config_path.exists():
            return config_path

    return None


def load_config() -> dict:
    """Load config from .pumlink/config.jsonc or config.json.

    Returns:
        Configuration dictionary (empty when no config file exists).

    Raises:
        ConfigError: If the config file is not valid JSON(C).
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = get_config_path()

    if config_path is None:
        _config_cache = {}
        return _config_cache

    try:
        content = config_path.read_text(encoding="utf-8")
        data = parse_jsonc(content)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {config_path.name}: top level must be an object")

    _config_cache = data
    return _config_cache


def get(key: str, default: Any = None) -> Any:
    """Get config value by dot notation.

    Falls back to DEFAULTS when no explicit default is given.

    Args:
        key: Dot-separated key path (e.g., "verify.group_id").
        default: Default value if key not found.

    Returns:
        Config value or default.

    Example:
        get("verify.diagram_file")  # "project.puml" unless configured
    """
    if default is None:
        default = DEFAULTS.get(key)

    value: Any = load_config()
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    global _config_cache, _project_root_cache
    _config_cache = None
    _project_root_cache = None
