"""
Unified configuration loader with priority resolution.

Root directory (SOCIALVIDEO_ROOT):
- macOS/Linux: ~/.socialvideo
- Windows: %APPDATA%\\socialvideo
- Override: SOCIALVIDEO_ROOT environment variable

Each setting is resolved independently (highest to lowest):
1. Environment variable (SOCIALVIDEO_VIMEO_API_BASE, SOCIALVIDEO_METADATA_TIMEOUT)
2. Project config (.socialvideo/config.yaml)
3. User config ({root_dir}/config.yaml)
4. Default (config/defaults.py)

Config file keys:
    vimeo_api_base: https://vimeo.com/api/v2/video
    metadata_timeout: 30
"""

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from socialvideo.config.defaults import METADATA_TIMEOUT, VIMEO_API_BASE
from socialvideo.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_VIMEO_API_BASE = "SOCIALVIDEO_VIMEO_API_BASE"
ENV_METADATA_TIMEOUT = "SOCIALVIDEO_METADATA_TIMEOUT"


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class SocialVideoConfig:
    """Resolved socialvideo configuration.

    ``source`` records where the highest-priority value came from.
    """

    vimeo_api_base: str
    metadata_timeout: float
    source: ConfigSource

    def __repr__(self) -> str:
        return (
            f"SocialVideoConfig(vimeo_api_base={self.vimeo_api_base!r}, "
            f"metadata_timeout={self.metadata_timeout!r}, source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .socialvideo/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".socialvideo" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the socialvideo root directory.

    Priority:
    1. SOCIALVIDEO_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\socialvideo
       - macOS/Linux: ~/.socialvideo

    Returns:
        Path to the root directory (may not exist).
    """
    env_root = os.environ.get("SOCIALVIDEO_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "socialvideo"
        return Path.home() / "AppData" / "Roaming" / "socialvideo"
    return Path.home() / ".socialvideo"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / "config.yaml"


def _parse_timeout(key: str, value: Any) -> float:
    """Coerce a timeout setting to a positive float."""
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(key, value, f"{key} must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(key, value, f"{key} must be positive, got {value!r}")
    return timeout


def _parse_api_base(key: str, value: Any) -> str:
    """Require an absolute http(s) URL for an API base setting."""
    base = str(value).strip().rstrip("/")
    parts = urlsplit(base)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(key, value, f"{key} must be an http(s) URL, got {value!r}")
    return base


def _resolve_config() -> SocialVideoConfig:
    """Resolve configuration from all sources in priority order.

    Returns:
        Resolved SocialVideoConfig.

    Raises:
        ConfigError: If a timeout value is not a positive number, or the
            API base is not an http(s) URL.
    """
    layers: list[tuple[ConfigSource, dict[str, Any]]] = []

    env_layer: dict[str, Any] = {}
    if os.environ.get(ENV_VIMEO_API_BASE):
        env_layer["vimeo_api_base"] = os.environ[ENV_VIMEO_API_BASE]
    if os.environ.get(ENV_METADATA_TIMEOUT):
        env_layer["metadata_timeout"] = os.environ[ENV_METADATA_TIMEOUT]
    layers.append((ConfigSource.ENV, env_layer))

    project_config_path = _find_project_config()
    if project_config_path:
        layers.append(
            (ConfigSource.PROJECT, _load_yaml_config(project_config_path) or {})
        )

    user_config_path = _get_user_config_path()
    layers.append((ConfigSource.USER, _load_yaml_config(user_config_path) or {}))

    resolved: dict[str, Any] = {
        "vimeo_api_base": VIMEO_API_BASE,
        "metadata_timeout": METADATA_TIMEOUT,
    }
    source = ConfigSource.DEFAULT

    # Walk lowest priority first so higher layers overwrite
    for layer_source, layer in reversed(layers):
        for key in resolved:
            if layer.get(key) is not None:
                resolved[key] = layer[key]
                source = layer_source

    if source is not ConfigSource.DEFAULT:
        logger.debug(f"Resolved config from {source.value}: {resolved}")

    return SocialVideoConfig(
        vimeo_api_base=_parse_api_base("vimeo_api_base", resolved["vimeo_api_base"]),
        metadata_timeout=_parse_timeout("metadata_timeout", resolved["metadata_timeout"]),
        source=source,
    )


@lru_cache(maxsize=1)
def get_config() -> SocialVideoConfig:
    """Get resolved socialvideo configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
