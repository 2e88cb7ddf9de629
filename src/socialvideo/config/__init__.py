"""
Configuration for socialvideo.

Contains provider endpoints, defaults, and the layered config loader.
"""

from socialvideo.config.defaults import METADATA_TIMEOUT, VIMEO_API_BASE
from socialvideo.config.loader import (
    ConfigSource,
    SocialVideoConfig,
    clear_config_cache,
    get_config,
)
from socialvideo.config.providers import (
    DAILYMOTION_EMBED_BASE,
    DAILYMOTION_THUMBNAIL_BASE,
    VIMEO_PLAYER_BASE,
    YOUTUBE_EMBED_BASE,
    YOUTUBE_THUMBNAIL_BASE,
    YOUTUBE_THUMBNAIL_FILES,
)

__all__ = [
    "METADATA_TIMEOUT",
    "VIMEO_API_BASE",
    # Provider endpoints
    "DAILYMOTION_EMBED_BASE",
    "DAILYMOTION_THUMBNAIL_BASE",
    "VIMEO_PLAYER_BASE",
    "YOUTUBE_EMBED_BASE",
    "YOUTUBE_THUMBNAIL_BASE",
    "YOUTUBE_THUMBNAIL_FILES",
    # Config loader
    "SocialVideoConfig",
    "ConfigSource",
    "get_config",
    "clear_config_cache",
]
