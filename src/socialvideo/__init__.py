"""
socialvideo - Detect video providers and derive embeds from URLs.

Recognizes YouTube, Vimeo and DailyMotion URLs:
1. Detect the provider and extract its video id
2. Derive a thumbnail URL, playable location, or responsive embed HTML
3. Fall back to treating other URI-shaped URLs as plain video files
"""

# Derivation
from socialvideo.derive import (
    get_embed_video,
    get_video_location,
    get_video_reference,
    get_video_thumbnail_by_url,
)

# Detection
from socialvideo.detect import (
    detect,
    get_dailymotion_id,
    get_vimeo_id,
    get_youtube_id,
    is_social_video,
    is_video_file,
)

# Exceptions
from socialvideo.exceptions import (
    ConfigError,
    InvalidMetadataError,
    MetadataError,
    NetworkError,
    SocialVideoError,
)

# Models
from socialvideo.models import (
    Provider,
    ThumbnailQuality,
    VideoReference,
    VimeoVideoMetadata,
)
from socialvideo.providers.vimeo import VimeoMetadataFetcher, fetch_vimeo_metadata

__version__ = "1.0.0"

__all__ = [
    # Detection
    "detect",
    "get_dailymotion_id",
    "get_vimeo_id",
    "get_youtube_id",
    "is_video_file",
    "is_social_video",
    # Derivation
    "get_video_reference",
    "get_video_thumbnail_by_url",
    "get_video_location",
    "get_embed_video",
    # Models
    "Provider",
    "ThumbnailQuality",
    "VideoReference",
    "VimeoVideoMetadata",
    # Providers
    "VimeoMetadataFetcher",
    "fetch_vimeo_metadata",
    # Exceptions
    "SocialVideoError",
    "MetadataError",
    "NetworkError",
    "InvalidMetadataError",
    "ConfigError",
]
