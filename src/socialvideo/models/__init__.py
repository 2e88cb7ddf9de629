"""
Data models for socialvideo.

Provides Pydantic models for detection results and provider metadata.
"""

from socialvideo.models.video_reference import (
    Provider,
    ThumbnailQuality,
    VideoReference,
)
from socialvideo.models.vimeo_metadata import VimeoVideoMetadata

__all__ = [
    "Provider",
    "ThumbnailQuality",
    "VideoReference",
    "VimeoVideoMetadata",
]
