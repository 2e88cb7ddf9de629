"""
Provider metadata collaborators.
"""

from socialvideo.providers.vimeo import (
    VimeoMetadataFetcher,
    fetch_vimeo_metadata,
)

__all__ = [
    "VimeoMetadataFetcher",
    "fetch_vimeo_metadata",
]
