"""
Derive thumbnails, playback locations and embed markup from video URLs.

Each operation re-runs detection and branches on the first match, in a
fixed order: DailyMotion, Vimeo, YouTube, plain video file. A URL that
matches none of these returns None.
"""

from __future__ import annotations

import logging

from socialvideo.config.providers import (
    DAILYMOTION_EMBED_BASE,
    DAILYMOTION_THUMBNAIL_BASE,
    VIMEO_PLAYER_BASE,
    YOUTUBE_EMBED_BASE,
    YOUTUBE_THUMBNAIL_BASE,
    YOUTUBE_THUMBNAIL_FILES,
)
from socialvideo.detect import detect, is_video_file
from socialvideo.embed import (
    FILE_ATTRIBUTES,
    FULLSCREEN_ATTRIBUTES,
    FULLSCREEN_VENDOR_ATTRIBUTES,
    render_embed,
)
from socialvideo.exceptions import MetadataError
from socialvideo.models.video_reference import Provider, ThumbnailQuality, VideoReference
from socialvideo.providers.vimeo import VimeoMetadataFetcher, fetch_vimeo_metadata

logger = logging.getLogger(__name__)

_LOCATION_BASES: dict[Provider, str] = {
    Provider.DAILYMOTION: DAILYMOTION_EMBED_BASE,
    Provider.VIMEO: VIMEO_PLAYER_BASE,
    Provider.YOUTUBE: YOUTUBE_EMBED_BASE,
}

_EMBED_ATTRIBUTES: dict[Provider, tuple[str, ...]] = {
    Provider.DAILYMOTION: FULLSCREEN_VENDOR_ATTRIBUTES,
    Provider.VIMEO: FULLSCREEN_VENDOR_ATTRIBUTES,
    Provider.YOUTUBE: FULLSCREEN_ATTRIBUTES,
}


def get_video_reference(url: str) -> VideoReference:
    """Detect the (provider, video id) pair for a URL."""
    return detect(url)


def _provider_location(ref: VideoReference) -> str:
    return f"{_LOCATION_BASES[ref.provider]}/{ref.video_id}"


def _vimeo_thumbnail(video_id: str, fetch_metadata: VimeoMetadataFetcher) -> str:
    records = fetch_metadata(video_id)
    if not records:
        raise MetadataError(
            f"Vimeo returned no metadata for video {video_id}",
            provider=Provider.VIMEO.value,
            video_id=video_id,
            category="not_found",
            suggestion="The video may be private or removed.",
        )
    # Only the large variant is used
    return records[0].thumbnail_large


def get_video_thumbnail_by_url(
    url: str,
    quality: ThumbnailQuality | str = ThumbnailQuality.SMALL,
    *,
    fetch_metadata: VimeoMetadataFetcher | None = None,
) -> str | None:
    """Get the thumbnail URL for a video URL.

    Vimeo thumbnails need a metadata lookup; DailyMotion and YouTube
    thumbnails are built from the id. ``quality`` picks between YouTube's
    ``default.jpg`` (small) and ``hqdefault.jpg`` (medium) and is ignored
    for the other providers.

    Args:
        url: Video URL
        quality: ThumbnailQuality or its string value ("small", "medium")
        fetch_metadata: Vimeo metadata collaborator (default: HTTP lookup)

    Returns:
        Thumbnail URL, or None for plain video files and unrecognized URLs.

    Raises:
        MetadataError: A Vimeo id was found but its metadata lookup failed.
        ValueError: ``quality`` is not a known ThumbnailQuality value.
    """
    quality = ThumbnailQuality(quality)
    ref = detect(url)

    if ref.provider is Provider.DAILYMOTION:
        return f"{DAILYMOTION_THUMBNAIL_BASE}/{ref.video_id}"

    if ref.provider is Provider.VIMEO:
        return _vimeo_thumbnail(ref.video_id, fetch_metadata or fetch_vimeo_metadata)

    if ref.provider is Provider.YOUTUBE:
        filename = YOUTUBE_THUMBNAIL_FILES[quality.value]
        return f"{YOUTUBE_THUMBNAIL_BASE}/{ref.video_id}/{filename}"

    logger.debug(f"No thumbnail available for {url!r}")
    return None


def get_video_location(url: str) -> str | None:
    """Get the playable location of a video URL.

    Provider URLs map to the provider's embed player; plain video files
    are returned unchanged. Useful for video sitemaps.

    Returns:
        Location URL, or None if the URL is not recognized.
    """
    ref = detect(url)
    if ref.is_recognized:
        return _provider_location(ref)
    if is_video_file(url):
        return url
    return None


def get_embed_video(url: str) -> str | None:
    """Get responsive embed HTML for a video URL.

    Plain video files are embedded as given. The src is HTML-escaped but
    its scheme is not checked, so a ``javascript:`` URL ends up in the
    iframe; validate untrusted URLs before calling this.

    Returns:
        HTML fragment (style block followed by one iframe), or None if
        the URL is not recognized.
    """
    ref = detect(url)
    if ref.is_recognized:
        return render_embed(_provider_location(ref), _EMBED_ATTRIBUTES[ref.provider])
    if is_video_file(url):
        return render_embed(url, FILE_ATTRIBUTES)
    return None
