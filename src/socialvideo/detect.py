"""
Provider detection and video ID extraction for socialvideo.

Recognizes YouTube, Vimeo and DailyMotion URLs and extracts the
provider's video id. Every function here is total over strings: an
unrecognized URL returns None (or False), it never raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from urllib.parse import parse_qs, urlsplit

from socialvideo.models.video_reference import Provider, VideoReference

logger = logging.getLogger(__name__)

# Groups: 2 = path id (video|hub), 4 = #video= fragment id, 6 = dai.ly short id.
# [^_]+ is greedy on purpose: ids run up to the next underscore.
DAILYMOTION_PATTERN = re.compile(
    r"^.+dailymotion\.com/(video|hub)/([^_]+)[^#]*(#video=([^_&]+))?"
    r"|(dai\.ly/([^_]+))"
)

# Lowercase-only routing segments (channels/staffpicks/, video/, ...) may
# precede the numeric id; the id must end the path segment.
VIMEO_PATTERN = re.compile(
    r"^(?:https?://)?(?:www\.)?(?:player\.)?vimeo\.com/"
    r"(?:[a-z]*/)*"
    r"([0-9]{6,11})(?=\Z|[?#/])"
)

# Host substrings that mark a YouTube URL (substring test, not a domain check)
YOUTUBE_HOST_MARKERS = ("youtube", "youtu.be")

# Query parameters holding the YouTube id, in lookup order
YOUTUBE_ID_PARAMS = ("v", "vi")


def get_dailymotion_id(url: str) -> str | None:
    """Extract the DailyMotion id from a DailyMotion URL.

    Handles ``dailymotion.com/video/<id>``, ``dailymotion.com/hub/<id>``,
    the ``#video=<id>`` fragment form and ``dai.ly/<id>`` short links.
    When several forms are present the short link wins, then the
    fragment, then the path id.

    Args:
        url: URL to inspect

    Returns:
        The DailyMotion id, or None if the URL is not a DailyMotion URL.
    """
    match = DAILYMOTION_PATTERN.search(url)
    if not match:
        return None
    return match.group(6) or match.group(4) or match.group(2)


def get_vimeo_id(url: str) -> str | None:
    """Extract the numeric Vimeo id (6 to 11 digits) from a Vimeo URL.

    Returns:
        The Vimeo id, or None if the URL is not a Vimeo URL.
    """
    match = VIMEO_PATTERN.match(url)
    return match.group(1) if match else None


def get_youtube_id(url: str) -> str | None:
    """Extract the YouTube id from a YouTube URL.

    The host only has to contain ``youtube`` or ``youtu.be``. The id is
    read from the ``v`` query parameter, then ``vi``, and otherwise from
    the last path segment (``youtu.be/<id>``, ``/embed/<id>``, ...).

    Args:
        url: URL to inspect

    Returns:
        The YouTube id, or None if the URL is not a YouTube URL.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return None

    if not host or not any(marker in host for marker in YOUTUBE_HOST_MARKERS):
        return None

    if parts.query:
        query = parse_qs(parts.query)
        for param in YOUTUBE_ID_PARAMS:
            values = query.get(param)
            if values:
                # Last occurrence wins for repeated parameters
                return values[-1]

    path = parts.path.strip("/")
    if not path:
        return None
    return path.split("/")[-1]


_EXTRACTORS: tuple[tuple[Provider, Callable[[str], str | None]], ...] = (
    (Provider.DAILYMOTION, get_dailymotion_id),
    (Provider.VIMEO, get_vimeo_id),
    (Provider.YOUTUBE, get_youtube_id),
)


def detect(url: str) -> VideoReference:
    """Detect the provider of a URL.

    Providers are tried in a fixed order (DailyMotion, Vimeo, YouTube);
    the first one that recognizes the URL wins.

    Args:
        url: URL to inspect

    Returns:
        VideoReference with provider and video_id, or an unrecognized
        reference (provider None) if no provider matched.
    """
    for provider, extract in _EXTRACTORS:
        video_id = extract(url)
        if video_id:
            logger.debug(f"Detected {provider.value} id {video_id!r} in {url!r}")
            return VideoReference(provider=provider, video_id=video_id)
    logger.debug(f"No provider recognized {url!r}")
    return VideoReference.unrecognized()


def _is_uri_shaped(url: str) -> bool:
    """Check that a string splits into a scheme plus a host or path."""
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def is_video_file(url: str) -> bool:
    """Check whether a URL could point directly at a video file.

    True when no provider recognizes the URL but it is still URI-shaped.
    The file extension and MIME type are not inspected, and neither is the
    scheme: ``javascript:`` or ``data:`` URLs also pass. Callers embedding
    untrusted input should allow-list schemes themselves.
    """
    if any(extract(url) for _, extract in _EXTRACTORS):
        return False
    return _is_uri_shaped(url)


def is_social_video(url: str) -> bool:
    """Check whether Vimeo, YouTube and DailyMotion all recognize the URL.

    No URL satisfies both the Vimeo host rule (``vimeo.com``) and the
    YouTube host rule, so this is always False. Derivation does not
    depend on it.
    """
    return (
        get_vimeo_id(url) is not None
        and get_youtube_id(url) is not None
        and get_dailymotion_id(url) is not None
    )
