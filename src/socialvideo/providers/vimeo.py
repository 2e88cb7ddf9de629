"""
Vimeo metadata lookup.

Fetches ``{api_base}/{id}.json`` from Vimeo's simple API. The response is
a JSON list with one record per video; each record carries the
``thumbnail_small``/``thumbnail_medium``/``thumbnail_large`` URLs.

This is the only network call in socialvideo. It blocks, runs once per
call, and is neither retried nor cached.
"""

from __future__ import annotations

import http.client
import json
import logging
import time
import urllib.error
import urllib.request
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from socialvideo.config.loader import get_config
from socialvideo.exceptions import ConfigError, InvalidMetadataError, NetworkError
from socialvideo.models.video_reference import Provider
from socialvideo.models.vimeo_metadata import VimeoVideoMetadata
from socialvideo.utils.logging import log_timed

logger = logging.getLogger(__name__)

_RESPONSE_ADAPTER = TypeAdapter(list[VimeoVideoMetadata])


class VimeoMetadataFetcher(Protocol):
    """Callable that looks up Vimeo metadata for a numeric video id.

    Implementations raise MetadataError (or a subclass) on failure.
    """

    def __call__(self, video_id: str) -> list[VimeoVideoMetadata]: ...


def build_metadata_url(video_id: str, api_base: str | None = None) -> str:
    """Build the simple API URL for a Vimeo id."""
    base = (api_base or get_config().vimeo_api_base).rstrip("/")
    return f"{base}/{video_id}.json"


def parse_metadata_response(body: bytes | str, video_id: str) -> list[VimeoVideoMetadata]:
    """Decode and validate a Vimeo metadata response body.

    Raises:
        InvalidMetadataError: Body is not JSON, or records lack required fields.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidMetadataError(
            f"Vimeo returned a non-JSON response for video {video_id}",
            provider=Provider.VIMEO.value,
            video_id=video_id,
        ) from e

    try:
        return _RESPONSE_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise InvalidMetadataError(
            f"Unexpected Vimeo metadata for video {video_id}: {e.error_count()} error(s)",
            provider=Provider.VIMEO.value,
            video_id=video_id,
            details={"errors": e.errors(include_url=False)},
        ) from e


def fetch_vimeo_metadata(
    video_id: str,
    *,
    timeout: float | None = None,
    api_base: str | None = None,
) -> list[VimeoVideoMetadata]:
    """Fetch metadata records for a Vimeo video.

    Args:
        video_id: Numeric Vimeo id
        timeout: Request timeout in seconds (default: configured metadata_timeout)
        api_base: API base URL (default: configured vimeo_api_base)

    Returns:
        List of metadata records as returned by the API.

    Raises:
        NetworkError: HTTP error status, connection failure, truncated body or timeout.
        InvalidMetadataError: Response could not be decoded or validated.
        ConfigError: The API base URL cannot be requested.
    """
    config = get_config()
    url = build_metadata_url(video_id, api_base or config.vimeo_api_base)
    timeout = timeout if timeout is not None else config.metadata_timeout

    start = time.time()
    log_timed(f"Fetching Vimeo metadata: {url}")

    try:
        request = urllib.request.Request(
            url, method="GET", headers={"Accept": "application/json"}
        )
    except ValueError as e:
        raise ConfigError("vimeo_api_base", api_base or config.vimeo_api_base, str(e)) from e

    try:
        with urllib.request.urlopen(request, timeout=timeout) as resp:
            body = resp.read()
    except urllib.error.HTTPError as e:
        logger.warning(f"Vimeo metadata request failed with HTTP {e.code}: {url}")
        raise NetworkError(
            f"Vimeo metadata request failed with HTTP {e.code} for video {video_id}",
            provider=Provider.VIMEO.value,
            video_id=video_id,
            http_code=e.code,
        ) from e
    except (urllib.error.URLError, OSError, http.client.HTTPException) as e:
        # HTTPException covers truncated bodies (IncompleteRead) from resp.read()
        reason = getattr(e, "reason", e)
        logger.warning(f"Vimeo metadata request failed: {reason}")
        raise NetworkError(
            f"Could not reach Vimeo for video {video_id}: {reason}",
            provider=Provider.VIMEO.value,
            video_id=video_id,
            details={"url": url},
        ) from e

    records = parse_metadata_response(body, video_id)
    log_timed(f"Vimeo metadata fetched ({len(records)} record(s))", start)
    return records
