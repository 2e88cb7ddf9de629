"""
Custom exceptions for socialvideo.

All socialvideo exceptions inherit from SocialVideoError for easy catching.

An unrecognized URL is never an exception: detection and derivation return
None (or False) for it. The exceptions below cover the genuine faults.
"""

from __future__ import annotations

from typing import Any


class SocialVideoError(Exception):
    """Base exception for all socialvideo errors."""

    pass


class MetadataError(SocialVideoError):
    """Error fetching provider metadata for an already-recognized video.

    Raised when a provider id was extracted but the metadata lookup needed
    to derive an artifact (currently the Vimeo thumbnail) failed. Callers
    can tell this apart from "URL not recognized", which returns None.

    Attributes:
        message: Human-readable error message
        provider: Provider name the lookup was made against
        video_id: The extracted provider id
        category: Error classification (e.g., "network", "invalid_response")
        details: Additional diagnostic information
        suggestion: Recommended remediation steps
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        video_id: str | None = None,
        category: str = "metadata",
        details: dict[str, Any] | None = None,
        suggestion: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.video_id = video_id
        self.category = category
        self.details = details or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "category": self.category,
        }
        if self.provider:
            result["provider"] = self.provider
        if self.video_id:
            result["video_id"] = self.video_id
        if self.details:
            result["details"] = self.details
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result


class NetworkError(MetadataError):
    """Network-related error (connection issues, timeouts, HTTP errors)."""

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        video_id: str | None = None,
        details: dict[str, Any] | None = None,
        http_code: int | None = None,
    ):
        details = details or {}
        if http_code:
            details["http_code"] = http_code

        if http_code == 404:
            suggestion = "The video may be private or removed."
        else:
            suggestion = "Check your internet connection and try again."
        super().__init__(
            message,
            provider=provider,
            video_id=video_id,
            category="network",
            details=details,
            suggestion=suggestion,
        )
        self.http_code = http_code


class InvalidMetadataError(MetadataError):
    """Provider answered, but the response is unusable.

    Covers bodies that are not JSON and records missing a required field
    such as ``thumbnail_large``.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        video_id: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            provider=provider,
            video_id=video_id,
            category="invalid_response",
            details=details,
            suggestion="The provider API may have changed its response format.",
        )


class ConfigError(SocialVideoError):
    """Invalid configuration value (env var or config file)."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        msg = message or f"Invalid value for '{key}': {value!r}"
        super().__init__(msg)
