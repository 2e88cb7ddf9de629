"""
VideoReference Pydantic model: the result of provider detection.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Provider(str, Enum):
    """Supported video hosting providers."""

    YOUTUBE = "YouTube"
    VIMEO = "Vimeo"
    DAILYMOTION = "DailyMotion"


class ThumbnailQuality(str, Enum):
    """YouTube thumbnail variant. Ignored for the other providers."""

    SMALL = "small"
    MEDIUM = "medium"


class VideoReference(BaseModel):
    """A detected (provider, video id) pair.

    ``provider is None`` means no provider recognized the URL; such a
    reference never carries a ``video_id``.
    """

    model_config = ConfigDict(frozen=True)

    provider: Provider | None = Field(None, description="Detected provider")
    video_id: str | None = Field(None, description="Provider-specific video id")

    @model_validator(mode="after")
    def check_id_matches_provider(self) -> VideoReference:
        if self.provider is None and self.video_id is not None:
            raise ValueError("video_id must be None when no provider matched")
        if self.provider is not None and not self.video_id:
            raise ValueError(f"{self.provider.value} reference requires a video_id")
        return self

    @classmethod
    def unrecognized(cls) -> VideoReference:
        """Reference for a URL no provider recognized."""
        return cls()

    @property
    def is_recognized(self) -> bool:
        return self.provider is not None

    def __str__(self) -> str:
        if self.provider:
            return f"{self.provider.value}:{self.video_id}"
        return "unrecognized"

    def __repr__(self) -> str:
        provider = self.provider.value if self.provider else None
        return f"VideoReference(provider={provider!r}, video_id={self.video_id!r})"
