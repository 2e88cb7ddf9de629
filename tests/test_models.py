"""Tests for socialvideo data models."""

import pytest
from pydantic import ValidationError

from socialvideo.models import (
    Provider,
    ThumbnailQuality,
    VideoReference,
    VimeoVideoMetadata,
)


class TestProvider:
    """Tests for Provider enum."""

    def test_values(self):
        assert Provider.YOUTUBE.value == "YouTube"
        assert Provider.VIMEO.value == "Vimeo"
        assert Provider.DAILYMOTION.value == "DailyMotion"

    def test_lookup_by_value(self):
        assert Provider("Vimeo") is Provider.VIMEO


class TestThumbnailQuality:
    """Tests for ThumbnailQuality enum."""

    def test_values(self):
        assert ThumbnailQuality.SMALL.value == "small"
        assert ThumbnailQuality.MEDIUM.value == "medium"

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            ThumbnailQuality("large")


class TestVideoReference:
    """Tests for VideoReference model."""

    def test_recognized(self):
        ref = VideoReference(provider=Provider.YOUTUBE, video_id="dQw4w9WgXcQ")
        assert ref.is_recognized is True
        assert str(ref) == "YouTube:dQw4w9WgXcQ"

    def test_unrecognized(self):
        ref = VideoReference.unrecognized()
        assert ref.provider is None
        assert ref.video_id is None
        assert ref.is_recognized is False
        assert str(ref) == "unrecognized"

    def test_provider_from_string(self):
        ref = VideoReference(provider="DailyMotion", video_id="x7tgad0")
        assert ref.provider is Provider.DAILYMOTION

    def test_id_without_provider_rejected(self):
        with pytest.raises(ValidationError, match="video_id must be None"):
            VideoReference(provider=None, video_id="abc")

    def test_provider_without_id_rejected(self):
        with pytest.raises(ValidationError, match="requires a video_id"):
            VideoReference(provider=Provider.VIMEO)

    def test_provider_with_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            VideoReference(provider=Provider.VIMEO, video_id="")

    def test_frozen(self):
        ref = VideoReference(provider=Provider.VIMEO, video_id="347119375")
        with pytest.raises(ValidationError):
            ref.video_id = "other"

    def test_repr(self):
        ref = VideoReference(provider=Provider.VIMEO, video_id="347119375")
        assert repr(ref) == "VideoReference(provider='Vimeo', video_id='347119375')"


class TestVimeoVideoMetadata:
    """Tests for VimeoVideoMetadata model."""

    def test_only_thumbnail_large_required(self):
        record = VimeoVideoMetadata(thumbnail_large="https://i.vimeocdn.com/1.jpg")
        assert record.thumbnail_small is None
        assert record.thumbnail_medium is None

    def test_missing_thumbnail_large(self):
        with pytest.raises(ValidationError):
            VimeoVideoMetadata(thumbnail_small="https://i.vimeocdn.com/1.jpg")
