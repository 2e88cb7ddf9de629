"""
Vimeo metadata record as returned by the simple API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VimeoVideoMetadata(BaseModel):
    """One record of a Vimeo ``/api/v2/video/{id}.json`` response.

    The API returns a list holding a single record. Only ``thumbnail_large``
    is required; everything else the API sends is kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    thumbnail_large: str = Field(..., description="Largest thumbnail URL")
    thumbnail_medium: str | None = None
    thumbnail_small: str | None = None
    id: int | str | None = None
    title: str | None = None
