"""
Video Schemas

Pydantic models для работы с видео.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from .base import BaseSchema
from catalog.domain import DraftVideo, InvalidUrlError, Url, Video


class VideoCreateSchema(BaseSchema):
    """Schema для создания видео."""

    video_id: str = Field(..., min_length=1, description="Внешний идентификатор видео")
    channel_id: str = Field(..., min_length=1, description="channel_id канала")
    title: str = Field(..., min_length=1, max_length=500, description="Название")
    description: str = Field("", max_length=5000, description="Описание")
    thumbnail_url: Optional[str] = Field(None, description="URL превью")
    published_at: Optional[datetime] = Field(None, description="Дата публикации")

    @field_validator("video_id", "channel_id", "title")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("thumbnail_url")
    @classmethod
    def validate_thumbnail_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            return str(Url.parse(v))
        except InvalidUrlError as e:
            raise ValueError(str(e))

    def to_domain(self) -> DraftVideo:
        return DraftVideo(
            video_id=self.video_id,
            channel_id=self.channel_id,
            title=self.title,
            description=self.description,
            thumbnail_url=Url.parse(self.thumbnail_url) if self.thumbnail_url else None,
            published_at=self.published_at,
        )


class VideoResponseSchema(BaseSchema):
    """Schema для ответа с данными видео."""

    id: int
    video_id: str
    channel_id: str
    title: str
    description: str = ""
    thumbnail_url: Optional[str] = None
    published_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, video: Video) -> "VideoResponseSchema":
        return cls(
            id=video.id,
            video_id=video.video_id,
            channel_id=video.channel_id,
            title=video.title,
            description=video.description,
            thumbnail_url=str(video.thumbnail_url) if video.thumbnail_url else None,
            published_at=video.published_at,
        )
