"""
Song Schemas

Pydantic models для поиска песен.
"""

from typing import Optional
from pydantic import Field

from .base import BaseSchema, PageQuerySchema
from catalog.domain import Song


class SongSearchSchema(PageQuerySchema):
    """Фильтры поиска песен: оба необязательны."""

    title: Optional[str] = Field(None, description="Подстрока названия")
    channel_name: Optional[str] = Field(None, description="Имя канала")


class SongResponseSchema(BaseSchema):
    """Schema для ответа с данными песни."""

    id: int
    title: str
    channel_name: str
    artist: Optional[str] = None
    video_id: Optional[str] = None

    @classmethod
    def from_entity(cls, song: Song) -> "SongResponseSchema":
        return cls(**song.to_dict())
