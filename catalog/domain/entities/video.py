"""
Video Entity

Доменная модель видео.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from catalog.domain.value_objects import Url


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Привести время публикации к UTC.

    Время без часового пояса считается UTC, остальное переводится в UTC.
    Так значение одинаково возвращается из любого хранилища.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Video:
    """
    Видео каталога.

    channel_id ссылается на Channel.channel_id, но видео канал не владеет:
    существование канала при чтении не проверяется.
    """

    id: int
    video_id: str
    channel_id: str
    title: str
    description: str = ""
    thumbnail_url: Optional[Url] = None
    published_at: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "published_at", as_utc(self.published_at))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "video_id": self.video_id,
            "channel_id": self.channel_id,
            "title": self.title,
            "description": self.description,
            "thumbnail_url": str(self.thumbnail_url) if self.thumbnail_url else None,
            "published_at": self.published_at.isoformat() if self.published_at else None,
        }


@dataclass(frozen=True)
class DraftVideo:
    """Черновик видео для создания."""

    video_id: str
    channel_id: str
    title: str
    description: str = ""
    thumbnail_url: Optional[Url] = None
    published_at: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "published_at", as_utc(self.published_at))
