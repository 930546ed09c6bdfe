"""
Song Entity

Песня доступна только для поиска, создание здесь не определено.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Song:
    """Песня с названием и именем канала, по которому фильтруется поиск."""

    id: int
    title: str
    channel_name: str
    artist: Optional[str] = None
    video_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "channel_name": self.channel_name,
            "artist": self.artist,
            "video_id": self.video_id,
        }
