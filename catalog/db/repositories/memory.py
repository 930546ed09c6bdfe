"""
In-Memory Repositories

Реализации контрактов без БД: для тестов транспортного слоя
и локальных экспериментов. Семантика совпадает с SQL-версиями
(уникальность ключей, порядок по id, окно limit/offset).
"""

from itertools import count
from typing import Dict, Iterable, List, Optional

from catalog.domain import (
    Channel,
    ChannelRepository,
    CreateFailedError,
    DraftChannel,
    DraftVideo,
    Pagination,
    Song,
    SongRepository,
    Video,
    VideoRepository,
)


def _page(items: list, limit: int, offset: int) -> list:
    window = Pagination(limit=limit, offset=offset)
    return items[window.offset:window.offset + window.limit]


class InMemoryChannelRepository(ChannelRepository):
    """Каналы в словаре channel_id -> Channel."""

    def __init__(self):
        self._channels: Dict[str, Channel] = {}
        self._last_id = 0

    async def find_by_id(self, channel_id: str) -> Optional[Channel]:
        return self._channels.get(channel_id)

    async def search_by_name(self, name: str) -> List[Channel]:
        needle = name.lower()
        found = [c for c in self._channels.values() if needle in c.name.lower()]
        return sorted(found, key=lambda c: c.id)

    async def create(self, draft: DraftChannel) -> None:
        if draft.channel_id in self._channels:
            raise CreateFailedError("channel", draft.channel_id, "duplicate channel_id")

        # Автоматический id идёт после наибольшего занятого, в том числе явного
        row_id = draft.id if draft.id is not None else self._last_id + 1
        if any(c.id == row_id for c in self._channels.values()):
            raise CreateFailedError("channel", draft.channel_id, "duplicate id")

        self._last_id = max(self._last_id, row_id)
        self._channels[draft.channel_id] = Channel(
            id=row_id,
            channel_id=draft.channel_id,
            name=draft.name,
            icon_url=draft.icon_url,
        )


class InMemoryVideoRepository(VideoRepository):
    """Видео в списке в порядке вставки."""

    def __init__(self):
        self._videos: List[Video] = []
        self._ids = count(1)

    async def list_by_channel(self, channel_id: str, limit: int, offset: int) -> List[Video]:
        videos = [v for v in self._videos if v.channel_id == channel_id]
        return _page(videos, limit, offset)

    async def list(self, limit: int, offset: int) -> List[Video]:
        return _page(self._videos, limit, offset)

    async def create(self, draft: DraftVideo) -> None:
        if any(v.video_id == draft.video_id for v in self._videos):
            raise CreateFailedError("video", draft.video_id, "duplicate video_id")

        self._videos.append(Video(
            id=next(self._ids),
            video_id=draft.video_id,
            channel_id=draft.channel_id,
            title=draft.title,
            description=draft.description or "",
            thumbnail_url=draft.thumbnail_url,
            published_at=draft.published_at,
        ))


class InMemorySongRepository(SongRepository):
    """Песни задаются при создании: операции записи в контракте нет."""

    def __init__(self, songs: Iterable[Song] = ()):
        self._songs = sorted(songs, key=lambda s: s.id)

    async def search(
        self,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
        limit: int = 10,
        offset: int = 0
    ) -> List[Song]:
        songs = self._songs
        if title is not None:
            songs = [s for s in songs if title.lower() in s.title.lower()]
        if channel_name is not None:
            songs = [s for s in songs if s.channel_name == channel_name]
        return _page(songs, limit, offset)
