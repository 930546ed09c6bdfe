"""
Song Repository

SQL-реализация SongRepository (только поиск).
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from .base import BaseRepository, escape_like
from catalog.db.models import SongRecord
from catalog.domain import DecodeFailedError, Song, SongRepository


class SqlSongRepository(BaseRepository[SongRecord], SongRepository):
    """Репозиторий песен поверх таблицы songs."""

    entity_name = "song"

    def __init__(self, session_maker: async_sessionmaker):
        super().__init__(SongRecord, session_maker)

    async def search(
        self,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
        limit: int = 10,
        offset: int = 0
    ) -> List[Song]:
        """
        Поиск песен.

        title - подстрока без учёта регистра, channel_name - точное
        совпадение. Отсутствующий фильтр просто не применяется.
        """
        query = select(SongRecord)

        if title is not None:
            query = query.where(SongRecord.title.ilike(f"%{escape_like(title)}%", escape="\\"))
        if channel_name is not None:
            query = query.where(SongRecord.channel_name == channel_name)

        records = await self.fetch_all(self.paginate(query, limit, offset), "search")
        return [self.to_entity(record) for record in records]

    def to_entity(self, record: SongRecord) -> Song:
        if record.title is None or record.channel_name is None:
            raise DecodeFailedError(self.entity_name, "missing required column", row_id=record.id)

        return Song(
            id=record.id,
            title=record.title,
            channel_name=record.channel_name,
            artist=record.artist,
            video_id=record.video_id,
        )
