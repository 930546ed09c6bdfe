"""
Video Repository

SQL-реализация VideoRepository.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from .base import BaseRepository
from catalog.db.models import VideoRecord
from catalog.domain import (
    DecodeFailedError,
    DraftVideo,
    InvalidUrlError,
    Url,
    Video,
    VideoRepository,
)


class SqlVideoRepository(BaseRepository[VideoRecord], VideoRepository):
    """
    Репозиторий видео поверх таблицы videos.

    Порядок выдачи - по id (порядок вставки). Ошибки декодирования
    не глотаются: испорченная строка прерывает весь список.
    """

    entity_name = "video"

    def __init__(self, session_maker: async_sessionmaker):
        super().__init__(VideoRecord, session_maker)

    async def list_by_channel(self, channel_id: str, limit: int, offset: int) -> List[Video]:
        query = self.paginate(
            select(VideoRecord).where(VideoRecord.channel_id == channel_id),
            limit,
            offset,
        )
        records = await self.fetch_all(query, "list_by_channel")
        return [self.to_entity(record) for record in records]

    async def list(self, limit: int, offset: int) -> List[Video]:
        query = self.paginate(select(VideoRecord), limit, offset)
        records = await self.fetch_all(query, "list")
        return [self.to_entity(record) for record in records]

    async def create(self, draft: DraftVideo) -> None:
        await self.insert_one(
            draft.video_id,
            video_id=draft.video_id,
            channel_id=draft.channel_id,
            title=draft.title,
            description=draft.description or "",
            thumbnail_url=str(draft.thumbnail_url) if draft.thumbnail_url else None,
            published_at=draft.published_at,
        )

    def to_entity(self, record: VideoRecord) -> Video:
        """Преобразовать строку таблицы в Video."""
        if record.video_id is None or record.channel_id is None or record.title is None:
            raise DecodeFailedError(self.entity_name, "missing required column", row_id=record.id)

        thumbnail_url = None
        if record.thumbnail_url is not None:
            try:
                thumbnail_url = Url(record.thumbnail_url)
            except InvalidUrlError as e:
                raise DecodeFailedError(self.entity_name, e.message, row_id=record.id) from e

        return Video(
            id=record.id,
            video_id=record.video_id,
            channel_id=record.channel_id,
            title=record.title,
            description=record.description or "",
            thumbnail_url=thumbnail_url,
            published_at=record.published_at,
        )
