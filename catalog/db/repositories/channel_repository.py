"""
Channel Repository

SQL-реализация ChannelRepository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from .base import BaseRepository, escape_like
from catalog.db.models import ChannelRecord
from catalog.domain import (
    Channel,
    ChannelRepository,
    DecodeFailedError,
    DraftChannel,
    InvalidUrlError,
    Url,
)
from catalog.core.logging import get_logger

logger = get_logger(__name__)


class SqlChannelRepository(BaseRepository[ChannelRecord], ChannelRepository):
    """
    Репозиторий каналов поверх таблицы channels.

    Ключ поиска - channel_id (UNIQUE).
    """

    entity_name = "channel"

    def __init__(self, session_maker: async_sessionmaker):
        super().__init__(ChannelRecord, session_maker)

    async def find_by_id(self, channel_id: str) -> Optional[Channel]:
        """
        Получить канал по channel_id.

        Returns:
            Channel или None

        Raises:
            DecodeFailedError: строка есть, но icon_url испорчен
        """
        record = await self.fetch_first(
            select(ChannelRecord).where(ChannelRecord.channel_id == channel_id),
            "find_by_id",
        )
        if record is None:
            return None
        return self.to_entity(record)

    async def search_by_name(self, name: str) -> List[Channel]:
        """
        Поиск каналов по подстроке названия (без учёта регистра).

        Испорченные строки пропускаются с предупреждением в логе.
        """
        query = select(ChannelRecord).where(
            ChannelRecord.name.ilike(f"%{escape_like(name)}%", escape="\\")
        ).order_by(ChannelRecord.id)

        records = await self.fetch_all(query, "search_by_name")

        channels = []
        for record in records:
            try:
                channels.append(self.to_entity(record))
            except DecodeFailedError as e:
                logger.warning("Skipping undecodable channel row: %s", e)
        return channels

    async def create(self, draft: DraftChannel) -> None:
        values = {
            "channel_id": draft.channel_id,
            "name": draft.name,
            "icon_url": str(draft.icon_url),
        }
        if draft.id is not None:
            values["id"] = draft.id

        await self.insert_one(draft.channel_id, **values)

    def to_entity(self, record: ChannelRecord) -> Channel:
        """
        Преобразовать строку таблицы в Channel.

        Raises:
            DecodeFailedError: строка нарушает инварианты сущности
        """
        if record.channel_id is None or record.name is None:
            raise DecodeFailedError(self.entity_name, "missing required column", row_id=record.id)

        try:
            icon_url = Url(record.icon_url)
        except InvalidUrlError as e:
            raise DecodeFailedError(self.entity_name, e.message, row_id=record.id) from e

        return Channel(
            id=record.id,
            channel_id=record.channel_id,
            name=record.name,
            icon_url=icon_url,
        )
