from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.ext.asyncio import AsyncEngine

from catalog.db.database import Base


# -------------------------
# CHANNEL
# -------------------------
class ChannelRecord(Base):
    __tablename__ = "channels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    channel_id = Column(Text, unique=True, nullable=False)  # натуральный ключ
    name = Column(Text, nullable=False, index=True)
    icon_url = Column(Text, nullable=False)  # строка Url, проверяется при чтении


# -------------------------
# VIDEO
# -------------------------
class VideoRecord(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(Text, unique=True, nullable=False)
    # Ссылка на channels.channel_id без FK: видео не владеет каналом
    channel_id = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    thumbnail_url = Column(Text, nullable=True)
    published_at = Column(TIMESTAMP(timezone=True), nullable=True)  # хранится в UTC


# -------------------------
# SONG (только чтение)
# -------------------------
class SongRecord(Base):
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, index=True)
    channel_name = Column(Text, nullable=False, index=True)
    artist = Column(Text, nullable=True)
    video_id = Column(Text, nullable=True)


async def init_models(engine: AsyncEngine) -> None:
    """
    Создать таблицы, если их нет.

    Только для тестов и локального запуска, не замена миграциям.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
