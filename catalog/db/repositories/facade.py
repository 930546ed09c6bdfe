"""
Repository Facade

Единая точка доступа ко всем репозиториям (application handle).
Передаётся транспортному слою явно, а не через глобальный singleton.
"""

from typing import Iterable

from sqlalchemy.ext.asyncio import async_sessionmaker

from .channel_repository import SqlChannelRepository
from .video_repository import SqlVideoRepository
from .song_repository import SqlSongRepository
from .memory import (
    InMemoryChannelRepository,
    InMemorySongRepository,
    InMemoryVideoRepository,
)
from catalog.domain import (
    ChannelRepository,
    Song,
    SongRepository,
    VideoRepository,
)


class RepositoryFacade:
    """
    Facade для доступа ко всем репозиториям.

    Транспорт зависит только от контрактов, конкретный адаптер
    выбирается при сборке.

    Usage:
        repo = RepositoryFacade.from_session_maker(session_maker)

        channel = await repo.channels.find_by_id("foo")
        videos = await repo.videos.list(limit=10, offset=0)
        songs = await repo.songs.search(title="intro")
    """

    def __init__(
        self,
        channels: ChannelRepository,
        videos: VideoRepository,
        songs: SongRepository
    ):
        self._channels = channels
        self._videos = videos
        self._songs = songs

    @classmethod
    def from_session_maker(cls, session_maker: async_sessionmaker) -> "RepositoryFacade":
        """Собрать facade из SQL-репозиториев над общей фабрикой сессий."""
        return cls(
            channels=SqlChannelRepository(session_maker),
            videos=SqlVideoRepository(session_maker),
            songs=SqlSongRepository(session_maker),
        )

    @classmethod
    def in_memory(cls, songs: Iterable[Song] = ()) -> "RepositoryFacade":
        """Собрать facade из in-memory репозиториев."""
        return cls(
            channels=InMemoryChannelRepository(),
            videos=InMemoryVideoRepository(),
            songs=InMemorySongRepository(songs),
        )

    @property
    def channels(self) -> ChannelRepository:
        """Репозиторий каналов."""
        return self._channels

    @property
    def videos(self) -> VideoRepository:
        """Репозиторий видео."""
        return self._videos

    @property
    def songs(self) -> SongRepository:
        """Репозиторий песен."""
        return self._songs
