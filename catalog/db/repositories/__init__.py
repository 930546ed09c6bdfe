"""
Repositories Layer

Адаптеры контрактов к хранилищу.
Каждый репозиторий отвечает за свою сущность.
"""

from .base import BaseRepository
from .channel_repository import SqlChannelRepository
from .video_repository import SqlVideoRepository
from .song_repository import SqlSongRepository
from .memory import (
    InMemoryChannelRepository,
    InMemoryVideoRepository,
    InMemorySongRepository,
)
from .facade import RepositoryFacade

__all__ = [
    "BaseRepository",
    "SqlChannelRepository",
    "SqlVideoRepository",
    "SqlSongRepository",
    "InMemoryChannelRepository",
    "InMemoryVideoRepository",
    "InMemorySongRepository",
    "RepositoryFacade",
]
