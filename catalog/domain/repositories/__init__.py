"""
Repository Contracts

Интерфейсы хранилищ, не зависящие от движка БД.
"""

from .channel_repository import ChannelRepository
from .video_repository import VideoRepository
from .song_repository import SongRepository

__all__ = [
    "ChannelRepository",
    "VideoRepository",
    "SongRepository",
]
