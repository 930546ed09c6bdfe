"""
Domain Entities

Основные сущности каталога.
"""

from .channel import Channel, DraftChannel
from .video import Video, DraftVideo
from .song import Song

__all__ = [
    "Channel",
    "DraftChannel",
    "Video",
    "DraftVideo",
    "Song",
]
