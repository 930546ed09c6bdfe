"""
Schemas Layer (DTO)

Pydantic models для валидации входа и сериализации ответов.
"""

from .base import BaseSchema, ErrorResponse, PageQuerySchema
from .channel import ChannelCreateSchema, ChannelResponseSchema
from .video import VideoCreateSchema, VideoResponseSchema
from .song import SongSearchSchema, SongResponseSchema

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    "PageQuerySchema",
    # Channel
    "ChannelCreateSchema",
    "ChannelResponseSchema",
    # Video
    "VideoCreateSchema",
    "VideoResponseSchema",
    # Song
    "SongSearchSchema",
    "SongResponseSchema",
]
