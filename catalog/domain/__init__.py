"""
Domain Layer

Содержит ядро каталога, не зависящее от внешних фреймворков:
- Value Objects: Url, Pagination
- Entities: Channel, Video, Song и черновики
- Repositories: контракты хранилищ
- Exceptions: таксономия ошибок
"""

from .exceptions import (
    ErrorKind,
    DomainError,
    NotFoundError,
    ChannelNotFoundError,
    ValidationFailedError,
    InvalidUrlError,
    DecodeFailedError,
    WriteFailedError,
    CreateFailedError,
    StorageUnavailableError,
    StorageTimeoutError,
)

from .value_objects import Url, Pagination

from .entities import (
    Channel,
    DraftChannel,
    Video,
    DraftVideo,
    Song,
)

from .repositories import (
    ChannelRepository,
    VideoRepository,
    SongRepository,
)

__all__ = [
    # Exceptions
    "ErrorKind",
    "DomainError",
    "NotFoundError",
    "ChannelNotFoundError",
    "ValidationFailedError",
    "InvalidUrlError",
    "DecodeFailedError",
    "WriteFailedError",
    "CreateFailedError",
    "StorageUnavailableError",
    "StorageTimeoutError",
    # Value Objects
    "Url",
    "Pagination",
    # Entities
    "Channel",
    "DraftChannel",
    "Video",
    "DraftVideo",
    "Song",
    # Repositories
    "ChannelRepository",
    "VideoRepository",
    "SongRepository",
]
