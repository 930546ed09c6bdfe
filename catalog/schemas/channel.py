"""
Channel Schemas

Pydantic models для работы с каналами.
"""

from typing import Optional
from pydantic import Field, field_validator

from .base import BaseSchema
from catalog.domain import Channel, DraftChannel, InvalidUrlError, Url


class ChannelCreateSchema(BaseSchema):
    """
    Schema для создания канала.

    icon_url проверяется через domain Url.
    """

    channel_id: str = Field(..., min_length=1, description="Внешний идентификатор канала")
    name: str = Field(..., min_length=1, max_length=255, description="Название канала")
    icon_url: str = Field(..., description="URL иконки", examples=["https://example.com/icon.png"])
    id: Optional[int] = Field(None, ge=1, description="ID строки (по умолчанию назначает БД)")

    @field_validator("channel_id", "name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Строка из одних пробелов не принимается, но значение не обрезается."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("icon_url")
    @classmethod
    def validate_icon_url(cls, v: str) -> str:
        """Валидация через domain layer."""
        try:
            return str(Url.parse(v))
        except InvalidUrlError as e:
            raise ValueError(str(e))

    def to_domain(self) -> DraftChannel:
        """Преобразует в domain DraftChannel."""
        return DraftChannel(
            channel_id=self.channel_id,
            name=self.name,
            icon_url=Url.parse(self.icon_url),
            id=self.id,
        )


class ChannelResponseSchema(BaseSchema):
    """Schema для ответа с данными канала."""

    id: int = Field(..., description="ID канала в БД")
    channel_id: str = Field(..., description="Внешний идентификатор канала")
    name: str = Field(..., description="Название канала")
    icon_url: str = Field(..., description="URL иконки")

    @classmethod
    def from_entity(cls, channel: Channel) -> "ChannelResponseSchema":
        return cls(**channel.to_dict())
