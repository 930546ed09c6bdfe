"""
Base Schemas

Базовые классы для всех Pydantic schemas.
"""

from typing import Optional, Any, Dict
from pydantic import BaseModel, ConfigDict, Field

from catalog.domain import Pagination


class BaseSchema(BaseModel):
    """
    Базовый класс для всех schemas.

    Настройки:
    - from_attributes: Позволяет создавать из dataclass entities
    - populate_by_name: Позволяет использовать alias

    Строки не обрезаются: channel_id и name хранятся как переданы.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ErrorResponse(BaseSchema):
    """
    Стандартный ответ с ошибкой.

    error - значение ErrorKind, по нему клиент различает классы ошибок.
    """

    error: str = Field(..., description="Тип ошибки (ErrorKind)")
    message: str = Field(..., description="Описание ошибки")
    details: Optional[Dict[str, Any]] = Field(None, description="Детали ошибки")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "validation_failed",
                "message": "'not a url' is invalid url (Scheme and authority are required)",
                "details": {"url": "not a url"}
            }
        }
    )


class PageQuerySchema(BaseSchema):
    """Параметры пагинации из query string."""

    limit: Optional[int] = Field(None, ge=0, description="Размер страницы")
    offset: int = Field(0, ge=0, description="Сдвиг")

    def to_pagination(self, default_limit: int, max_limit: int) -> Pagination:
        """
        Преобразует в domain Pagination с политикой размера страницы.

        Args:
            default_limit: limit, если клиент его не указал
            max_limit: Верхняя граница limit
        """
        limit = default_limit if self.limit is None else self.limit
        return Pagination(limit=limit, offset=self.offset).capped(max_limit)
