"""
Domain Exceptions

Доменные исключения и таксономия ошибок каталога.
Независимы от инфраструктуры (БД, HTTP, etc).

Каждое исключение несёт ErrorKind, по которому транспортный слой
выбирает код ответа. Типы ошибок драйвера БД сюда не попадают.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Таксономия ошибок, доступная транспортному слою."""

    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    DECODE_FAILED = "decode_failed"
    WRITE_FAILED = "write_failed"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class DomainError(Exception):
    """Базовый класс для всех доменных исключений."""

    # Непредвиденная доменная ошибка отдаётся как внутренняя (500)
    kind: ErrorKind = ErrorKind.DECODE_FAILED

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ----------------------------------------------------------------------------
# NOT_FOUND
# ----------------------------------------------------------------------------

class NotFoundError(DomainError):
    """
    Сущность отсутствует.

    Репозитории возвращают None вместо этого исключения;
    его бросает только вызывающий код, которому нужен объект.
    """

    kind = ErrorKind.NOT_FOUND


class ChannelNotFoundError(NotFoundError):
    """Канал не найден в каталоге."""

    def __init__(self, channel_id: str):
        super().__init__(
            f"Channel not found: {channel_id}",
            {"channel_id": channel_id}
        )


# ----------------------------------------------------------------------------
# VALIDATION_FAILED
# ----------------------------------------------------------------------------

class ValidationFailedError(DomainError):
    """Некорректное входное значение (ошибка вызывающего)."""

    kind = ErrorKind.VALIDATION_FAILED


class InvalidUrlError(ValidationFailedError):
    """Строка не является корректным абсолютным URL."""

    def __init__(self, url: str, reason: str = None):
        details = {"url": url}
        if reason:
            details["reason"] = reason

        message = f"{url!r} is invalid url"
        if reason:
            message += f" ({reason})"

        super().__init__(message, details)
        self.url = url


# ----------------------------------------------------------------------------
# DECODE_FAILED
# ----------------------------------------------------------------------------

class DecodeFailedError(DomainError):
    """
    Строка из хранилища не восстанавливается в сущность.

    Признак порчи данных, а не ошибки вызывающего.
    """

    kind = ErrorKind.DECODE_FAILED

    def __init__(self, entity: str, reason: str, row_id=None):
        details = {"entity": entity, "reason": reason}
        if row_id is not None:
            details["row_id"] = row_id
        super().__init__(f"Failed to decode {entity} row: {reason}", details)


# ----------------------------------------------------------------------------
# WRITE_FAILED
# ----------------------------------------------------------------------------

class WriteFailedError(DomainError):
    """Запись отклонена хранилищем или не затронула ни одной строки."""

    kind = ErrorKind.WRITE_FAILED


class CreateFailedError(WriteFailedError):
    """Вставка новой сущности не удалась."""

    def __init__(self, entity: str, key: str, reason: str):
        super().__init__(
            f"Failed insert {entity} row: {key} ({reason})",
            {"entity": entity, "key": key, "reason": reason}
        )


# ----------------------------------------------------------------------------
# STORAGE_UNAVAILABLE
# ----------------------------------------------------------------------------

class StorageUnavailableError(DomainError):
    """Хранилище недоступно (соединение, запрос, инфраструктура)."""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, operation: str, reason: str = None):
        details = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(f"Storage unavailable during {operation}", details)


class StorageTimeoutError(StorageUnavailableError):
    """Операция с хранилищем превысила таймаут."""

    def __init__(self, operation: str):
        super().__init__(operation, "timeout")
