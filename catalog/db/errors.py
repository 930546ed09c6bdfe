"""
Storage Error Translation

Переводит исключения SQLAlchemy/драйвера в доменную таксономию.
Типы ошибок движка БД не выходят за пределы слоя catalog.db.
"""

import asyncio
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)

from catalog.core.logging import get_logger
from catalog.domain.exceptions import (
    CreateFailedError,
    DomainError,
    StorageTimeoutError,
    StorageUnavailableError,
    WriteFailedError,
)

logger = get_logger(__name__)


def _reason(error: Exception) -> str:
    """Первая строка сообщения исходной ошибки драйвера."""
    origin = error.orig if isinstance(error, DBAPIError) and error.orig is not None else error
    text = str(origin).strip() or type(origin).__name__
    return text.splitlines()[0]


@contextmanager
def translate_storage_errors(
    operation: str,
    entity: Optional[str] = None,
    key: Optional[str] = None
) -> Iterator[None]:
    """
    Контекст, переводящий ошибки хранилища в доменные.

    - IntegrityError -> CreateFailedError (если задан entity) / WriteFailedError
    - прочий отказ выполнить запрос (DataError, ProgrammingError, ...)
      при записи -> CreateFailedError
    - TimeoutError -> StorageTimeoutError
    - прочие SQLAlchemyError, OSError -> StorageUnavailableError

    Доменные ошибки и отмена задачи (CancelledError) проходят без изменений.

    Args:
        operation: Имя операции для логов и деталей ошибки
        entity: Имя сущности при записи
        key: Ключ записываемой сущности

    Example:
        with translate_storage_errors("channels.find_by_id"):
            result = await session.execute(query)
    """
    try:
        yield
    except DomainError:
        raise
    except IntegrityError as e:
        reason = _reason(e)
        logger.warning("Write rejected during %s: %s", operation, reason)
        if entity is not None:
            raise CreateFailedError(entity, key, reason) from e
        raise WriteFailedError(
            f"Write rejected during {operation}",
            {"operation": operation, "reason": reason}
        ) from e
    except asyncio.TimeoutError as e:
        logger.error("Storage timeout during %s", operation)
        raise StorageTimeoutError(operation) from e
    except DBAPIError as e:
        reason = _reason(e)
        if (
            entity is None
            or e.connection_invalidated
            or isinstance(e, (OperationalError, InterfaceError))
        ):
            logger.error("Storage failure during %s: %s", operation, reason)
            raise StorageUnavailableError(operation, reason) from e
        logger.warning("Write rejected during %s: %s", operation, reason)
        raise CreateFailedError(entity, key, reason) from e
    except (SQLAlchemyError, OSError) as e:
        reason = _reason(e)
        logger.error("Storage failure during %s: %s", operation, reason)
        raise StorageUnavailableError(operation, reason) from e
