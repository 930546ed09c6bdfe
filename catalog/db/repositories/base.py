"""
Base Repository

Общая основа SQL-репозиториев: сессии, пагинация, вставка.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import insert, Select
from sqlalchemy.ext.asyncio import async_sessionmaker

from catalog.core.logging import get_logger
from catalog.db.database import Base
from catalog.db.errors import translate_storage_errors
from catalog.domain import CreateFailedError, Pagination

logger = get_logger(__name__)

# Generic type для модели
ModelType = TypeVar("ModelType", bound=Base)


def escape_like(value: str, escape: str = "\\") -> str:
    """Экранирует спецсимволы LIKE, чтобы строка искалась буквально."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class BaseRepository(Generic[ModelType]):
    """
    Базовый SQL-репозиторий.

    Каждый вызов открывает свою сессию из общего async_sessionmaker,
    то есть является независимой единицей работы. Транзакций между
    вызовами и повторов нет.
    """

    entity_name = "row"

    def __init__(self, model: Type[ModelType], session_maker: async_sessionmaker):
        """
        Args:
            model: SQLAlchemy модель (ChannelRecord, VideoRecord, ...)
            session_maker: Общая фабрика сессий
        """
        self.model = model
        self._session_maker = session_maker

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def paginate(self, query: Select, limit: int, offset: int) -> Select:
        """
        Применить стабильный порядок (по id) и окно limit/offset.

        Raises:
            ValidationFailedError: отрицательные или нецелые limit/offset
        """
        window = Pagination(limit=limit, offset=offset)
        return (
            query.order_by(self.model.id)
            .limit(window.limit)
            .offset(window.offset)
        )

    async def fetch_all(self, query: Select, operation: str) -> List[ModelType]:
        """Выполнить запрос и вернуть все ORM-объекты."""
        with translate_storage_errors(f"{self.table}.{operation}"):
            async with self._session_maker() as session:
                result = await session.execute(query)
                return list(result.scalars().all())

    async def fetch_first(self, query: Select, operation: str) -> Optional[ModelType]:
        """Выполнить запрос и вернуть первый ORM-объект или None."""
        with translate_storage_errors(f"{self.table}.{operation}"):
            async with self._session_maker() as session:
                result = await session.execute(query.limit(1))
                return result.scalars().first()

    async def insert_one(self, key: str, **values) -> None:
        """
        Вставить одну строку в отдельной транзакции.

        Ноль затронутых строк считается ошибкой, как и отказ БД
        (например, нарушение уникальности). При ошибке транзакция
        откатывается, частичных строк не остаётся.

        Raises:
            CreateFailedError
        """
        with translate_storage_errors(f"{self.table}.create", entity=self.entity_name, key=key):
            async with self._session_maker() as session:
                async with session.begin():
                    result = await session.execute(insert(self.model).values(**values))
                    if result.rowcount == 0:
                        raise CreateFailedError(self.entity_name, key, "no rows affected")

        logger.debug(f"{self.entity_name} created: key={key}")
