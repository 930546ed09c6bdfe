from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_engine(dsn: str, echo: bool = False, pool_size: int = 5) -> AsyncEngine:
    """
    Создать async engine для DSN.

    In-memory SQLite (тесты, локальный запуск) работает через одно
    соединение, иначе каждая сессия увидела бы свою пустую базу.
    """
    if dsn.startswith("sqlite"):
        return create_async_engine(dsn, echo=echo, poolclass=StaticPool)

    return create_async_engine(
        dsn,
        echo=echo,
        pool_size=pool_size,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
    )
