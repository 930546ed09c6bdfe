"""
Dependency Injection Container

Простой DI контейнер: собирает engine, фабрику сессий
и application handle (RepositoryFacade) из конфигурации.
"""

from typing import Optional, Callable, Any
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from catalog.core.config import Config
from catalog.db.database import create_engine, create_session_maker
from catalog.db.repositories import RepositoryFacade


class Container:
    """
    DI Container для управления зависимостями.

    Реализует паттерн Service Locator с lazy initialization.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Args:
            config: Конфигурация приложения (по умолчанию создается из .env)
        """
        self._config = config
        self._singletons = {}
        self._factories = {}

        # Регистрация провайдеров
        self._register_providers()

    def _register_providers(self):
        """Регистрация всех провайдеров."""

        # Config (singleton)
        self._register_singleton('config', lambda: self._get_config())

        # Logger factory (каждый раз новый logger с разным именем)
        self._register_factory('logger', lambda name='catalog': self._create_logger(name))

        # Storage (singleton, общий пул соединений)
        self._register_singleton(
            'engine',
            lambda: create_engine(
                self.config.postgres_dsn,
                echo=self.config.db_echo,
                pool_size=self.config.db_pool_size,
            )
        )
        self._register_singleton('session_maker', lambda: create_session_maker(self.get('engine')))

        # Repositories (singleton)
        self._register_singleton(
            'repository_facade',
            lambda: RepositoryFacade.from_session_maker(self.get('session_maker'))
        )

    def _register_singleton(self, name: str, provider: Callable):
        """
        Регистрация singleton (создается один раз).

        Args:
            name: Имя зависимости
            provider: Функция-провайдер
        """
        self._factories[name] = ('singleton', provider)

    def _register_factory(self, name: str, provider: Callable):
        """
        Регистрация factory (создается каждый раз).

        Args:
            name: Имя зависимости
            provider: Функция-провайдер
        """
        self._factories[name] = ('factory', provider)

    def get(self, name: str, *args, **kwargs) -> Any:
        """
        Получить зависимость.

        Raises:
            KeyError: если зависимость не зарегистрирована
        """
        if name not in self._factories:
            raise KeyError(f"Dependency '{name}' not registered in container")

        scope, provider = self._factories[name]

        if scope == 'singleton':
            if name not in self._singletons:
                self._singletons[name] = provider()
            return self._singletons[name]

        return provider(*args, **kwargs)

    def _get_config(self) -> Config:
        if self._config is None:
            self._config = Config()
        return self._config

    def _create_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    async def dispose(self) -> None:
        """Закрыть пул соединений, если engine был создан."""
        self._singletons.pop('repository_facade', None)
        self._singletons.pop('session_maker', None)
        engine = self._singletons.pop('engine', None)
        if engine is not None:
            await engine.dispose()

    # Convenience methods для популярных зависимостей

    @property
    def config(self) -> Config:
        """Получить конфигурацию."""
        return self.get('config')

    def logger(self, name: str = 'catalog') -> logging.Logger:
        """Получить logger."""
        return self.get('logger', name)

    @property
    def engine(self) -> AsyncEngine:
        return self.get('engine')

    @property
    def session_maker(self) -> async_sessionmaker:
        return self.get('session_maker')

    @property
    def repository(self) -> RepositoryFacade:
        """Получить repository facade."""
        return self.get('repository_facade')


# Глобальный контейнер для точки входа процесса
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Получить глобальный DI контейнер.

    Returns:
        Container instance
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container():
    """
    Сбросить глобальный контейнер.

    Полезно для тестов.
    """
    global _container
    _container = None
