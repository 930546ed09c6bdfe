"""
Song Repository Interface

Абстрактный контракт поиска песен (только чтение).
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.domain.entities import Song


class SongRepository(ABC):
    """Контракт хранилища песен."""

    @abstractmethod
    async def search(
        self,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
        limit: int = 10,
        offset: int = 0
    ) -> List[Song]:
        """
        Поиск песен.

        Оба фильтра необязательны и объединяются через AND.
        Без фильтров - обычный постраничный список.

        Args:
            title: Подстрока названия (без учёта регистра)
            channel_name: Точное имя канала
            limit: Размер страницы
            offset: Сдвиг

        Returns:
            Список песен
        """
        pass
