"""
Channel Repository Interface

Абстрактный контракт доступа к каналам.
Реализации находятся в слое catalog.db.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.domain.entities import Channel, DraftChannel


class ChannelRepository(ABC):
    """
    Контракт хранилища каналов.

    Ключ поиска - натуральный channel_id (уникален).
    Все методы независимы друг от друга и могут выполняться конкурентно.
    """

    @abstractmethod
    async def find_by_id(self, channel_id: str) -> Optional[Channel]:
        """
        Найти канал по channel_id.

        Args:
            channel_id: Внешний идентификатор канала

        Returns:
            Channel или None, если строки нет

        Raises:
            StorageUnavailableError: хранилище недоступно
            DecodeFailedError: строка найдена, но не восстанавливается
        """
        pass

    @abstractmethod
    async def search_by_name(self, name: str) -> List[Channel]:
        """
        Поиск каналов по подстроке в названии.

        Строки, которые не удалось декодировать, пропускаются,
        чтобы одна испорченная запись не скрывала остальные.

        Args:
            name: Подстрока названия

        Returns:
            Список каналов (пустой, если совпадений нет)
        """
        pass

    @abstractmethod
    async def create(self, draft: DraftChannel) -> None:
        """
        Создать канал из черновика.

        Args:
            draft: DraftChannel

        Raises:
            CreateFailedError: вставка отклонена или не затронула строк
        """
        pass
