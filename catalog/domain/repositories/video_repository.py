"""
Video Repository Interface

Абстрактный контракт доступа к видео.
"""

from abc import ABC, abstractmethod
from typing import List

from catalog.domain.entities import Video, DraftVideo


class VideoRepository(ABC):
    """
    Контракт хранилища видео.

    Списки упорядочены по id и режутся окном limit/offset,
    поэтому соседние окна не пересекаются и не теряют строк.
    """

    @abstractmethod
    async def list_by_channel(self, channel_id: str, limit: int, offset: int) -> List[Video]:
        """
        Видео одного канала.

        Args:
            channel_id: channel_id канала
            limit: Размер страницы
            offset: Сдвиг

        Returns:
            Список видео (пустой для неизвестного канала)
        """
        pass

    @abstractmethod
    async def list(self, limit: int, offset: int) -> List[Video]:
        """
        Все видео без фильтра по каналу.

        Args:
            limit: Размер страницы
            offset: Сдвиг

        Returns:
            Список видео
        """
        pass

    @abstractmethod
    async def create(self, draft: DraftVideo) -> None:
        """
        Создать видео из черновика.

        Raises:
            CreateFailedError: вставка отклонена или не затронула строк
        """
        pass
