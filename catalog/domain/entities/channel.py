"""
Channel Entity

Доменная модель канала и черновик для создания.
"""

from dataclasses import dataclass
from typing import Optional

from catalog.domain.value_objects import Url


@dataclass(frozen=True)
class Channel:
    """
    Канал каталога.

    id - суррогатный ключ, выданный хранилищем.
    channel_id - внешний (натуральный) ключ, уникален среди всех каналов.
    icon_url всегда валиден (Url проверяет себя при создании).
    """

    id: int
    channel_id: str
    name: str
    icon_url: Url

    def to_dict(self) -> dict:
        """Преобразует entity в словарь для передачи между слоями."""
        return {
            "id": self.id,
            "channel_id": self.channel_id,
            "name": self.name,
            "icon_url": str(self.icon_url),
        }

    def __str__(self) -> str:
        return f"Channel({self.channel_id}, {self.name!r})"


@dataclass(frozen=True)
class DraftChannel:
    """
    Черновик канала - ещё не сохранённая запись.

    Содержит только поля, которые задаёт вызывающий.
    id опционален: если не указан, его назначит хранилище.
    """

    channel_id: str
    name: str
    icon_url: Url
    id: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "channel_id": self.channel_id,
            "name": self.name,
            "icon_url": str(self.icon_url),
        }
        if self.id is not None:
            data["id"] = self.id
        return data
