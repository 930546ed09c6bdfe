"""
Value Objects

Неизменяемые объекты со своей логикой и валидацией.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .exceptions import InvalidUrlError, ValidationFailedError


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


@dataclass(frozen=True, order=True)
class Url:
    """
    Value Object для абсолютного URL.

    Валидация выполняется при создании, поэтому экземпляр
    с некорректной строкой существовать не может:
    - Url("https://example.com") -> ok
    - Url("not a url") -> InvalidUrlError
    - Url("") -> InvalidUrlError

    Immutable: после создания изменить нельзя.
    Равенство, хеш и сортировка определяются строкой.
    """

    value: str

    def __post_init__(self):
        raw = self.value
        if not isinstance(raw, str):
            raise InvalidUrlError(str(raw), "Value must be a string")

        cleaned = raw.strip()
        _validate(raw, cleaned)

        # Храним строку без окружающих пробелов
        object.__setattr__(self, "value", cleaned)

    @classmethod
    def parse(cls, raw: str) -> "Url":
        """
        Создаёт Url из сырой строки.

        Args:
            raw: Строка с URL

        Returns:
            Url

        Raises:
            InvalidUrlError: если строка не является абсолютным URL
        """
        return cls(raw)

    @property
    def scheme(self) -> str:
        """Схема URL в нижнем регистре (https, http, ...)."""
        return urlsplit(self.value).scheme.lower()

    @property
    def host(self) -> str:
        """Хост URL."""
        return urlsplit(self.value).hostname or ""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Url({self.value!r})"


def _validate(raw: str, cleaned: str) -> None:
    """Проверяет схему, authority и отсутствие пробелов."""
    if not cleaned:
        raise InvalidUrlError(raw, "Value cannot be empty or whitespace")

    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in cleaned):
        raise InvalidUrlError(raw, "Value cannot contain whitespace or control characters")

    scheme, separator, _ = cleaned.partition("://")
    if not separator or not _SCHEME_RE.match(scheme):
        raise InvalidUrlError(raw, "Scheme and authority are required")

    try:
        parts = urlsplit(cleaned)
        # Порт проверяется лениво, поэтому обращаемся явно
        parts.port
    except ValueError as e:
        raise InvalidUrlError(raw, str(e)) from e

    if not parts.netloc or not parts.hostname:
        raise InvalidUrlError(raw, "Host is required")


@dataclass(frozen=True)
class Pagination:
    """
    Окно пагинации (limit/offset).

    Оба значения - неотрицательные целые. Максимум здесь не задаётся:
    ограничение размера страницы - политика конфигурации (см. capped).
    """

    limit: int
    offset: int = 0

    def __post_init__(self):
        for name in ("limit", "offset"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationFailedError(
                    f"{name} must be an integer",
                    {name: value}
                )
            if value < 0:
                raise ValidationFailedError(
                    f"{name} must be non-negative",
                    {name: value}
                )

    def capped(self, max_limit: int) -> "Pagination":
        """Возвращает окно с limit, ограниченным max_limit."""
        if self.limit <= max_limit:
            return self
        return Pagination(limit=max_limit, offset=self.offset)
