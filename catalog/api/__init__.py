"""
HTTP API Layer

Транспорт зависит только от контрактов репозиториев и таксономии ошибок.
"""

from .app import create_app

__all__ = ["create_app"]
