from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    postgres_dsn: str = "postgresql+asyncpg://localhost/catalog"
    db_echo: bool = False
    db_pool_size: int = 5
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # Политика пагинации транспортного слоя (ядро максимум не задаёт)
    default_page_size: int = 20
    max_page_size: int = 100

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def validate_config(cfg: "Config" = None) -> None:
    """
    Базовая валидация обязательных полей и диапазонов.
    Бросает ValueError при проблемах.
    """
    cfg = cfg or config
    missing = []
    for field in ["postgres_dsn", "http_host"]:
        if not getattr(cfg, field, None):
            missing.append(field)
    if missing:
        raise ValueError(f"Missing required settings: {', '.join(missing)}")

    if not 0 < cfg.http_port < 65536:
        raise ValueError("http_port must be in range 1-65535")

    if cfg.max_page_size <= 0:
        raise ValueError("max_page_size must be positive")

    if not 0 <= cfg.default_page_size <= cfg.max_page_size:
        raise ValueError("default_page_size must be in range 0..max_page_size")


config = Config()
