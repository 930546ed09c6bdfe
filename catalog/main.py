from aiohttp import web

from catalog.api import create_app
from catalog.core.config import validate_config
from catalog.core.container import get_container
from catalog.core.logging import setup_logging, get_logger

logger = get_logger(__name__)


def main():
    setup_logging()

    container = get_container()
    config = container.config
    validate_config(config)

    app = create_app(container.repository, config)

    async def close_storage(_app: web.Application) -> None:
        await container.dispose()

    app.on_cleanup.append(close_storage)

    logger.info("Starting catalog API on %s:%s", config.http_host, config.http_port)
    web.run_app(app, host=config.http_host, port=config.http_port)


if __name__ == "__main__":
    main()
