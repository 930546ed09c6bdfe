from aiohttp import web

from catalog.api.handlers import CatalogHandlers
from catalog.api.middlewares import error_middleware
from catalog.core.config import Config
from catalog.db.repositories import RepositoryFacade


def create_app(repository: RepositoryFacade, config: Config) -> web.Application:
    """
    Собрать aiohttp приложение поверх готового RepositoryFacade.

    Facade передаётся явно: транспорт не создаёт хранилище сам.
    """
    handlers = CatalogHandlers(repository, config)

    app = web.Application(middlewares=[error_middleware])
    app.add_routes([
        web.post("/channels", handlers.create_channel),
        web.get("/channels", handlers.search_channels),
        web.get("/channels/{channel_id}", handlers.get_channel),
        web.get("/channels/{channel_id}/videos", handlers.list_channel_videos),
        web.get("/videos", handlers.list_videos),
        web.post("/videos", handlers.create_video),
        web.get("/songs", handlers.search_songs),
    ])
    return app
