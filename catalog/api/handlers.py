"""
HTTP Handlers

Тонкий транспорт: разбирает запрос в schemas, вызывает контракт
репозитория и сериализует результат. Ошибки обрабатывает middleware.
"""

from aiohttp import web

from catalog.core.config import Config
from catalog.db.repositories import RepositoryFacade
from catalog.domain import ChannelNotFoundError, Pagination, ValidationFailedError
from catalog.schemas import (
    ChannelCreateSchema,
    ChannelResponseSchema,
    PageQuerySchema,
    SongResponseSchema,
    SongSearchSchema,
    VideoCreateSchema,
    VideoResponseSchema,
)


class CatalogHandlers:
    """Обработчики HTTP API каталога."""

    def __init__(self, repository: RepositoryFacade, config: Config):
        self._repository = repository
        self._config = config

    def _pagination(self, request: web.Request) -> Pagination:
        query = PageQuerySchema.model_validate(dict(request.query))
        return query.to_pagination(self._config.default_page_size, self._config.max_page_size)

    # -------------------------
    # CHANNELS
    # -------------------------

    async def create_channel(self, request: web.Request) -> web.Response:
        payload = ChannelCreateSchema.model_validate_json(await request.text())
        await self._repository.channels.create(payload.to_domain())
        return web.json_response({}, status=201)

    async def get_channel(self, request: web.Request) -> web.Response:
        channel_id = request.match_info["channel_id"]
        channel = await self._repository.channels.find_by_id(channel_id)
        if channel is None:
            raise ChannelNotFoundError(channel_id)
        return web.json_response(ChannelResponseSchema.from_entity(channel).model_dump(mode="json"))

    async def search_channels(self, request: web.Request) -> web.Response:
        name = request.query.get("name")
        if name is None:
            raise ValidationFailedError("Query parameter 'name' is required", {"param": "name"})

        channels = await self._repository.channels.search_by_name(name)
        return web.json_response([
            ChannelResponseSchema.from_entity(c).model_dump(mode="json") for c in channels
        ])

    # -------------------------
    # VIDEOS
    # -------------------------

    async def list_videos(self, request: web.Request) -> web.Response:
        page = self._pagination(request)
        videos = await self._repository.videos.list(page.limit, page.offset)
        return web.json_response([
            VideoResponseSchema.from_entity(v).model_dump(mode="json") for v in videos
        ])

    async def list_channel_videos(self, request: web.Request) -> web.Response:
        page = self._pagination(request)
        videos = await self._repository.videos.list_by_channel(
            request.match_info["channel_id"], page.limit, page.offset
        )
        return web.json_response([
            VideoResponseSchema.from_entity(v).model_dump(mode="json") for v in videos
        ])

    async def create_video(self, request: web.Request) -> web.Response:
        payload = VideoCreateSchema.model_validate_json(await request.text())
        await self._repository.videos.create(payload.to_domain())
        return web.json_response({}, status=201)

    # -------------------------
    # SONGS
    # -------------------------

    async def search_songs(self, request: web.Request) -> web.Response:
        query = SongSearchSchema.model_validate(dict(request.query))
        page = query.to_pagination(self._config.default_page_size, self._config.max_page_size)
        songs = await self._repository.songs.search(
            title=query.title,
            channel_name=query.channel_name,
            limit=page.limit,
            offset=page.offset,
        )
        return web.json_response([
            SongResponseSchema.from_entity(s).model_dump(mode="json") for s in songs
        ])
