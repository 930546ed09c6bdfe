"""
Pytest Configuration and Fixtures

Общие fixtures для всех тестов.
"""

import pytest
import pytest_asyncio

from catalog.core.config import Config
from catalog.core.container import reset_container
from catalog.db.database import create_engine, create_session_maker
from catalog.db.models import SongRecord, init_models
from catalog.db.repositories import RepositoryFacade
from catalog.domain import DraftChannel, DraftVideo, Song, Url

SQLITE_DSN = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def reset_di():
    """Сбрасываем DI контейнер перед каждым тестом."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_config():
    """Конфигурация с in-memory SQLite."""
    return Config(postgres_dsn=SQLITE_DSN, default_page_size=5, max_page_size=10)


@pytest_asyncio.fixture
async def engine():
    """Свежая in-memory база с созданными таблицами."""
    engine = create_engine(SQLITE_DSN)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
def sample_songs():
    """Пример песен (таблица songs только для чтения)."""
    return [
        Song(id=1, title="Intro", channel_name="bar", artist="A"),
        Song(id=2, title="Outro", channel_name="bar", artist="B"),
        Song(id=3, title="Intro (live)", channel_name="baz"),
        Song(id=4, title="Interlude", channel_name="baz"),
    ]


async def seed_songs(session_maker, songs):
    async with session_maker() as session:
        session.add_all([
            SongRecord(
                id=s.id,
                title=s.title,
                channel_name=s.channel_name,
                artist=s.artist,
                video_id=s.video_id,
            )
            for s in songs
        ])
        await session.commit()


@pytest_asyncio.fixture(params=["sql", "memory"])
async def repository(request, sample_songs):
    """
    RepositoryFacade для обоих адаптеров.

    Тесты контракта прогоняются и на SQL, и на in-memory реализации.
    """
    if request.param == "memory":
        yield RepositoryFacade.in_memory(sample_songs)
        return

    engine = create_engine(SQLITE_DSN)
    await init_models(engine)
    session_maker = create_session_maker(engine)
    await seed_songs(session_maker, sample_songs)

    yield RepositoryFacade.from_session_maker(session_maker)

    await engine.dispose()


@pytest.fixture
def draft_channel():
    """Канал из базового сценария."""
    return DraftChannel(
        channel_id="foo",
        name="bar",
        icon_url=Url.parse("https://example.com"),
    )


@pytest.fixture
def make_video():
    """Фабрика черновиков видео."""
    def factory(n: int, channel_id: str = "foo") -> DraftVideo:
        return DraftVideo(
            video_id=f"v{n}",
            channel_id=channel_id,
            title=f"Video {n}",
            thumbnail_url=Url.parse(f"https://img.example.com/{n}.jpg"),
        )
    return factory
