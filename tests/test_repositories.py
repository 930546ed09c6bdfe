"""
Contract Tests for Repositories

Одни и те же сценарии для SQL и in-memory адаптеров
(fixture repository параметризована).
"""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain import (
    Channel,
    CreateFailedError,
    DraftChannel,
    DraftVideo,
    Url,
    ValidationFailedError,
    WriteFailedError,
)


# ============================================================================
# Tests for ChannelRepository
# ============================================================================

class TestChannelRepository:
    """Тесты контракта ChannelRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, repository, draft_channel):
        """Базовый сценарий: create -> find_by_id."""
        await repository.channels.create(draft_channel)

        channel = await repository.channels.find_by_id("foo")

        assert isinstance(channel, Channel)
        assert channel.channel_id == "foo"
        assert channel.name == "bar"
        assert channel.icon_url.value == "https://example.com"
        assert str(channel.icon_url) == "https://example.com"
        assert channel.id is not None

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, repository):
        """Отсутствие строки - это None, а не ошибка."""
        assert await repository.channels.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_missing_after_create(self, repository, draft_channel):
        await repository.channels.create(draft_channel)
        assert await repository.channels.find_by_id("other") is None

    @pytest.mark.asyncio
    async def test_create_with_explicit_id(self, repository):
        draft = DraftChannel(
            channel_id="explicit",
            name="Explicit",
            icon_url=Url.parse("https://example.com/icon.png"),
            id=42,
        )

        await repository.channels.create(draft)

        channel = await repository.channels.find_by_id("explicit")
        assert channel.id == 42

    @pytest.mark.asyncio
    async def test_generated_id_follows_explicit_id(self, repository):
        """Автоматический id не совпадает с ранее заданным явно."""
        await repository.channels.create(DraftChannel(
            channel_id="a", name="A", icon_url=Url.parse("https://example.com/a.png"), id=1
        ))
        await repository.channels.create(DraftChannel(
            channel_id="b", name="B", icon_url=Url.parse("https://example.com/b.png")
        ))

        first = await repository.channels.find_by_id("a")
        second = await repository.channels.find_by_id("b")
        assert first.id == 1
        assert second.id > 1

    @pytest.mark.asyncio
    async def test_duplicate_channel_id_rejected(self, repository, draft_channel):
        """Повторный channel_id - CreateFailed, хранилище не меняется."""
        await repository.channels.create(draft_channel)

        duplicate = DraftChannel(
            channel_id="foo",
            name="another name",
            icon_url=Url.parse("https://other.example.com"),
        )
        with pytest.raises(CreateFailedError) as exc_info:
            await repository.channels.create(duplicate)

        assert isinstance(exc_info.value, WriteFailedError)

        channel = await repository.channels.find_by_id("foo")
        assert channel.name == "bar"
        assert str(channel.icon_url) == "https://example.com"
        assert len(await repository.channels.search_by_name("")) == 1

    @pytest.mark.asyncio
    async def test_search_by_name(self, repository):
        for channel_id, name in [("a", "Lo-fi beats"), ("b", "Jazz beats"), ("c", "News")]:
            await repository.channels.create(DraftChannel(
                channel_id=channel_id,
                name=name,
                icon_url=Url.parse(f"https://example.com/{channel_id}.png"),
            ))

        found = await repository.channels.search_by_name("beats")

        assert [c.channel_id for c in found] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, repository, draft_channel):
        await repository.channels.create(draft_channel)

        found = await repository.channels.search_by_name("BAR")
        assert [c.channel_id for c in found] == ["foo"]

    @pytest.mark.asyncio
    async def test_search_no_match_returns_empty(self, repository, draft_channel):
        await repository.channels.create(draft_channel)

        assert await repository.channels.search_by_name("nothing") == []

    @pytest.mark.asyncio
    async def test_search_wildcards_are_literal(self, repository, draft_channel):
        """% и _ в запросе ищутся как обычные символы."""
        await repository.channels.create(draft_channel)

        assert await repository.channels.search_by_name("%") == []
        assert await repository.channels.search_by_name("b_r") == []


# ============================================================================
# Tests for VideoRepository
# ============================================================================

class TestVideoRepository:
    """Тесты контракта VideoRepository."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, repository, make_video):
        await repository.videos.create(make_video(1))

        videos = await repository.videos.list(limit=10, offset=0)

        assert len(videos) == 1
        assert videos[0].video_id == "v1"
        assert str(videos[0].thumbnail_url) == "https://img.example.com/1.jpg"

    @pytest.mark.asyncio
    async def test_limit_zero_returns_empty(self, repository, make_video):
        await repository.videos.create(make_video(1))

        assert await repository.videos.list(limit=0, offset=0) == []
        assert await repository.videos.list_by_channel("foo", limit=0, offset=0) == []

    @pytest.mark.asyncio
    async def test_offset_beyond_dataset_returns_empty(self, repository, make_video):
        for n in range(3):
            await repository.videos.create(make_video(n))

        assert await repository.videos.list(limit=10, offset=3) == []
        assert await repository.videos.list(limit=10, offset=100) == []

    @pytest.mark.asyncio
    async def test_contiguous_windows_cover_dataset(self, repository, make_video):
        """Соседние окна не теряют и не дублируют строки."""
        for n in range(7):
            await repository.videos.create(make_video(n))

        full = await repository.videos.list(limit=100, offset=0)

        paged = []
        for offset in range(0, 9, 3):
            paged.extend(await repository.videos.list(limit=3, offset=offset))

        assert [v.video_id for v in paged] == [v.video_id for v in full]
        assert len({v.id for v in paged}) == 7

    @pytest.mark.asyncio
    async def test_list_by_channel(self, repository, make_video):
        await repository.videos.create(make_video(1, channel_id="foo"))
        await repository.videos.create(make_video(2, channel_id="other"))
        await repository.videos.create(make_video(3, channel_id="foo"))

        videos = await repository.videos.list_by_channel("foo", limit=10, offset=0)
        assert [v.video_id for v in videos] == ["v1", "v3"]

        second_page = await repository.videos.list_by_channel("foo", limit=1, offset=1)
        assert [v.video_id for v in second_page] == ["v3"]

    @pytest.mark.asyncio
    async def test_list_by_unknown_channel(self, repository, make_video):
        await repository.videos.create(make_video(1))

        assert await repository.videos.list_by_channel("unknown", limit=10, offset=0) == []

    @pytest.mark.asyncio
    async def test_published_at_keeps_instant_and_timezone(self, repository):
        """Время публикации возвращается в UTC тем же моментом."""
        moscow = timezone(timedelta(hours=3))
        await repository.videos.create(DraftVideo(
            video_id="utc", channel_id="foo", title="UTC",
            published_at=datetime(2024, 1, 1, 12, tzinfo=timezone.utc),
        ))
        await repository.videos.create(DraftVideo(
            video_id="msk", channel_id="foo", title="MSK",
            published_at=datetime(2024, 1, 1, 15, tzinfo=moscow),
        ))

        videos = await repository.videos.list(limit=10, offset=0)

        for video in videos:
            assert video.published_at == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
            assert video.published_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_duplicate_video_rejected(self, repository, make_video):
        await repository.videos.create(make_video(1))

        with pytest.raises(CreateFailedError):
            await repository.videos.create(make_video(1))

        assert len(await repository.videos.list(limit=10, offset=0)) == 1

    @pytest.mark.asyncio
    async def test_negative_pagination_rejected(self, repository):
        with pytest.raises(ValidationFailedError):
            await repository.videos.list(limit=-1, offset=0)

        with pytest.raises(ValidationFailedError):
            await repository.videos.list_by_channel("foo", limit=1, offset=-1)


# ============================================================================
# Tests for SongRepository
# ============================================================================

class TestSongRepository:
    """Тесты контракта SongRepository (songs засеяны из sample_songs)."""

    @pytest.mark.asyncio
    async def test_search_without_filters(self, repository):
        """Без фильтров - обычный постраничный список."""
        songs = await repository.songs.search(title=None, channel_name=None, limit=10, offset=0)

        assert [s.id for s in songs] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_search_without_filters_respects_limit(self, repository):
        songs = await repository.songs.search(limit=2, offset=1)
        assert [s.id for s in songs] == [2, 3]

    @pytest.mark.asyncio
    async def test_search_by_title(self, repository):
        songs = await repository.songs.search(title="intro", limit=10, offset=0)

        assert [s.title for s in songs] == ["Intro", "Intro (live)"]

    @pytest.mark.asyncio
    async def test_search_by_channel_name(self, repository):
        songs = await repository.songs.search(channel_name="baz", limit=10, offset=0)

        assert [s.id for s in songs] == [3, 4]

    @pytest.mark.asyncio
    async def test_filters_combine_with_and(self, repository):
        songs = await repository.songs.search(title="intro", channel_name="baz", limit=10, offset=0)

        assert [s.title for s in songs] == ["Intro (live)"]

    @pytest.mark.asyncio
    async def test_search_no_match(self, repository):
        assert await repository.songs.search(title="missing", limit=10, offset=0) == []
