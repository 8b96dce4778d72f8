"""Shared fixtures: a RankStore in a temp dir, an in-memory library, an HTTP client."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from advanced_sorting.dependencies import get_library_provider, get_rank_store
from advanced_sorting.main import create_app
from advanced_sorting.services.library import LibraryItem, MediaSourceInfo, MediaStreamInfo
from advanced_sorting.stores.rank_store import RankStore


class FakeLibrary:
    """Library provider returning a fixed list of items."""

    def __init__(self, items: list[LibraryItem]):
        self.items = items

    async def get_movie_items(self) -> list[LibraryItem]:
        return list(self.items)


def make_movie(
    item_id: str,
    *,
    imdb_id: str | None = None,
    rating: float | None = None,
    size: int | None = None,
    bitrate: int | None = None,
    video_bitrate: int | None = None,
    year: int | None = 2000,
) -> LibraryItem:
    streams: tuple[MediaStreamInfo, ...] = ()
    if video_bitrate is not None:
        streams = (
            MediaStreamInfo(stream_type="Audio", bit_rate=640_000),
            MediaStreamInfo(stream_type="Video", bit_rate=video_bitrate),
        )
    sources: tuple[MediaSourceInfo, ...] = ()
    if size is not None or bitrate is not None or streams:
        sources = (MediaSourceInfo(size=size, bitrate=bitrate, streams=streams),)
    return LibraryItem(
        id=item_id,
        name=f"Movie {item_id}",
        production_year=year,
        community_rating=rating,
        provider_ids={"Imdb": imdb_id} if imdb_id else {},
        media_sources=sources,
    )


@pytest.fixture
def rank_file(tmp_path: Path) -> Path:
    return tmp_path / "plugins" / "configurations" / "AdvancedSorting_ImdbTop250.json"


@pytest.fixture
def rank_store(rank_file: Path) -> RankStore:
    return RankStore(rank_file)


@pytest.fixture
def library() -> FakeLibrary:
    return FakeLibrary(
        [
            make_movie("a", imdb_id="tt0068646", rating=9.2, size=4_000, bitrate=5_000_000, video_bitrate=4_500_000),
            make_movie("b", imdb_id="tt9999999", rating=6.1, size=9_000, bitrate=2_000_000),
            make_movie("c", imdb_id="TT0111161", rating=9.3, size=1_000, bitrate=8_000_000, video_bitrate=7_000_000),
            make_movie("d", rating=None, size=None, bitrate=None),
            make_movie("e", imdb_id="tt0071315", rating=8.1, size=2_500, bitrate=3_000_000),
        ]
    )


@pytest.fixture
def app(rank_store: RankStore, library: FakeLibrary):
    app = create_app()
    app.dependency_overrides[get_rank_store] = lambda: rank_store
    app.dependency_overrides[get_library_provider] = lambda: library
    return app


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
