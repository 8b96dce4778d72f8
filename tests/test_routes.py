"""Tests for the /AdvancedSorting endpoints."""

from pathlib import Path

import pytest
from httpx import AsyncClient

from advanced_sorting.services.imdb_top_list import DEFAULT_IMDB_TOP_LIST
from advanced_sorting.settings import get_settings
from advanced_sorting.stores.rank_store import RankStore


@pytest.mark.asyncio
async def test_by_bitrate(client: AsyncClient):
    response = await client.get("/AdvancedSorting/ByBitrate", params={"limit": 2})
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data] == ["c", "a"]
    assert data[0]["sortValue"] == 7_000_000
    assert data[0]["sortDisplayValue"] == "7.0 Mbps"
    assert data[0]["name"] == "Movie c"
    assert data[0]["year"] == 2000


@pytest.mark.asyncio
async def test_by_file_size_ascending(client: AsyncClient):
    response = await client.get("/AdvancedSorting/ByFileSize", params={"ascending": "true"})
    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == ["d", "c", "e", "a", "b"]


@pytest.mark.asyncio
async def test_by_community_rating(client: AsyncClient):
    response = await client.get("/AdvancedSorting/ByCommunityRating")
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data] == ["c", "a", "e", "b", "d"]
    assert data[0]["sortDisplayValue"] == "9.3"


@pytest.mark.asyncio
async def test_negative_limit_rejected(client: AsyncClient):
    response = await client.get("/AdvancedSorting/ByBitrate", params={"limit": -1})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_by_imdb_top_rank(client: AsyncClient):
    response = await client.get("/AdvancedSorting/ByImdbTopRank")
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data] == ["c", "a", "e"]
    assert [d["sortDisplayValue"] for d in data] == ["#1", "#2", "#100"]
    assert data[1]["imdbId"] == "tt0068646"


@pytest.mark.asyncio
async def test_by_imdb_top_rank_include_unranked(client: AsyncClient):
    response = await client.get(
        "/AdvancedSorting/ByImdbTopRank",
        params={"includeUnranked": "true", "limit": 10},
    )
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data] == ["c", "a", "e", "b", "d"]
    assert data[-1]["sortDisplayValue"] == "Not ranked"


@pytest.mark.asyncio
async def test_by_imdb_top_rank_disabled(client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(get_settings(), "enable_imdb_top_sorting", False)

    response = await client.get("/AdvancedSorting/ByImdbTopRank")
    assert response.status_code == 404
    assert response.json()["detail"]["error"]["code"] == "FEATURE_DISABLED"


@pytest.mark.asyncio
async def test_status(client: AsyncClient, rank_store: RankStore):
    response = await client.get("/AdvancedSorting/ImdbTopList/Status")
    assert response.status_code == 200
    data = response.json()
    assert data["entryCount"] == len(DEFAULT_IMDB_TOP_LIST)
    assert data["lastUpdated"].startswith(str(rank_store.last_updated.year))


@pytest.mark.asyncio
async def test_update_replaces_list(client: AsyncClient, rank_store: RankStore, rank_file: Path):
    response = await client.post(
        "/AdvancedSorting/ImdbTopList/Update",
        json={"tt0000001": 1, "TT0000002": 2},
    )
    assert response.status_code == 200
    assert response.json()["entryCount"] == 2
    assert rank_store.get_all_ranks() == {"tt0000001": 1, "tt0000002": 2}
    assert RankStore(rank_file).get_rank("tt0000002") == 2

    # The new list drives sorting immediately
    response = await client.get("/AdvancedSorting/ByImdbTopRank")
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("kwargs", [{"json": {}}, {}])
async def test_update_rejects_empty_body(client: AsyncClient, rank_store: RankStore, kwargs: dict):
    response = await client.post("/AdvancedSorting/ImdbTopList/Update", **kwargs)
    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "INVALID_REQUEST"
    assert rank_store.count == len(DEFAULT_IMDB_TOP_LIST)


@pytest.mark.asyncio
async def test_update_rejects_non_integer_ranks(client: AsyncClient):
    response = await client.post("/AdvancedSorting/ImdbTopList/Update", json={"tt0000001": "first"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_reset(client: AsyncClient, rank_store: RankStore):
    rank_store.update_list({"tt0000001": 1})

    response = await client.post("/AdvancedSorting/ImdbTopList/Reset")
    assert response.status_code == 200
    assert response.json()["entryCount"] == len(DEFAULT_IMDB_TOP_LIST)
    assert rank_store.get_rank("tt0111161") == 1
