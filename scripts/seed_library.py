#!/usr/bin/env python3
"""Seed the library catalog with demo movies.

Creates:
- A handful of movies with IMDb provider IDs (some on the default Top list, some not)
- One media source per movie with size and container bitrate
- Video/audio streams so bitrate sorting has a video stream to read

Seed script is idempotent (skips movies whose name already exists).

Usage:
    python -m scripts.seed_library
"""

import asyncio
import json
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from advanced_sorting.models import LibraryItemRecord, MediaSourceRecord, MediaStreamRecord
from advanced_sorting.stores.postgres import close_db, get_session, init_db

load_dotenv()

DEMO_MOVIES = [
    {
        "name": "The Shawshank Redemption",
        "year": 1994,
        "rating": 8.7,
        "imdb": "tt0111161",
        "size": 14_500_000_000,
        "bitrate": 12_800_000,
        "video_bitrate": 11_900_000,
    },
    {
        "name": "The Dark Knight",
        "year": 2008,
        "rating": 8.5,
        "imdb": "tt0468569",
        "size": 38_200_000_000,
        "bitrate": 31_000_000,
        "video_bitrate": 28_500_000,
    },
    {
        "name": "Pulp Fiction",
        "year": 1994,
        "rating": 8.5,
        "imdb": "tt0110912",
        "size": 9_800_000_000,
        "bitrate": 8_600_000,
        "video_bitrate": None,  # only the container bitrate is known
    },
    {
        "name": "Chinatown",
        "year": 1974,
        "rating": 7.9,
        "imdb": "tt0071315",
        "size": 4_300_000_000,
        "bitrate": 4_900_000,
        "video_bitrate": 4_400_000,
    },
    {
        "name": "Paddington 2",
        "year": 2017,
        "rating": 7.8,
        "imdb": "tt4468740",
        "size": 6_100_000_000,
        "bitrate": 7_200_000,
        "video_bitrate": 6_800_000,
    },
    {
        "name": "Home Video 2019",
        "year": 2019,
        "rating": None,
        "imdb": None,
        "size": 850_000_000,
        "bitrate": 2_100_000,
        "video_bitrate": 1_900_000,
    },
]


async def seed_movies(session: AsyncSession) -> None:
    """Seed demo movies with sources and streams."""
    for movie in DEMO_MOVIES:
        result = await session.execute(
            select(LibraryItemRecord).where(LibraryItemRecord.name == movie["name"])
        )
        if result.scalar_one_or_none():
            print(f"  skip {movie['name']} (exists)")
            continue

        streams = [MediaStreamRecord(stream_index=1, stream_type="Audio", codec="ac3", bit_rate=640_000)]
        if movie["video_bitrate"] is not None:
            streams.insert(
                0,
                MediaStreamRecord(stream_index=0, stream_type="Video", codec="hevc", bit_rate=movie["video_bitrate"]),
            )

        provider_ids = {"Imdb": movie["imdb"]} if movie["imdb"] else {}
        item = LibraryItemRecord(
            item_type="Movie",
            name=movie["name"],
            production_year=movie["year"],
            community_rating=movie["rating"],
            provider_ids_json=json.dumps(provider_ids),
            is_virtual=False,
            media_sources=[
                MediaSourceRecord(
                    position=0,
                    size=movie["size"],
                    bitrate=movie["bitrate"],
                    streams=streams,
                )
            ],
        )
        session.add(item)
        print(f"  added {movie['name']}")


async def seed_database() -> None:
    await init_db()
    try:
        async with get_session() as session:
            print("Seeding library catalog...")
            await seed_movies(session)
        print("Done.")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(seed_database())
