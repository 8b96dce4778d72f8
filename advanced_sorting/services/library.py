"""Media library access.

The sorting code works on plain `LibraryItem` snapshots, never on ORM rows.
`DatabaseLibraryProvider` reads them from the catalog; tests plug in their own
provider through the same protocol.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from advanced_sorting.models import LibraryItemRecord, MediaSourceRecord
from advanced_sorting.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")

MOVIE_ITEM_TYPE = "Movie"


@dataclass(frozen=True)
class MediaStreamInfo:
    stream_type: str
    bit_rate: int | None = None


@dataclass(frozen=True)
class MediaSourceInfo:
    size: int | None = None
    bitrate: int | None = None
    streams: tuple[MediaStreamInfo, ...] = ()


@dataclass(frozen=True)
class LibraryItem:
    id: str
    name: str | None = None
    production_year: int | None = None
    community_rating: float | None = None
    size: int | None = None
    provider_ids: dict[str, str] = field(default_factory=dict)
    media_sources: tuple[MediaSourceInfo, ...] = ()


class LibraryProvider(Protocol):
    async def get_movie_items(self) -> list[LibraryItem]:
        ...


def parse_provider_ids(raw: str | None) -> dict[str, str]:
    """Parse the provider_ids_json column.

    Malformed JSON or non-object values yield an empty mapping.
    """
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(k): str(v) for k, v in data.items() if v is not None}


def _to_library_item(record: LibraryItemRecord) -> LibraryItem:
    sources = tuple(
        MediaSourceInfo(
            size=source.size,
            bitrate=source.bitrate,
            streams=tuple(
                MediaStreamInfo(stream_type=stream.stream_type, bit_rate=stream.bit_rate)
                for stream in source.streams
            ),
        )
        for source in record.media_sources
    )
    return LibraryItem(
        id=record.item_id,
        name=record.name,
        production_year=record.production_year,
        community_rating=record.community_rating,
        size=record.size,
        provider_ids=parse_provider_ids(record.provider_ids_json),
        media_sources=sources,
    )


class DatabaseLibraryProvider:
    """Reads non-virtual movies from the library catalog."""

    async def get_movie_items(self) -> list[LibraryItem]:
        query = (
            select(LibraryItemRecord)
            .where(LibraryItemRecord.item_type == MOVIE_ITEM_TYPE)
            .where(LibraryItemRecord.is_virtual.is_(False))
            .options(
                selectinload(LibraryItemRecord.media_sources).selectinload(MediaSourceRecord.streams)
            )
            .order_by(LibraryItemRecord.id)
        )

        async with get_session() as session:
            result = await session.execute(query)
            records = result.scalars().all()
            items = [_to_library_item(record) for record in records]

        logger.debug(f"Loaded {len(items)} movie items from library")
        return items
