"""Sort-key derivation for library items.

Sort keys:
- Video bitrate: first source's first video stream, else the source bitrate
- File size: first source size, else the item's own size
- Community rating: missing ratings count as 0
- IMDb Top rank: rank from the store, else UNRANKED (sorts last ascending)
"""

import sys

from advanced_sorting.services.library import LibraryItem
from advanced_sorting.stores.rank_store import RankStore

IMDB_PROVIDER = "Imdb"

# Comparator sentinel for items without a rank
UNRANKED = sys.maxsize

VIDEO_STREAM_TYPE = "Video"


def get_video_bitrate(item: LibraryItem) -> int:
    """Video bitrate in bits per second, 0 if unknown."""
    if not item.media_sources:
        return 0
    source = item.media_sources[0]

    video_stream = next(
        (s for s in source.streams if s.stream_type == VIDEO_STREAM_TYPE),
        None,
    )
    if video_stream is not None and video_stream.bit_rate is not None:
        return video_stream.bit_rate
    return source.bitrate or 0


def get_file_size(item: LibraryItem) -> int:
    """File size in bytes, 0 if unknown."""
    if item.media_sources:
        size = item.media_sources[0].size
        if size is not None and size > 0:
            return size

    if item.size is not None and item.size > 0:
        return item.size

    return 0


def get_community_rating(item: LibraryItem) -> float:
    return item.community_rating or 0.0


def get_imdb_id(item: LibraryItem) -> str | None:
    """IMDb ID from the item's provider IDs. Provider names match case-insensitively."""
    imdb_id = item.provider_ids.get(IMDB_PROVIDER)
    if imdb_id is None:
        wanted = IMDB_PROVIDER.casefold()
        imdb_id = next(
            (value for key, value in item.provider_ids.items() if key.casefold() == wanted),
            None,
        )
    return imdb_id or None


def get_imdb_rank(item: LibraryItem, store: RankStore) -> int:
    """IMDb Top rank for an item.

    Returns:
        The rank (1 is best), or UNRANKED if the item has no IMDb ID or is not on the list.
    """
    imdb_id = get_imdb_id(item)
    if imdb_id is None:
        return UNRANKED

    rank = store.get_rank(imdb_id)
    return UNRANKED if rank is None else rank


def format_bitrate(bitrate: int) -> str:
    """Format bits per second, e.g. 8500000 -> "8.5 Mbps"."""
    if bitrate >= 1_000_000:
        return f"{bitrate / 1_000_000:.1f} Mbps"
    if bitrate >= 1_000:
        return f"{bitrate / 1_000:.0f} Kbps"
    return f"{bitrate} bps"


def format_file_size(size: int) -> str:
    """Format bytes with binary units, e.g. 1073741824 -> "1.00 GB"."""
    if size >= 1_073_741_824:
        return f"{size / 1_073_741_824:.2f} GB"
    if size >= 1_048_576:
        return f"{size / 1_048_576:.1f} MB"
    if size >= 1024:
        return f"{size / 1024:.0f} KB"
    return f"{size} bytes"
