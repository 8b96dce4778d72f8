"""Sorting service for library items.

Orderings:
- Bitrate, file size, community rating: descending by default (largest first)
- IMDb Top rank: ascending (rank 1 first), unranked items last or filtered out

All sorts are stable, so items with equal keys keep library order.
"""

from collections.abc import Callable, Iterable

from advanced_sorting.schemas import SortedItemResult
from advanced_sorting.services.library import LibraryItem
from advanced_sorting.services.sort_keys import (
    format_bitrate,
    format_file_size,
    get_community_rating,
    get_file_size,
    get_imdb_id,
    get_video_bitrate,
)
from advanced_sorting.stores.rank_store import RankStore


def _sort_and_take(
    results: Iterable[SortedItemResult],
    ascending: bool,
    limit: int,
) -> list[SortedItemResult]:
    ordered = sorted(results, key=lambda r: r.sort_value, reverse=not ascending)
    return ordered[: max(limit, 0)]


def _build_results(
    items: Iterable[LibraryItem],
    value_fn: Callable[[LibraryItem], int],
    display_fn: Callable[[LibraryItem, int], str],
) -> list[SortedItemResult]:
    results = []
    for item in items:
        value = value_fn(item)
        results.append(
            SortedItemResult(
                id=item.id,
                name=item.name,
                year=item.production_year,
                sort_value=value,
                sort_display_value=display_fn(item, value),
            )
        )
    return results


def sort_by_bitrate(
    items: Iterable[LibraryItem],
    ascending: bool = False,
    limit: int = 100,
) -> list[SortedItemResult]:
    """Sort items by video bitrate.

    Args:
        items: Library items.
        ascending: Lowest first if True.
        limit: Maximum number of results.

    Returns:
        Sorted results with "x.y Mbps" style display values.
    """
    results = _build_results(
        items,
        get_video_bitrate,
        lambda _item, value: format_bitrate(value),
    )
    return _sort_and_take(results, ascending, limit)


def sort_by_file_size(
    items: Iterable[LibraryItem],
    ascending: bool = False,
    limit: int = 100,
) -> list[SortedItemResult]:
    """Sort items by file size (largest first unless ascending)."""
    results = _build_results(
        items,
        get_file_size,
        lambda _item, value: format_file_size(value),
    )
    return _sort_and_take(results, ascending, limit)


def sort_by_community_rating(
    items: Iterable[LibraryItem],
    ascending: bool = False,
    limit: int = 100,
) -> list[SortedItemResult]:
    """Sort items by community rating.

    The sort value is the rating scaled by 10 and truncated (7.85 -> 78).
    """
    results = _build_results(
        items,
        lambda item: int(get_community_rating(item) * 10),
        lambda item, _value: f"{get_community_rating(item):.1f}",
    )
    return _sort_and_take(results, ascending, limit)


def sort_by_imdb_top_rank(
    items: Iterable[LibraryItem],
    store: RankStore,
    include_unranked: bool = False,
    limit: int = 250,
) -> list[SortedItemResult]:
    """Sort items by IMDb Top rank.

    Args:
        items: Library items.
        store: IMDb Top list store.
        include_unranked: Keep items that are not on the list (sorted to the end).
        limit: Maximum number of results.

    Returns:
        Results ordered by rank ascending; unranked results have sortValue 0
        and display "Not ranked".
    """
    ranked: list[tuple[int | None, str | None, LibraryItem]] = []
    for item in items:
        imdb_id = get_imdb_id(item)
        rank = store.get_rank(imdb_id) if imdb_id else None
        if rank is None and not include_unranked:
            continue
        ranked.append((rank, imdb_id, item))

    # Unranked after every ranked item, whatever the stored rank values are
    ranked.sort(key=lambda entry: (entry[0] is None, entry[0] or 0))

    results = []
    for rank, imdb_id, item in ranked[: max(limit, 0)]:
        is_ranked = rank is not None
        results.append(
            SortedItemResult(
                id=item.id,
                name=item.name,
                year=item.production_year,
                sort_value=rank if is_ranked else 0,
                sort_display_value=f"#{rank}" if is_ranked else "Not ranked",
                imdb_id=imdb_id,
            )
        )
    return results
