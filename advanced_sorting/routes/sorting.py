"""Sorted library listings.

GET /AdvancedSorting/ByBitrate
GET /AdvancedSorting/ByFileSize
GET /AdvancedSorting/ByCommunityRating
GET /AdvancedSorting/ByImdbTopRank

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from advanced_sorting.dependencies import get_library_provider, get_rank_store
from advanced_sorting.schemas import ErrorResponse, SortedItemResult, error_body
from advanced_sorting.services.library import LibraryProvider
from advanced_sorting.services.sorting import (
    sort_by_bitrate,
    sort_by_community_rating,
    sort_by_file_size,
    sort_by_imdb_top_rank,
)
from advanced_sorting.settings import get_settings
from advanced_sorting.stores.rank_store import RankStore

router = APIRouter()


@router.get("/ByBitrate", response_model=list[SortedItemResult])
async def get_by_bitrate(
    ascending: bool = Query(default=False, description="Lowest bitrate first if true"),
    limit: int = Query(default=100, ge=0, description="Maximum number of results"),
    library: LibraryProvider = Depends(get_library_provider),
) -> list[SortedItemResult]:
    """Get movies sorted by video bitrate (highest first by default)."""
    items = await library.get_movie_items()
    return sort_by_bitrate(items, ascending=ascending, limit=limit)


@router.get("/ByFileSize", response_model=list[SortedItemResult])
async def get_by_file_size(
    ascending: bool = Query(default=False, description="Smallest file first if true"),
    limit: int = Query(default=100, ge=0, description="Maximum number of results"),
    library: LibraryProvider = Depends(get_library_provider),
) -> list[SortedItemResult]:
    """Get movies sorted by file size (largest first by default)."""
    items = await library.get_movie_items()
    return sort_by_file_size(items, ascending=ascending, limit=limit)


@router.get("/ByCommunityRating", response_model=list[SortedItemResult])
async def get_by_community_rating(
    ascending: bool = Query(default=False, description="Lowest rated first if true"),
    limit: int = Query(default=100, ge=0, description="Maximum number of results"),
    library: LibraryProvider = Depends(get_library_provider),
) -> list[SortedItemResult]:
    """Get movies sorted by community rating (highest rated first by default)."""
    items = await library.get_movie_items()
    return sort_by_community_rating(items, ascending=ascending, limit=limit)


@router.get(
    "/ByImdbTopRank",
    response_model=list[SortedItemResult],
    responses={404: {"model": ErrorResponse, "description": "IMDb Top sorting disabled"}},
)
async def get_by_imdb_top_rank(
    include_unranked: bool = Query(
        default=False,
        alias="includeUnranked",
        description="Include movies not on the IMDb Top list (sorted to the end)",
    ),
    limit: int = Query(default=250, ge=0, description="Maximum number of results"),
    library: LibraryProvider = Depends(get_library_provider),
    store: RankStore = Depends(get_rank_store),
) -> list[SortedItemResult]:
    """Get movies sorted by IMDb Top 250 rank.

    Raises:
        HTTPException 404: If IMDb Top sorting is disabled in settings.
    """
    if not get_settings().enable_imdb_top_sorting:
        raise HTTPException(
            status_code=404,
            detail=error_body("FEATURE_DISABLED", "IMDb Top sorting is disabled"),
        )

    items = await library.get_movie_items()
    return sort_by_imdb_top_rank(
        items,
        store,
        include_unranked=include_unranked,
        limit=limit,
    )
