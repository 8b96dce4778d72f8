"""IMDb Top list management.

GET  /AdvancedSorting/ImdbTopList/Status - entry count and last update time
POST /AdvancedSorting/ImdbTopList/Update - replace the list with {imdbId: rank}
POST /AdvancedSorting/ImdbTopList/Reset  - restore the built-in list

Update and Reset write to disk, so they are plain (threadpool) handlers.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from advanced_sorting.dependencies import get_rank_store
from advanced_sorting.schemas import ErrorResponse, ImdbTopListStatus, error_body
from advanced_sorting.stores.rank_store import RankStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _status(store: RankStore) -> ImdbTopListStatus:
    # One snapshot so a concurrent update can't mix count and timestamp
    table = store.snapshot()
    return ImdbTopListStatus(
        entry_count=len(table.entries),
        last_updated=table.last_updated,
    )


@router.get("/Status", response_model=ImdbTopListStatus)
def get_imdb_top_list_status(
    store: RankStore = Depends(get_rank_store),
) -> ImdbTopListStatus:
    """Get the current IMDb Top list status."""
    return _status(store)


@router.post(
    "/Update",
    response_model=ImdbTopListStatus,
    responses={400: {"model": ErrorResponse, "description": "Empty or missing rankings"}},
)
def update_imdb_top_list(
    rankings: dict[str, int] | None = Body(
        default=None,
        examples=[{"tt0111161": 1, "tt0068646": 2}],
    ),
    store: RankStore = Depends(get_rank_store),
) -> ImdbTopListStatus:
    """Replace the IMDb Top list with custom rankings.

    Args:
        rankings: Mapping of IMDb IDs to rank positions.

    Raises:
        HTTPException 400: If the rankings mapping is missing or empty.
    """
    if not rankings:
        raise HTTPException(
            status_code=400,
            detail=error_body("INVALID_REQUEST", "Rankings dictionary cannot be empty"),
        )

    store.update_list(rankings)
    logger.info(f"[imdb_top_list] update entries={store.count}")
    return _status(store)


@router.post("/Reset", response_model=ImdbTopListStatus)
def reset_imdb_top_list(
    store: RankStore = Depends(get_rank_store),
) -> ImdbTopListStatus:
    """Reset the IMDb Top list to the built-in defaults."""
    store.load_default_list()
    return _status(store)
