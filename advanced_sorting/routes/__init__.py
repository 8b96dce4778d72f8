"""API routes."""

from fastapi import APIRouter

from advanced_sorting.routes import imdb_top_list, sorting

api_router = APIRouter()

# Sorted library listings
api_router.include_router(sorting.router, prefix="/AdvancedSorting", tags=["sorting"])

# IMDb Top list management
api_router.include_router(
    imdb_top_list.router,
    prefix="/AdvancedSorting/ImdbTopList",
    tags=["imdb-top-list"],
)
