"""FastAPI dependencies.

The RankStore and library provider are created once in the app lifespan and
kept on `app.state`; routes receive them through these providers.
"""

from fastapi import Request

from advanced_sorting.services.library import LibraryProvider
from advanced_sorting.stores.rank_store import RankStore


def get_rank_store(request: Request) -> RankStore:
    store = getattr(request.app.state, "rank_store", None)
    if store is None:
        raise RuntimeError("RankStore not initialized. Is the app lifespan running?")
    return store


def get_library_provider(request: Request) -> LibraryProvider:
    provider = getattr(request.app.state, "library_provider", None)
    if provider is None:
        raise RuntimeError("Library provider not initialized. Is the app lifespan running?")
    return provider
