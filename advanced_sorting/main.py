"""FastAPI application entry point.

Advanced Sorting API - extra sort orders for a media library.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from advanced_sorting.routes import api_router
from advanced_sorting.schemas import error_body
from advanced_sorting.services.library import DatabaseLibraryProvider
from advanced_sorting.settings import get_settings
from advanced_sorting.stores.postgres import close_db, init_db, ping_db
from advanced_sorting.stores.rank_store import RankStore

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()

    app.state.rank_store = RankStore(settings.imdb_top_list_path)
    logger.info(
        f"IMDb Top list ready: {app.state.rank_store.count} entries ({settings.imdb_top_list_path})"
    )

    # Library catalog (service still starts without it)
    try:
        await init_db()
        await ping_db()
        logger.info("Library catalog connected")
    except Exception:
        logger.exception("Library catalog init failed")
    app.state.library_provider = DatabaseLibraryProvider()

    yield

    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Sort media library items by bitrate, file size, rating and IMDb Top 250 rank",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_body(
                "INTERNAL_ERROR",
                str(exc) if settings.debug else "Internal server error",
            ),
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "advanced_sorting.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
