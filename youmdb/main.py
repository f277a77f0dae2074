"""
YouMDB — Main FastAPI Application

Creator discovery & review backend
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from youmdb.core.config import Settings, get_settings
from youmdb.core.errors import install_error_handlers
from youmdb.services.importer.youtube_client import YouTubeClient
from youmdb.services.store.base import RecordStore
from youmdb.services.store.factory import build_store

# ── Logging ──────────────────────────────────────────────────────────────

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().log_level.upper())
    ),
)

logger = structlog.get_logger()


# ── Lifespan ─────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    settings: Settings = app.state.settings
    store: RecordStore = app.state.store
    logger.info("Starting YouMDB", version=settings.app_version, store=store.backend)

    await store.startup()

    if settings.seed_demo_data:
        from youmdb.services.demo.seed import seed_demo_data
        added = await seed_demo_data(store)
        logger.info("Demo seed finished", creators_added=added)

    logger.info("YouMDB ready", youtube_import=bool(settings.youtube_api_key))

    yield

    await app.state.youtube.aclose()
    await store.shutdown()
    logger.info("Shutting down YouMDB")


# ── App ──────────────────────────────────────────────────────────────────

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    youtube: Optional[YouTubeClient] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Discover, rate and review YouTube creators",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or build_store(settings)
    app.state.youtube = youtube or YouTubeClient(
        settings.youtube_api_key, base_url=settings.youtube_api_base_url
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    # Prometheus metrics
    app.mount("/metrics", make_asgi_app())

    from youmdb.api.routes import creators, reviews, suggestions, users, videos

    app.include_router(creators.router, prefix=settings.api_prefix)
    app.include_router(videos.router, prefix=settings.api_prefix)
    app.include_router(reviews.router, prefix=settings.api_prefix)
    app.include_router(suggestions.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "description": "Creator discovery & review backend",
            "version": settings.app_version,
            "store": app.state.store.backend,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy", "store": app.state.store.backend}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("youmdb.main:app", host="0.0.0.0", port=8000)
