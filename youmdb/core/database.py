"""
YouMDB database handle — async SQLAlchemy engine + session factory.

Constructed explicitly at startup and handed to the SQL record store; nothing
here is a module-level singleton.
"""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Owns one engine and the sessions made from it."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    async def init_models(self) -> None:
        """Create missing tables."""
        # Registers the mapped classes on Base.metadata
        from youmdb.models import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
