"""
Relational record store over SQLAlchemy's async ORM (PostgreSQL in production).

Equality and case-insensitive substring predicates are pushed to the
database (``=`` / ``ILIKE``). Every call opens its own session and commits
its own write; there are no multi-record transactions.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Type

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from youmdb.core.database import Base, Database
from youmdb.core.errors import StoreError
from youmdb.models import models
from youmdb.schemas.schemas import Creator, Review, Suggestion, Video
from youmdb.services.store.base import Collection, Op, Predicate, R, RecordStore

logger = logging.getLogger(__name__)


def _like_pattern(value: Any) -> str:
    escaped = str(value).replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlCollection(Collection[R]):
    supports_substring_push = True

    def __init__(self, name: str, record_type: Type[R], model: Type[Base], db: Database):
        super().__init__(name, record_type)
        self.model = model
        self._db = db

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._db.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Store call on {self.name} failed: {e}")
            raise StoreError(str(e)) from e

    def _clause(self, predicate: Predicate):
        column = getattr(self.model, predicate.field)
        if predicate.op is Op.EQUALS:
            return column == predicate.value
        return column.ilike(_like_pattern(predicate.value), escape="\\")

    def _to_record(self, row) -> R:
        return self.record_type.model_validate(row, from_attributes=True)

    async def _fetch(self, predicates: List[Predicate]) -> List[R]:
        query = select(self.model)
        if predicates:
            query = query.where(and_(*(self._clause(p) for p in predicates)))
        async with self._session() as session:
            result = await session.execute(query)
            rows = result.scalars().all()
        return [self._to_record(row) for row in rows]

    async def _get(self, record_id: str) -> Optional[R]:
        async with self._session() as session:
            row = await session.get(self.model, record_id)
        return self._to_record(row) if row is not None else None

    async def _insert(self, doc: Dict[str, Any]) -> R:
        async with self._session() as session:
            row = self.model(**doc)
            session.add(row)
            await session.commit()
        return self._to_record(row)

    async def _update(self, record_id: str, changes: Dict[str, Any]) -> Optional[R]:
        async with self._session() as session:
            row = await session.get(self.model, record_id)
            if row is None:
                return None
            for field, value in changes.items():
                setattr(row, field, value)
            await session.commit()
        return self._to_record(row)


class SqlRecordStore(RecordStore):
    backend = "sql"

    def __init__(self, db: Database):
        self.db = db
        self.creators = SqlCollection("creators", Creator, models.Creator, db)
        self.videos = SqlCollection("videos", Video, models.Video, db)
        self.reviews = SqlCollection("reviews", Review, models.Review, db)
        self.suggestions = SqlCollection("suggestions", Suggestion, models.Suggestion, db)

    async def startup(self) -> None:
        try:
            await self.db.init_models()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(str(e)) from e

    async def shutdown(self) -> None:
        await self.db.dispose()
