"""
Build the configured record store backend.
"""
from __future__ import annotations

import logging

from youmdb.core.config import Settings
from youmdb.core.errors import InvalidArgument
from youmdb.services.store.base import RecordStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> RecordStore:
    backend = settings.store_backend.strip().lower()
    if backend == "memory":
        from youmdb.services.store.memory_store import MemoryRecordStore

        store: RecordStore = MemoryRecordStore()
    elif backend == "sql":
        from youmdb.core.database import Database
        from youmdb.services.store.sql_store import SqlRecordStore

        store = SqlRecordStore(Database(settings.database_url, echo=settings.db_echo))
    else:
        raise InvalidArgument(f"Unknown store backend: {settings.store_backend}")
    logger.info(f"Record store backend: {store.backend}")
    return store
