"""
YouMDB Suggestion Service — "suggest a channel" queue.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from youmdb.core.errors import ImportFailed, InvalidArgument, NotFound
from youmdb.core.identity import Identity
from youmdb.schemas.schemas import Suggestion, SuggestionStatus
from youmdb.services.importer.import_service import ImportService
from youmdb.services.store.base import Op, RecordStore

logger = logging.getLogger(__name__)


class SuggestionService:
    def __init__(self, store: RecordStore):
        self.store = store

    async def submit(
        self,
        identity: Optional[Identity],
        url: str,
        extra_info: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Suggestion:
        url = (url or "").strip()
        if not url:
            raise InvalidArgument("url is required")
        suggestion = await self.store.suggestions.insert({
            "url": url,
            "extra_info": extra_info,
            "notes": notes,
            "user_id": identity.user_id if identity else None,
            "status": SuggestionStatus.PENDING.value,
        })
        logger.info(f"Suggestion {suggestion.id} queued for {url}")
        return suggestion

    async def list_for_user(self, user_id: str) -> List[Suggestion]:
        return await self.store.suggestions.where("user_id", Op.EQUALS, user_id)

    async def import_suggestion(self, suggestion_id: str, importer: ImportService) -> Suggestion:
        suggestion = await self.store.suggestions.get_by_id(suggestion_id)
        if suggestion is None:
            raise NotFound(f"Suggestion {suggestion_id} not found")
        try:
            creator = await importer.import_channel(suggestion.url)
        except ImportFailed:
            await self.store.suggestions.update(
                suggestion_id, {"status": SuggestionStatus.FAILED.value}
            )
            raise
        updated = await self.store.suggestions.update(suggestion_id, {
            "status": SuggestionStatus.IMPORTED.value,
            "creator_id": creator.id,
        })
        if updated is None:
            raise NotFound(f"Suggestion {suggestion_id} not found")
        return updated
