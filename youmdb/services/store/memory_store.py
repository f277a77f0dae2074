"""
Document-style in-process record store.

Mirrors a document database without server-side substring search: every
predicate is evaluated in Python over a full scan of the collection.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from youmdb.schemas.schemas import Creator, Review, Suggestion, Video
from youmdb.services.store.base import Collection, Predicate, R, RecordStore


class MemoryCollection(Collection[R]):
    supports_substring_push = False

    def __init__(self, name, record_type):
        super().__init__(name, record_type)
        self._docs: Dict[str, Dict[str, Any]] = {}

    async def _fetch(self, predicates: List[Predicate]) -> List[R]:
        return [
            self._to_record(doc)
            for doc in self._docs.values()
            if all(p.matches(doc) for p in predicates)
        ]

    async def _get(self, record_id: str) -> Optional[R]:
        doc = self._docs.get(record_id)
        return self._to_record(doc) if doc is not None else None

    async def _insert(self, doc: Dict[str, Any]) -> R:
        self._docs[doc["id"]] = copy.deepcopy(doc)
        return self._to_record(doc)

    async def _update(self, record_id: str, changes: Dict[str, Any]) -> Optional[R]:
        doc = self._docs.get(record_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(changes))
        return self._to_record(doc)

    def _to_record(self, doc: Dict[str, Any]) -> R:
        return self.record_type.model_validate(copy.deepcopy(doc))


class MemoryRecordStore(RecordStore):
    backend = "memory"

    def __init__(self):
        self.creators = MemoryCollection("creators", Creator)
        self.videos = MemoryCollection("videos", Video)
        self.reviews = MemoryCollection("reviews", Review)
        self.suggestions = MemoryCollection("suggestions", Suggestion)
