"""
YouMDB Channel Import — turns a channel reference into a Creator record.

Steps:
1. Classify the reference (channel id, @handle, legacy username)
2. Resolve handles/usernames to a channel id
3. Fetch public snippet + statistics; a bare token that reads as a channel
   id but names no channel is retried as a handle
4. Upsert into creators keyed by ``youtube_channel_id``
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from youmdb.core.errors import ImportFailed, StoreError
from youmdb.schemas.schemas import ChannelMetadata, Creator
from youmdb.services.importer.youtube_client import (
    YouTubeClient,
    extract_channel_hint,
    looks_like_handle,
)
from youmdb.services.store.base import RecordStore

logger = logging.getLogger(__name__)


def creator_fields(meta: ChannelMetadata) -> Dict[str, Any]:
    """
    Map channel metadata onto Creator fields. Curated fields are left alone,
    and values the API omitted are dropped so a re-import never blanks them.
    """
    fields = {
        "youtube_channel_id": meta.channel_id,
        "name": meta.title,
        "bio": meta.description,
        "country": meta.country or "Unknown",
        "profile_picture_url": meta.thumbnail_url,
        "subscriber_count": meta.subscriber_count,
        "total_views": meta.view_count,
    }
    return {k: v for k, v in fields.items() if v is not None}


class ImportService:
    def __init__(self, store: RecordStore, youtube: YouTubeClient):
        self.store = store
        self.youtube = youtube

    async def resolve_channel_id(self, identifier: str) -> str:
        kind, value = extract_channel_hint(identifier)
        if kind == "channel_id":
            return value
        if kind == "handle":
            channel_id = await self.youtube.resolve_handle(value)
        else:
            channel_id = await self.youtube.resolve_username(value)
        if not channel_id:
            raise ImportFailed(f"No YouTube channel found for '{identifier}'")
        return channel_id

    async def fetch_metadata(self, identifier: str) -> ChannelMetadata:
        channel_id = await self.resolve_channel_id(identifier)
        meta = await self.youtube.fetch_channel(channel_id)
        if meta is None and channel_id == identifier.strip() and looks_like_handle(identifier):
            # Bare tokens such as "UCLA" read as channel ids but may be handles
            handle_id = await self.youtube.resolve_handle(identifier.strip())
            if handle_id:
                meta = await self.youtube.fetch_channel(handle_id)
        if meta is None:
            raise ImportFailed(f"No YouTube channel found for id {channel_id}")
        return meta

    async def import_channel(self, identifier: str) -> Creator:
        meta = await self.fetch_metadata(identifier)
        creator = await self.store.creators.upsert(
            creator_fields(meta), conflict_key="youtube_channel_id"
        )
        logger.info(f"Imported channel {meta.channel_id} as creator {creator.id} ({creator.name})")
        return creator

    async def import_many(self, identifiers: Iterable[str]) -> List[Creator]:
        """Batch import; a failing channel is logged and skipped."""
        imported = []
        for identifier in identifiers:
            try:
                imported.append(await self.import_channel(identifier))
            except (ImportFailed, StoreError) as e:
                logger.warning(f"Failed to import {identifier}: {e.message}")
        return imported
