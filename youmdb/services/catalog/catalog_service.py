"""
YouMDB Catalog — direct creator and video lookups.
"""
from __future__ import annotations

from typing import List

from youmdb.core.errors import NotFound
from youmdb.schemas.schemas import Creator, Video
from youmdb.services.store.base import Op, RecordStore


class CatalogService:
    def __init__(self, store: RecordStore):
        self.store = store

    async def list_creators(self) -> List[Creator]:
        return await self.store.creators.get_all()

    async def get_creator(self, creator_id: str) -> Creator:
        creator = await self.store.creators.get_by_id(creator_id)
        if creator is None:
            raise NotFound(f"Creator {creator_id} not found")
        return creator

    async def list_videos(self) -> List[Video]:
        return await self.store.videos.get_all()

    async def get_video(self, video_id: str) -> Video:
        video = await self.store.videos.get_by_id(video_id)
        if video is None:
            raise NotFound(f"Video {video_id} not found")
        return video

    async def videos_for_creator(self, creator_id: str) -> List[Video]:
        return await self.store.videos.where("creator_id", Op.EQUALS, creator_id)
