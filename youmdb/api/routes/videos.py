"""
YouMDB API — Video routes.
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from youmdb.api.deps import get_catalog_service
from youmdb.schemas.schemas import Video
from youmdb.services.catalog.catalog_service import CatalogService

router = APIRouter(prefix="/videos", tags=["Videos"])


@router.get("", response_model=List[Video])
async def list_videos(catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.list_videos()


@router.get("/{video_id}", response_model=Video)
async def get_video(video_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.get_video(video_id)
