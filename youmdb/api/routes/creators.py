"""
YouMDB API — Creator routes.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query

from youmdb.api.deps import get_app_settings, get_catalog_service, get_search_service
from youmdb.core.config import Settings
from youmdb.schemas.schemas import Creator, CreatorPublic, SearchResponse, Video
from youmdb.services.catalog.catalog_service import CatalogService
from youmdb.services.search.search_service import CreatorSearchService

router = APIRouter(prefix="/creators", tags=["Creators"])


def to_public(creator: Creator, settings: Settings) -> CreatorPublic:
    data = creator.model_dump()
    if not data.get("profile_picture_url"):
        initial = creator.name[:1].upper() or "?"
        data["profile_picture_url"] = f"{settings.placeholder_avatar_base}?text={quote(initial)}"
    return CreatorPublic.model_validate(data)


@router.get("", response_model=List[CreatorPublic])
async def list_creators(
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    return [to_public(c, settings) for c in await catalog.list_creators()]


@router.get("/search", response_model=SearchResponse)
async def search_creators(
    q: Optional[str] = Query(None, max_length=256, description="Name substring"),
    genre: Optional[str] = None,
    country: Optional[str] = None,
    state: Optional[str] = None,
    # Kept as text so malformed bounds surface as InvalidArgument (400)
    min_subscribers: Optional[str] = None,
    max_subscribers: Optional[str] = None,
    search: CreatorSearchService = Depends(get_search_service),
    settings: Settings = Depends(get_app_settings),
):
    """Filter creators by name, genre, location and subscriber range."""
    results = await search.search(
        name=q,
        genre=genre,
        country=country,
        state=state,
        min_subscribers=min_subscribers,
        max_subscribers=max_subscribers,
    )
    return SearchResponse(
        total_results=len(results),
        results=[to_public(c, settings) for c in results],
    )


@router.get("/trending", response_model=List[CreatorPublic])
async def trending_creators(
    limit: Optional[int] = Query(None, ge=1, le=100),
    search: CreatorSearchService = Depends(get_search_service),
    settings: Settings = Depends(get_app_settings),
):
    creators = await search.trending(limit or settings.trending_default_limit)
    return [to_public(c, settings) for c in creators]


@router.get("/countries", response_model=List[str])
async def list_countries(search: CreatorSearchService = Depends(get_search_service)):
    return await search.unique_countries()


@router.get("/countries/{country}/states", response_model=List[str])
async def list_states(country: str, search: CreatorSearchService = Depends(get_search_service)):
    return await search.unique_states(country)


@router.get("/{creator_id}", response_model=CreatorPublic)
async def get_creator(
    creator_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    return to_public(await catalog.get_creator(creator_id), settings)


@router.get("/{creator_id}/videos", response_model=List[Video])
async def creator_videos(creator_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.videos_for_creator(creator_id)
