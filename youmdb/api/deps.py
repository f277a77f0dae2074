"""
YouMDB API — request-scoped dependencies.

The store handle and YouTube client live on ``app.state``; services are
built per request around them.
"""
from __future__ import annotations

from fastapi import Depends, Request

from youmdb.core.config import Settings
from youmdb.services.catalog.catalog_service import CatalogService
from youmdb.services.importer.import_service import ImportService
from youmdb.services.importer.youtube_client import YouTubeClient
from youmdb.services.reviews.review_service import ReviewService
from youmdb.services.search.search_service import CreatorSearchService
from youmdb.services.store.base import RecordStore
from youmdb.services.suggestions.suggestion_service import SuggestionService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_youtube(request: Request) -> YouTubeClient:
    return request.app.state.youtube


def get_catalog_service(store: RecordStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_search_service(store: RecordStore = Depends(get_store)) -> CreatorSearchService:
    return CreatorSearchService(store)


def get_review_service(store: RecordStore = Depends(get_store)) -> ReviewService:
    return ReviewService(store)


def get_suggestion_service(store: RecordStore = Depends(get_store)) -> SuggestionService:
    return SuggestionService(store)


def get_import_service(
    store: RecordStore = Depends(get_store),
    youtube: YouTubeClient = Depends(get_youtube),
) -> ImportService:
    return ImportService(store, youtube)
