"""
YouMDB API — Current-user profile routes.
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from youmdb.api.deps import get_review_service, get_suggestion_service
from youmdb.core.errors import PermissionDenied
from youmdb.core.identity import Identity, get_identity
from youmdb.schemas.schemas import Review, Suggestion
from youmdb.services.reviews.review_service import ReviewService
from youmdb.services.suggestions.suggestion_service import SuggestionService

router = APIRouter(prefix="/users/me", tags=["Users"])


def _user_id(identity: Identity) -> str:
    if not identity.user_id:
        raise PermissionDenied("Sign in to view your profile")
    return identity.user_id


@router.get("/reviews", response_model=List[Review])
async def my_reviews(
    identity: Identity = Depends(get_identity),
    reviews: ReviewService = Depends(get_review_service),
):
    return await reviews.list_user_reviews(_user_id(identity))


@router.get("/suggestions", response_model=List[Suggestion])
async def my_suggestions(
    identity: Identity = Depends(get_identity),
    suggestions: SuggestionService = Depends(get_suggestion_service),
):
    return await suggestions.list_for_user(_user_id(identity))
