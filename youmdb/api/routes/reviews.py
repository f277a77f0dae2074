"""
YouMDB API — Review routes.
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from youmdb.api.deps import get_review_service
from youmdb.core.identity import Identity, get_identity
from youmdb.schemas.schemas import (
    EntityType,
    ReactionRequest,
    ReactionResponse,
    Review,
    ReviewCreate,
    ReviewCreated,
)
from youmdb.services.reviews.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=List[Review])
async def list_reviews(
    entity_id: str = Query(..., min_length=1),
    entity_type: EntityType = Query(...),
    reviews: ReviewService = Depends(get_review_service),
):
    return await reviews.list_reviews(entity_id, entity_type)


@router.post("", response_model=ReviewCreated, status_code=201)
async def add_review(
    data: ReviewCreate,
    identity: Identity = Depends(get_identity),
    reviews: ReviewService = Depends(get_review_service),
):
    """Submit a star rating and/or text review. Guests get 403."""
    review_id = await reviews.add_review(
        identity, data.entity_id, data.entity_type, data.rating, data.review_text
    )
    return ReviewCreated(id=review_id)


@router.post("/{review_id}/reaction", response_model=ReactionResponse)
async def react_to_review(
    review_id: str,
    data: ReactionRequest,
    identity: Identity = Depends(get_identity),
    reviews: ReviewService = Depends(get_review_service),
):
    """Like (``like=true``) or dislike a review; repeating the same reaction withdraws it."""
    review = await reviews.toggle_like(identity, review_id, data.like)
    return ReactionResponse(
        review_id=review.id,
        likes=len(review.likes),
        dislikes=len(review.dislikes),
        liked=identity.user_id in review.likes,
        disliked=identity.user_id in review.dislikes,
    )
