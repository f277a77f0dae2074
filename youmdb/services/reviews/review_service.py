"""
YouMDB Review Service — reviews of creators and videos, plus like/dislike toggles.

Average ratings on creators and videos are curated fields; nothing here
recomputes them from the review set.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from youmdb.core.errors import InvalidArgument, NotFound
from youmdb.core.identity import Identity, require_interactive
from youmdb.schemas.schemas import EntityType, Review
from youmdb.services.store.base import Op, Predicate, RecordStore

logger = logging.getLogger(__name__)


def _entity_type(value) -> EntityType:
    try:
        return EntityType(value)
    except ValueError:
        raise InvalidArgument(f"entity_type must be 'creator' or 'video', got '{value}'")


class ReviewService:
    """Collects reviews per (entity id, entity type)."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def list_reviews(self, entity_id: str, entity_type) -> List[Review]:
        kind = _entity_type(entity_type)
        return await self.store.reviews.find(
            Predicate("entity_id", Op.EQUALS, entity_id),
            Predicate("entity_type", Op.EQUALS, kind.value),
        )

    async def list_user_reviews(self, user_id: str) -> List[Review]:
        return await self.store.reviews.where("user_id", Op.EQUALS, user_id)

    async def add_review(
        self,
        identity: Optional[Identity],
        entity_id: str,
        entity_type,
        rating: Optional[int] = None,
        text: Optional[str] = None,
    ) -> str:
        """Store a review and return its id. Guests are refused."""
        user_id = require_interactive(identity, "write reviews")
        kind = _entity_type(entity_type)
        if not entity_id:
            raise InvalidArgument("entity_id is required")
        if rating is not None and (isinstance(rating, bool) or not 1 <= rating <= 5):
            raise InvalidArgument(f"rating must be between 1 and 5, got {rating}")

        review = await self.store.reviews.insert({
            "entity_id": entity_id,
            "entity_type": kind.value,
            "user_id": user_id,
            "rating": rating,
            "review_text": text,
            "likes": [],
            "dislikes": [],
        })
        logger.info(f"Review {review.id} added on {kind.value} {entity_id}")
        return review.id

    async def toggle_like(self, identity: Optional[Identity], review_id: str, like: bool) -> Review:
        """
        Flip the caller's reaction on a review.

        Reacting in the same direction twice withdraws the reaction; reacting
        in the other direction moves the user across. Read-modify-write with
        no concurrency guard, so concurrent toggles resolve last-write-wins.
        """
        user_id = require_interactive(identity, "react to reviews")
        review = await self.store.reviews.get_by_id(review_id)
        if review is None:
            raise NotFound(f"Review {review_id} not found")

        likes = [u for u in review.likes if u != user_id]
        dislikes = [u for u in review.dislikes if u != user_id]
        if like and user_id not in review.likes:
            likes.append(user_id)
        elif not like and user_id not in review.dislikes:
            dislikes.append(user_id)

        updated = await self.store.reviews.update(review_id, {"likes": likes, "dislikes": dislikes})
        if updated is None:
            raise NotFound(f"Review {review_id} not found")
        return updated
