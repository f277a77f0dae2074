"""
YouMDB Schemas — Pydantic v2 models for stored records and API payloads.

Record models double as the shape every record store backend returns.
"""
from __future__ import annotations

import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EntityType(str, enum.Enum):
    CREATOR = "creator"
    VIDEO = "video"


class SuggestionStatus(str, enum.Enum):
    PENDING = "pending"
    IMPORTED = "imported"
    FAILED = "failed"


# ═══════════════════════════════════════════════════════════════════════
# Records
# ═══════════════════════════════════════════════════════════════════════

class Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class Creator(Record):
    name: str = Field(..., min_length=1)
    bio: Optional[str] = None
    genre: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    profile_picture_url: Optional[str] = None
    subscriber_count: int = Field(0, ge=0)
    total_views: int = Field(0, ge=0)
    average_rating: float = Field(0.0, ge=0.0, le=5.0)
    youtube_channel_id: Optional[str] = None


class Video(Record):
    creator_id: str
    title: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    publish_date: Optional[str] = None
    views: int = Field(0, ge=0)
    average_rating: float = Field(0.0, ge=0.0, le=5.0)


class Review(Record):
    entity_id: str
    entity_type: EntityType
    user_id: str
    rating: Optional[int] = Field(None, ge=1, le=5)
    review_text: Optional[str] = None
    likes: List[str] = Field(default_factory=list)
    dislikes: List[str] = Field(default_factory=list)


class Suggestion(Record):
    url: str = Field(..., min_length=1)
    extra_info: Optional[str] = None
    notes: Optional[str] = None
    user_id: Optional[str] = None
    status: SuggestionStatus = SuggestionStatus.PENDING
    creator_id: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════
# Creators / Search
# ═══════════════════════════════════════════════════════════════════════

class CreatorPublic(Creator):
    """Creator as served to clients: the avatar is never empty."""


class SearchResponse(BaseModel):
    total_results: int
    results: List[CreatorPublic]


# ═══════════════════════════════════════════════════════════════════════
# Reviews
# ═══════════════════════════════════════════════════════════════════════

class ReviewCreate(BaseModel):
    entity_id: str = Field(..., min_length=1)
    entity_type: EntityType
    rating: Optional[int] = None
    review_text: Optional[str] = Field(None, max_length=5000)


class ReviewCreated(BaseModel):
    id: str
    status: str = "created"


class ReactionRequest(BaseModel):
    like: bool = True


class ReactionResponse(BaseModel):
    review_id: str
    likes: int
    dislikes: int
    liked: bool
    disliked: bool


# ═══════════════════════════════════════════════════════════════════════
# Suggestions / Import
# ═══════════════════════════════════════════════════════════════════════

class SuggestionCreate(BaseModel):
    url: str = Field(..., max_length=1024)
    extra_info: Optional[str] = None
    notes: Optional[str] = None


class ChannelImportRequest(BaseModel):
    identifier: str = Field(..., min_length=1, description="Channel id, @handle or channel URL")


class ChannelMetadata(BaseModel):
    """Subset of a YouTube ``channels`` resource used to build a Creator."""
    channel_id: str
    title: str
    description: Optional[str] = None
    country: Optional[str] = None
    thumbnail_url: Optional[str] = None
    subscriber_count: int = 0
    view_count: int = 0
