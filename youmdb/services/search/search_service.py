"""
YouMDB Creator Search — name / genre / location / subscriber-range filtering.

Pipeline:
1. Normalise filters (blank strings count as absent)
2. Validate numeric bounds before touching the store
3. Fetch candidates: name substring, else country/state equality, else everything
4. Apply the remaining filters in memory as one AND chain

Results carry no ordering guarantee; callers sort for presentation.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from youmdb.core.errors import InvalidArgument
from youmdb.schemas.schemas import Creator
from youmdb.services.store.base import Op, Predicate, RecordStore

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_count(value: Any, name: str) -> Optional[int]:
    """Parse a subscriber bound; ``None``/blank means "no bound"."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be a non-negative integer")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if not (text.isascii() and text.isdigit()):
            raise InvalidArgument(f"{name} must be a non-negative integer, got '{value}'")
        parsed = int(text)
    else:
        raise InvalidArgument(f"{name} must be a non-negative integer")
    if parsed < 0:
        raise InvalidArgument(f"{name} must be a non-negative integer, got {parsed}")
    return parsed


class CreatorSearchService:
    """Filters creators over a full or pre-filtered collection fetch."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def search(
        self,
        name: Optional[str] = None,
        genre: Optional[str] = None,
        country: Optional[str] = None,
        state: Optional[str] = None,
        min_subscribers: Any = None,
        max_subscribers: Any = None,
    ) -> List[Creator]:
        name, genre = _clean(name), _clean(genre)
        country, state = _clean(country), _clean(state)
        low = parse_count(min_subscribers, "min_subscribers")
        high = parse_count(max_subscribers, "max_subscribers")
        if low is not None and high is not None and low > high:
            raise InvalidArgument("min_subscribers cannot exceed max_subscribers")

        creators = self.store.creators
        pushed_location = False
        if name:
            if creators.supports_substring_push:
                candidates = await creators.where("name", Op.ICONTAINS, name)
            else:
                needle = name.lower()
                candidates = [c for c in await creators.get_all() if needle in c.name.lower()]
        elif country or state:
            predicates = []
            if country:
                predicates.append(Predicate("country", Op.EQUALS, country))
            if state:
                predicates.append(Predicate("state", Op.EQUALS, state))
            candidates = await creators.find(*predicates)
            pushed_location = True
        else:
            candidates = await creators.get_all()

        results = []
        for creator in candidates:
            if genre and creator.genre != genre:
                continue
            if not pushed_location:
                if country and creator.country != country:
                    continue
                if state and creator.state != state:
                    continue
            if low is not None and creator.subscriber_count < low:
                continue
            if high is not None and creator.subscriber_count > high:
                continue
            results.append(creator)

        logger.debug(f"Creator search name={name!r} genre={genre!r} -> {len(results)} results")
        return results

    async def unique_countries(self) -> List[str]:
        creators = await self.store.creators.get_all()
        return sorted({c.country for c in creators if c.country})

    async def unique_states(self, country: str) -> List[str]:
        country = _clean(country)
        if not country:
            return []
        creators = await self.store.creators.where("country", Op.EQUALS, country)
        return sorted({c.state for c in creators if c.state})

    async def trending(self, limit: int = 10) -> List[Creator]:
        """Creators by subscriber count, largest first."""
        if limit < 1:
            raise InvalidArgument("limit must be at least 1")
        creators = await self.store.creators.get_all()
        creators.sort(key=lambda c: c.subscriber_count, reverse=True)
        return creators[:limit]
