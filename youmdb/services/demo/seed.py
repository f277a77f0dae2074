"""
YouMDB Demo Seed — a small starter catalogue for empty stores.

Five creators across genres and countries, two videos each. Only runs when
the creators collection is empty.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, List

from youmdb.services.store.base import RecordStore

logger = logging.getLogger(__name__)

CREATORS: List[Dict] = [
    {"name": "TechGuru Alex", "genre": "Technology", "country": "USA", "state": "California",
     "subs": 2_500_000, "views": 45_000_000, "rating": 4.7, "color": "7c3aed", "initials": "TG",
     "bio": "Exploring the latest in technology and gadgets with in-depth reviews and tutorials"},
    {"name": "Chef Maria's Kitchen", "genre": "Cooking", "country": "Italy", "state": "Tuscany",
     "subs": 1_800_000, "views": 32_000_000, "rating": 4.9, "color": "06b6d4", "initials": "CM",
     "bio": "Authentic recipes from around the world, bringing families together through food"},
    {"name": "Gaming Legend Mike", "genre": "Gaming", "country": "Canada", "state": "Ontario",
     "subs": 3_200_000, "views": 67_000_000, "rating": 4.6, "color": "10b981", "initials": "GL",
     "bio": "Professional gamer sharing epic gameplay, reviews, and gaming tips"},
    {"name": "Fitness Focus Sarah", "genre": "Fitness", "country": "Australia", "state": "New South Wales",
     "subs": 1_500_000, "views": 28_000_000, "rating": 4.8, "color": "a855f7", "initials": "FF",
     "bio": "Helping you achieve your fitness goals with effective workouts and nutrition advice"},
    {"name": "Travel Tales Tom", "genre": "Travel", "country": "India", "state": "Maharashtra",
     "subs": 950_000, "views": 18_500_000, "rating": 4.5, "color": "f59e0b", "initials": "TT",
     "bio": "Discovering hidden gems and sharing travel adventures from around the globe"},
]

_VIDEO_TEMPLATES = [
    ("{name} - Latest Review", "In-depth look at the newest trends in {genre}", "2024-01-15", "Video"),
    ("{name} - Behind the Scenes", "Get an exclusive look behind the scenes of content creation", "2024-02-01", "BTS"),
]


async def seed_demo_data(store: RecordStore, seed: int = 42) -> int:
    """Insert the demo catalogue if no creators exist. Returns creators added."""
    if await store.creators.get_all():
        logger.info("Creators already present, skipping demo seed")
        return 0

    rng = random.Random(seed)
    for entry in CREATORS:
        creator = await store.creators.insert({
            "name": entry["name"],
            "bio": entry["bio"],
            "genre": entry["genre"],
            "country": entry["country"],
            "state": entry["state"],
            "profile_picture_url": f"https://placehold.co/300x300/{entry['color']}/ffffff?text={entry['initials']}",
            "subscriber_count": entry["subs"],
            "total_views": entry["views"],
            "average_rating": entry["rating"],
        })
        for title, description, published, label in _VIDEO_TEMPLATES:
            await store.videos.insert({
                "creator_id": creator.id,
                "title": title.format(name=entry["name"]),
                "description": description.format(genre=entry["genre"].lower()),
                "thumbnail_url": f"https://placehold.co/480x360/{entry['color']}/ffffff?text={label}",
                "video_url": "https://youtube.com/watch?v=example",
                "publish_date": published,
                "views": rng.randint(10_000, 1_000_000),
                "average_rating": round(rng.uniform(3.0, 5.0), 1),
            })

    logger.info(f"Seeded {len(CREATORS)} demo creators")
    return len(CREATORS)
