"""
Shared fixtures: an in-memory record store, a fake YouTube Data API and an
HTTP client bound to the app.
"""
import os

os.environ.setdefault("YOUMDB_STORE_BACKEND", "memory")

import httpx
import pytest

from youmdb.core.config import Settings
from youmdb.main import create_app
from youmdb.services.importer.youtube_client import YouTubeClient
from youmdb.services.store.memory_store import MemoryRecordStore

API_KEY = "test-key"

YOUTUBE_CHANNELS = {
    "UC123": {
        "id": "UC123",
        "snippet": {
            "title": "Alex Builds",
            "description": "Woodworking and home projects",
            "country": "US",
            "thumbnails": {"default": {"url": "https://yt3.example/alex.jpg"}},
        },
        "statistics": {"subscriberCount": "123456", "viewCount": "9876543"},
    },
    "UCnocountry": {
        "id": "UCnocountry",
        "snippet": {"title": "Nowhere Channel", "thumbnails": {}},
        "statistics": {"subscriberCount": "10", "viewCount": "20"},
    },
    "UCmega": {
        "id": "UCmega",
        "snippet": {"title": "Mega Music", "country": "IN", "thumbnails": {}},
        "statistics": {"subscriberCount": "280000000", "viewCount": "300000000000"},
    },
    "UCuclaofficial": {
        "id": "UCuclaofficial",
        "snippet": {"title": "UCLA", "country": "US", "thumbnails": {}},
        "statistics": {"subscriberCount": "500000", "viewCount": "90000000"},
    },
}
YOUTUBE_HANDLES = {"@alexbuilds": "UC123", "@ucla": "UCuclaofficial"}
YOUTUBE_USERNAMES = {"alexlegacy": "UC123"}


def fake_youtube(request: httpx.Request) -> httpx.Response:
    params = request.url.params
    if params.get("key") != API_KEY:
        return httpx.Response(403, text="API key not valid")
    if params.get("id") == "UCQUOTA":
        return httpx.Response(403, text='{"error": {"errors": [{"reason": "quotaExceeded"}]}}')
    if "id" in params:
        item = YOUTUBE_CHANNELS.get(params["id"])
        return httpx.Response(200, json={"items": [item] if item else []})
    if "forHandle" in params:
        channel_id = YOUTUBE_HANDLES.get(params["forHandle"].lower())
        return httpx.Response(200, json={"items": [{"id": channel_id}] if channel_id else []})
    if "forUsername" in params:
        channel_id = YOUTUBE_USERNAMES.get(params["forUsername"].lower())
        return httpx.Response(200, json={"items": [{"id": channel_id}] if channel_id else []})
    return httpx.Response(400, text="bad request")


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
async def youtube():
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_youtube))
    client = YouTubeClient(API_KEY, base_url="https://youtube.test/v3", http=http)
    yield client
    await http.aclose()


@pytest.fixture
def settings():
    return Settings(store_backend="memory", youtube_api_key=API_KEY)


@pytest.fixture
def app(settings, store, youtube):
    return create_app(settings=settings, store=store, youtube=youtube)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def add_creator(store, name, **fields):
    return await store.creators.insert({"name": name, **fields})


SIGNED_IN = {"X-User-Id": "user-1"}
GUEST = {"X-User-Id": "guest-9", "X-User-Anonymous": "true"}
