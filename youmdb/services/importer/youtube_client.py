"""
Minimal async client for the YouTube Data API v3 ``channels`` resource.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Tuple

import httpx

from youmdb.core.errors import ImportFailed
from youmdb.schemas.schemas import ChannelMetadata

logger = logging.getLogger(__name__)

_CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]+$")
_HANDLE_RE = re.compile(r"^[A-Za-z0-9._-]{3,30}$")


def extract_channel_hint(identifier: str) -> Tuple[str, str]:
    """
    Classify a channel reference.

    Returns ``(kind, value)`` where kind is ``channel_id``, ``handle`` or
    ``username``.
    """
    raw = (identifier or "").strip()
    if not raw:
        raise ImportFailed("A channel URL, handle or id is required")

    if _CHANNEL_ID_RE.match(raw):
        return "channel_id", raw

    if raw.startswith("@"):
        return "handle", raw[1:].strip()

    m = re.search(r"youtube\.com/channel/([A-Za-z0-9_-]+)", raw, flags=re.IGNORECASE)
    if m:
        return "channel_id", m.group(1)

    m = re.search(r"youtube\.com/@([A-Za-z0-9._-]+)", raw, flags=re.IGNORECASE)
    if m:
        return "handle", m.group(1)

    m = re.search(r"youtube\.com/user/([A-Za-z0-9._-]+)", raw, flags=re.IGNORECASE)
    if m:
        return "username", m.group(1)

    if _HANDLE_RE.match(raw):
        return "handle", raw

    raise ImportFailed(f"Cannot recognise a YouTube channel in '{raw}'")


def looks_like_handle(identifier: str) -> bool:
    """True for a bare token (no URL, no ``@``) that is also a valid handle."""
    return bool(_HANDLE_RE.match((identifier or "").strip()))


def _to_int(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def channel_metadata_from_item(item: Dict[str, Any]) -> ChannelMetadata:
    snippet = item.get("snippet") or {}
    stats = item.get("statistics") or {}
    thumbs = snippet.get("thumbnails") or {}
    thumb = thumbs.get("default") or thumbs.get("medium") or thumbs.get("high") or {}
    return ChannelMetadata(
        channel_id=item["id"],
        title=snippet.get("title") or item["id"],
        description=snippet.get("description"),
        country=snippet.get("country"),
        thumbnail_url=thumb.get("url"),
        subscriber_count=_to_int(stats.get("subscriberCount")),
        view_count=_to_int(stats.get("viewCount")),
    )


class YouTubeClient:
    """Reads public channel metadata with a caller-supplied API key."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://www.googleapis.com/youtube/v3",
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise ImportFailed("YouTube API key is not configured")
        try:
            response = await self._http.get(
                f"{self.base_url}/{path}", params={**params, "key": self.api_key}
            )
        except httpx.HTTPError as e:
            raise ImportFailed(f"YouTube is unavailable: {e}") from e

        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as e:
                raise ImportFailed("YouTube returned a malformed response") from e

        lowered = response.text.lower()
        if response.status_code in {403, 429} and "quota" in lowered:
            raise ImportFailed("YouTube API quota exceeded")
        raise ImportFailed(f"YouTube API returned HTTP {response.status_code}")

    async def fetch_channel(self, channel_id: str) -> Optional[ChannelMetadata]:
        payload = await self._get("channels", {"part": "snippet,statistics", "id": channel_id})
        items = payload.get("items") or []
        if not items:
            return None
        return channel_metadata_from_item(items[0])

    async def resolve_handle(self, handle: str) -> Optional[str]:
        payload = await self._get("channels", {"part": "id", "forHandle": f"@{handle.lstrip('@')}"})
        items = payload.get("items") or []
        return items[0].get("id") if items else None

    async def resolve_username(self, username: str) -> Optional[str]:
        payload = await self._get("channels", {"part": "id", "forUsername": username})
        items = payload.get("items") or []
        return items[0].get("id") if items else None
