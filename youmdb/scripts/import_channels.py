"""
Batch-import YouTube channels as creators.

    python -m youmdb.scripts.import_channels UC_x5XG1OV2P6uZZ5FSM9Ttw @somehandle
    python -m youmdb.scripts.import_channels --file channels.txt

Channel files hold one reference per line; blank lines and ``#`` comments
are ignored.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from youmdb.core.config import get_settings
from youmdb.services.importer.import_service import ImportService
from youmdb.services.importer.youtube_client import YouTubeClient
from youmdb.services.store.factory import build_store

logger = logging.getLogger(__name__)


def load_channel_list(path: Path) -> List[str]:
    channels = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        channels.append(line)
    return channels


async def run_import(identifiers: List[str], api_key: Optional[str]) -> int:
    settings = get_settings()
    store = build_store(settings)
    youtube = YouTubeClient(api_key or settings.youtube_api_key, base_url=settings.youtube_api_base_url)
    await store.startup()
    try:
        imported = await ImportService(store, youtube).import_many(identifiers)
    finally:
        await youtube.aclose()
        await store.shutdown()
    for creator in imported:
        print(f"Inserted/updated: {creator.name} ({creator.youtube_channel_id})")
    return len(imported)


def main() -> int:
    parser = argparse.ArgumentParser(description="Import YouTube channels into the creators collection.")
    parser.add_argument("channels", nargs="*", help="Channel ids, @handles or channel URLs")
    parser.add_argument("--file", type=Path, help="File with one channel reference per line")
    parser.add_argument("--api-key", help="YouTube Data API key (defaults to YOUMDB_YOUTUBE_API_KEY)")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level.upper())

    identifiers = list(args.channels)
    if args.file:
        identifiers.extend(load_channel_list(args.file))
    if not identifiers:
        parser.error("no channels given")

    imported = asyncio.run(run_import(identifiers, args.api_key))
    return 0 if imported == len(identifiers) else 1


if __name__ == "__main__":
    raise SystemExit(main())
