"""
YouMDB Core Settings — creator discovery & review backend.

Every value can be overridden through the environment (``YOUMDB_`` prefix)
or a local ``.env`` file.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8",
        env_prefix="YOUMDB_", case_sensitive=False,
    )

    # ── App ──────────────────────────────────────────────────────────────
    app_name: str = "YouMDB"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    # ── Record store ─────────────────────────────────────────────────────
    # "sql" (PostgreSQL through SQLAlchemy) or "memory" (in-process documents)
    store_backend: str = "sql"

    # ── PostgreSQL ───────────────────────────────────────────────────────
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "youmdb"
    db_password: str = "youmdb_secret"
    db_name: str = "youmdb"
    db_echo: bool = False
    # Full URL override, e.g. "sqlite+aiosqlite:///./youmdb.db"
    database_url_override: Optional[str] = None

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def database_url_sync(self) -> str:
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # ── YouTube Data API ─────────────────────────────────────────────────
    youtube_api_key: Optional[str] = None
    youtube_api_base_url: str = "https://www.googleapis.com/youtube/v3"

    # ── Catalogue ────────────────────────────────────────────────────────
    seed_demo_data: bool = False
    trending_default_limit: int = 10
    placeholder_avatar_base: str = "https://placehold.co/100x100/7c3aed/ffffff"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
