"""
Tests for YouTube channel import and suggestions
"""
import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from youmdb.core.database import Database
from youmdb.core.errors import ImportFailed, InvalidArgument, NotFound, StoreError
from youmdb.core.identity import ANONYMOUS, Identity
from youmdb.models import models
from youmdb.schemas.schemas import ChannelMetadata
from youmdb.scripts.import_channels import load_channel_list
from youmdb.services.importer.import_service import ImportService, creator_fields
from youmdb.services.importer.youtube_client import YouTubeClient, extract_channel_hint
from youmdb.services.store.sql_store import SqlRecordStore
from youmdb.services.suggestions.suggestion_service import SuggestionService


@pytest.fixture
def importer(store, youtube):
    return ImportService(store, youtube)


class TestExtractChannelHint:
    @pytest.mark.parametrize("raw,expected", [
        ("UC_x5XG1OV2P6uZZ5FSM9Ttw", ("channel_id", "UC_x5XG1OV2P6uZZ5FSM9Ttw")),
        ("@alexbuilds", ("handle", "alexbuilds")),
        ("https://www.youtube.com/channel/UC123", ("channel_id", "UC123")),
        ("https://youtube.com/@AlexBuilds/videos", ("handle", "AlexBuilds")),
        ("https://www.youtube.com/user/alexlegacy", ("username", "alexlegacy")),
        ("alexbuilds", ("handle", "alexbuilds")),
    ])
    def test_recognised_forms(self, raw, expected):
        assert extract_channel_hint(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "https://example.com/some page"])
    def test_unrecognised(self, raw):
        with pytest.raises(ImportFailed):
            extract_channel_hint(raw)


class TestImportChannel:
    async def test_round_trip_matches_api_values(self, store, importer):
        creator = await importer.import_channel("UC123")
        fetched = await store.creators.get_by_id(creator.id)
        assert fetched.name == "Alex Builds"
        assert fetched.country == "US"
        assert fetched.subscriber_count == 123456
        assert fetched.total_views == 9876543
        assert fetched.youtube_channel_id == "UC123"
        assert fetched.profile_picture_url == "https://yt3.example/alex.jpg"
        assert fetched.average_rating == 0.0

    async def test_reimport_updates_in_place(self, store, importer):
        first = await importer.import_channel("UC123")
        await store.creators.update(first.id, {"genre": "DIY", "average_rating": 4.5})
        second = await importer.import_channel("@alexbuilds")
        assert second.id == first.id
        assert second.genre == "DIY"
        assert second.average_rating == 4.5
        assert len(await store.creators.get_all()) == 1

    async def test_reimport_keeps_fields_the_api_omits(self, store, importer):
        first = await importer.import_channel("UCnocountry")
        await store.creators.update(first.id, {"bio": "Curated bio", "profile_picture_url": "https://img.example/n.png"})
        second = await importer.import_channel("UCnocountry")
        assert second.bio == "Curated bio"
        assert second.profile_picture_url == "https://img.example/n.png"

    def test_creator_fields_drops_missing_values(self):
        fields = creator_fields(ChannelMetadata(channel_id="UCx", title="X"))
        assert "bio" not in fields
        assert "profile_picture_url" not in fields
        assert fields["country"] == "Unknown"

    async def test_bare_uc_token_falls_back_to_handle(self, importer):
        creator = await importer.import_channel("UCLA")
        assert creator.youtube_channel_id == "UCuclaofficial"
        assert creator.name == "UCLA"

    async def test_missing_country_defaults(self, importer):
        creator = await importer.import_channel("UCnocountry")
        assert creator.country == "Unknown"

    async def test_legacy_username(self, importer):
        creator = await importer.import_channel("https://www.youtube.com/user/alexlegacy")
        assert creator.youtube_channel_id == "UC123"

    @pytest.mark.parametrize("identifier", ["UCdoesnotexist", "@nobodyhere"])
    async def test_no_match(self, store, importer, identifier):
        with pytest.raises(ImportFailed):
            await importer.import_channel(identifier)
        assert await store.creators.get_all() == []

    async def test_quota_exceeded(self, importer):
        with pytest.raises(ImportFailed, match="quota"):
            await importer.import_channel("UCQUOTA")

    async def test_missing_api_key(self, store):
        client = YouTubeClient(None)
        importer = ImportService(store, client)
        try:
            with pytest.raises(ImportFailed):
                await importer.import_channel("UC123")
        finally:
            await client.aclose()

    async def test_import_many_skips_failures(self, importer):
        imported = await importer.import_many(["UC123", "UCdoesnotexist", "UCnocountry"])
        assert [c.youtube_channel_id for c in imported] == ["UC123", "UCnocountry"]


class TestSuggestions:
    async def test_submit_and_list(self, store):
        service = SuggestionService(store)
        user = Identity("alice", False)
        suggestion = await service.submit(user, " https://youtube.com/@alexbuilds ", "DIY", "please")
        assert suggestion.url == "https://youtube.com/@alexbuilds"
        assert suggestion.status.value == "pending"
        assert [s.id for s in await service.list_for_user("alice")] == [suggestion.id]

    async def test_guest_suggestion_has_no_user(self, store):
        suggestion = await SuggestionService(store).submit(ANONYMOUS, "UC123")
        assert suggestion.user_id is None

    async def test_empty_url(self, store):
        with pytest.raises(InvalidArgument):
            await SuggestionService(store).submit(ANONYMOUS, "  ")

    async def test_import_marks_imported(self, store, importer):
        service = SuggestionService(store)
        suggestion = await service.submit(ANONYMOUS, "https://youtube.com/@alexbuilds")
        updated = await service.import_suggestion(suggestion.id, importer)
        assert updated.status.value == "imported"
        creator = await store.creators.get_by_id(updated.creator_id)
        assert creator.name == "Alex Builds"

    async def test_failed_import_marks_failed(self, store, importer):
        service = SuggestionService(store)
        suggestion = await service.submit(ANONYMOUS, "@nobodyhere")
        with pytest.raises(ImportFailed):
            await service.import_suggestion(suggestion.id, importer)
        stored = await store.suggestions.get_by_id(suggestion.id)
        assert stored.status.value == "failed"

    async def test_import_unknown_suggestion(self, store, importer):
        with pytest.raises(NotFound):
            await SuggestionService(store).import_suggestion("missing", importer)


def test_load_channel_list(tmp_path):
    path = tmp_path / "channels.txt"
    path.write_text("# seed list\nUC123\n\n  @alexbuilds  \n", encoding="utf-8")
    assert load_channel_list(path) == ["UC123", "@alexbuilds"]


class FailsFirstUpsert:
    """Creators collection whose first upsert hits a backend error."""

    def __init__(self, inner):
        self._inner = inner
        self.failed = False

    def __getattr__(self, item):
        return getattr(self._inner, item)

    async def upsert(self, data, conflict_key="id"):
        if not self.failed:
            self.failed = True
            raise StoreError("value out of int32 range")
        return await self._inner.upsert(data, conflict_key=conflict_key)


async def test_import_many_skips_store_failures(store, importer):
    store.creators = FailsFirstUpsert(store.creators)
    imported = await importer.import_many(["UC123", "UCnocountry"])
    assert [c.youtube_channel_id for c in imported] == ["UCnocountry"]


class TestLargeCounts:
    def test_count_columns_are_64_bit_on_postgres(self):
        ddl = str(CreateTable(models.Creator.__table__).compile(dialect=postgresql.dialect()))
        assert "subscriber_count BIGINT" in ddl
        assert "total_views BIGINT" in ddl
        video_ddl = str(CreateTable(models.Video.__table__).compile(dialect=postgresql.dialect()))
        assert "views BIGINT" in video_ddl

    async def test_import_channel_with_huge_view_count(self, tmp_path, youtube):
        sql_store = SqlRecordStore(Database(f"sqlite+aiosqlite:///{tmp_path / 'import.db'}"))
        await sql_store.startup()
        try:
            creator = await ImportService(sql_store, youtube).import_channel("UCmega")
            fetched = await sql_store.creators.get_by_id(creator.id)
            assert fetched.total_views == 300_000_000_000
            assert fetched.subscriber_count == 280_000_000
        finally:
            await sql_store.shutdown()
