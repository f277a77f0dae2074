"""
Record store contract, exercised against both backends
"""
import pytest

from youmdb.core.config import Settings
from youmdb.core.database import Database
from youmdb.core.errors import InvalidArgument, StoreError
from youmdb.services.store.base import Op, Predicate
from youmdb.services.store.factory import build_store
from youmdb.services.store.memory_store import MemoryRecordStore
from youmdb.services.store.sql_store import SqlRecordStore


@pytest.fixture(params=["memory", "sql"])
async def any_store(request, tmp_path):
    if request.param == "memory":
        yield MemoryRecordStore()
        return
    store = SqlRecordStore(Database(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"))
    await store.startup()
    yield store
    await store.shutdown()


class TestCollectionContract:
    async def test_insert_and_get_by_id(self, any_store):
        created = await any_store.creators.insert({"name": "Alex", "subscriber_count": 10})
        fetched = await any_store.creators.get_by_id(created.id)
        assert fetched.name == "Alex"
        assert fetched.subscriber_count == 10
        assert fetched.created_at is not None

    async def test_missing_id_is_none(self, any_store):
        assert await any_store.creators.get_by_id("does-not-exist") is None
        assert await any_store.reviews.update("does-not-exist", {"likes": []}) is None

    async def test_equals_and_icontains(self, any_store):
        await any_store.creators.insert({"name": "TechGuru Alex", "country": "USA"})
        await any_store.creators.insert({"name": "alexandra", "country": "India"})
        await any_store.creators.insert({"name": "Bob", "country": "USA"})

        usa = await any_store.creators.where("country", "equals", "USA")
        assert sorted(c.name for c in usa) == ["Bob", "TechGuru Alex"]

        alex = await any_store.creators.where("name", Op.ICONTAINS, "ALEX")
        assert sorted(c.name for c in alex) == ["TechGuru Alex", "alexandra"]

    async def test_icontains_treats_wildcards_literally(self, any_store):
        await any_store.creators.insert({"name": "100% Real"})
        await any_store.creators.insert({"name": "1000 Real"})
        results = await any_store.creators.where("name", Op.ICONTAINS, "0%")
        assert [c.name for c in results] == ["100% Real"]

    async def test_find_is_conjunctive(self, any_store):
        await any_store.reviews.insert({"entity_id": "e1", "entity_type": "creator", "user_id": "u1"})
        await any_store.reviews.insert({"entity_id": "e1", "entity_type": "video", "user_id": "u1"})
        found = await any_store.reviews.find(
            Predicate("entity_id", Op.EQUALS, "e1"),
            Predicate("entity_type", Op.EQUALS, "video"),
        )
        assert len(found) == 1
        assert found[0].entity_type.value == "video"

    async def test_update_lists(self, any_store):
        review = await any_store.reviews.insert({"entity_id": "e1", "entity_type": "creator", "user_id": "u1"})
        updated = await any_store.reviews.update(review.id, {"likes": ["u2"], "dislikes": []})
        assert updated.likes == ["u2"]
        assert (await any_store.reviews.get_by_id(review.id)).likes == ["u2"]

    async def test_upsert_by_conflict_key(self, any_store):
        first = await any_store.creators.upsert(
            {"name": "Old", "youtube_channel_id": "UC1", "subscriber_count": 1}, conflict_key="youtube_channel_id"
        )
        second = await any_store.creators.upsert(
            {"name": "New", "youtube_channel_id": "UC1", "subscriber_count": 2}, conflict_key="youtube_channel_id"
        )
        assert second.id == first.id
        assert second.name == "New"
        assert len(await any_store.creators.get_all()) == 1

    async def test_unknown_field_rejected(self, any_store):
        with pytest.raises(InvalidArgument):
            await any_store.creators.where("colour", Op.EQUALS, "red")

    async def test_unknown_operator_rejected(self, any_store):
        with pytest.raises(InvalidArgument):
            await any_store.creators.where("name", "startswith", "A")

    async def test_invalid_record_rejected(self, any_store):
        with pytest.raises(InvalidArgument):
            await any_store.creators.insert({"name": "", "subscriber_count": 1})
        with pytest.raises(InvalidArgument):
            await any_store.creators.insert({"name": "Neg", "subscriber_count": -1})


class TestBackends:
    def test_substring_push_flags(self, tmp_path):
        assert MemoryRecordStore().creators.supports_substring_push is False
        sql = SqlRecordStore(Database(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}"))
        assert sql.creators.supports_substring_push is True

    def test_factory_selects_backend(self):
        assert build_store(Settings(store_backend="memory")).backend == "memory"
        with pytest.raises(InvalidArgument):
            build_store(Settings(store_backend="firestore"))

    async def test_backend_failure_surfaces_as_store_error(self, tmp_path):
        missing_dir = tmp_path / "missing" / "nested" / "store.db"
        store = SqlRecordStore(Database(f"sqlite+aiosqlite:///{missing_dir}"))
        with pytest.raises(StoreError):
            await store.creators.get_all()
        await store.shutdown()
