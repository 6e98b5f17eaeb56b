"""
Tests for the in-memory document store
"""

import pytest
from bson import ObjectId

from nsperf.storage import MemoryStore
from nsperf.storage.base import DESCENDING


@pytest.fixture
def memory_store():
    return MemoryStore()


class TestMemoryStore:
    @pytest.mark.asyncio
    async def test_insert_assigns_object_id(self, memory_store):
        inserted_id = await memory_store.insert_one("device", {"token": "abc"})

        assert isinstance(inserted_id, ObjectId)
        stored = await memory_store.find_one("device", {"_id": inserted_id})
        assert stored == {"_id": inserted_id, "token": "abc"}

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, memory_store):
        inserted_id = await memory_store.insert_one("device", {"token": "abc"})

        found = await memory_store.find_one("device", {"_id": inserted_id})
        found["token"] = "changed"

        again = await memory_store.find_one("device", {"_id": inserted_id})
        assert again["token"] == "abc"

    @pytest.mark.asyncio
    async def test_find_preserves_insertion_order(self, memory_store):
        for name in ("first", "second", "third"):
            await memory_store.insert_one("application", {"name": name})

        documents = await memory_store.find("application", {})

        assert [d["name"] for d in documents] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_find_with_in_operator(self, memory_store):
        await memory_store.insert_one("startupinfo", {"applicationId": "a"})
        await memory_store.insert_one("startupinfo", {"applicationId": "b"})
        await memory_store.insert_one("startupinfo", {"applicationId": "c"})

        documents = await memory_store.find("startupinfo", {"applicationId": {"$in": ["a", "c"]}})

        assert sorted(d["applicationId"] for d in documents) == ["a", "c"]

    @pytest.mark.asyncio
    async def test_unsupported_operator_raises(self, memory_store):
        await memory_store.insert_one("startupinfo", {"applicationId": "a"})

        with pytest.raises(NotImplementedError):
            await memory_store.find("startupinfo", {"applicationId": {"$regex": "a"}})

    @pytest.mark.asyncio
    async def test_find_one_with_descending_sort(self, memory_store):
        await memory_store.insert_one("device", {"token": "dup", "name": "old"})
        await memory_store.insert_one("device", {"token": "dup", "name": "new"})

        newest = await memory_store.find_one(
            "device", {"token": "dup"}, sort=[("_id", DESCENDING)]
        )
        oldest = await memory_store.find_one("device", {"token": "dup"})

        assert newest["name"] == "new"
        assert oldest["name"] == "old"

    @pytest.mark.asyncio
    async def test_find_one_missing_returns_none(self, memory_store):
        assert await memory_store.find_one("device", {"token": "nope"}) is None

    @pytest.mark.asyncio
    async def test_delete_many_counts_removed(self, memory_store):
        await memory_store.insert_one("startupinfo", {"applicationId": "a"})
        await memory_store.insert_one("startupinfo", {"applicationId": "a"})
        await memory_store.insert_one("startupinfo", {"applicationId": "b"})

        removed = await memory_store.delete_many("startupinfo", {"applicationId": "a"})

        assert removed == 2
        remaining = await memory_store.find("startupinfo", {})
        assert [d["applicationId"] for d in remaining] == ["b"]

    @pytest.mark.asyncio
    async def test_delete_many_without_matches(self, memory_store):
        assert await memory_store.delete_many("startupinfo", {"applicationId": "x"}) == 0

    @pytest.mark.asyncio
    async def test_ping(self, memory_store):
        assert await memory_store.ping() is True
